"""
設定ストアとホスト設定ヘルパーのテスト
"""

from __future__ import annotations

import json

import pytest

from azure_translator.preferences import (
    PROPERTY_NEURAL,
    PROPERTY_REGION,
    PROPERTY_SUBSCRIPTION_KEY,
    PROPERTY_V2,
    HostPreferences,
    MemoryPreferenceStore,
    get_region,
    get_subscription_key,
    is_neural_enabled,
    is_v2_enabled,
    validate_preferences,
)
from azure_translator.translation.exceptions import TranslationConfigError


class TestPropertyNames:
    """ホスト側の設定名のテスト"""

    def test_names(self):
        assert PROPERTY_SUBSCRIPTION_KEY == "microsoft.api.subscription_key"
        assert PROPERTY_REGION == "microsoft.api.region"
        assert PROPERTY_V2 == "microsoft.v2"
        assert PROPERTY_NEURAL == "microsoft.neural"

    def test_store_satisfies_protocol(self):
        assert isinstance(MemoryPreferenceStore(), HostPreferences)


class TestHelpers:
    """設定参照ヘルパーのテスト"""

    def test_subscription_key(self, store):
        assert get_subscription_key(store) == "abcdefg"

    @pytest.mark.parametrize("value", ["", "  "])
    def test_subscription_key_missing(self, value):
        prefs = MemoryPreferenceStore()
        prefs.set_credential(PROPERTY_SUBSCRIPTION_KEY, value, temporary=True)
        with pytest.raises(TranslationConfigError, match="configure credentials"):
            get_subscription_key(prefs)

    def test_region_default_empty(self, empty_store):
        assert get_region(empty_store) == ""

    def test_region(self, empty_store):
        empty_store.set_preference(PROPERTY_REGION, " westeurope ")
        assert get_region(empty_store) == "westeurope"

    def test_flags_default_false(self, empty_store):
        assert is_v2_enabled(empty_store) is False
        assert is_neural_enabled(empty_store) is False

    @pytest.mark.parametrize("value, expected", [(True, True), ("true", True), ("1", True), ("no", False), (False, False)])
    def test_v2_flag_values(self, empty_store, value, expected):
        empty_store.set_preference(PROPERTY_V2, value)
        assert is_v2_enabled(empty_store) is expected

    def test_neural_only_with_v2(self, empty_store):
        empty_store.set_preference(PROPERTY_NEURAL, True)
        assert is_neural_enabled(empty_store) is False
        empty_store.set_preference(PROPERTY_V2, True)
        assert is_neural_enabled(empty_store) is True

    def test_validate_preferences_ok(self, store):
        assert validate_preferences(store) == []

    def test_validate_preferences_problems(self, empty_store):
        empty_store.set_preference(PROPERTY_NEURAL, True)
        problems = validate_preferences(empty_store)
        assert len(problems) == 2
        assert any(PROPERTY_SUBSCRIPTION_KEY in p for p in problems)
        assert any(PROPERTY_NEURAL in p for p in problems)


class TestMemoryPreferenceStore:
    """MemoryPreferenceStore のテスト"""

    def test_temporary_credential(self):
        prefs = MemoryPreferenceStore()
        prefs.set_credential(PROPERTY_SUBSCRIPTION_KEY, "abcdefg", temporary=True)
        assert prefs.get_credential(PROPERTY_SUBSCRIPTION_KEY) == "abcdefg"
        assert prefs.is_credential_stored_temporarily(PROPERTY_SUBSCRIPTION_KEY) is True

    def test_persistent_credential(self):
        prefs = MemoryPreferenceStore()
        prefs.set_credential(PROPERTY_SUBSCRIPTION_KEY, "abcdefg", temporary=False)
        assert prefs.is_credential_stored_temporarily(PROPERTY_SUBSCRIPTION_KEY) is False

    def test_unknown_credential_is_empty(self):
        assert MemoryPreferenceStore().get_credential("missing") == ""

    def test_preference_default(self):
        assert MemoryPreferenceStore().get_preference("missing", "fallback") == "fallback"

    def test_temporary_credential_not_persisted(self, tmp_path):
        """一時保存の認証情報はファイルに空文字列として保存される"""
        path = tmp_path / "prefs.json"
        prefs = MemoryPreferenceStore(path)
        prefs.set_credential(PROPERTY_SUBSCRIPTION_KEY, "abcdefg", temporary=True)
        prefs.set_preference(PROPERTY_V2, True)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["credentials"][PROPERTY_SUBSCRIPTION_KEY] == ""
        assert data["preferences"][PROPERTY_V2] is True

        reloaded = MemoryPreferenceStore(path)
        assert reloaded.get_credential(PROPERTY_SUBSCRIPTION_KEY) == ""
        assert reloaded.get_preference(PROPERTY_V2) is True

    def test_persistent_credential_roundtrip(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        MemoryPreferenceStore(path).set_credential(PROPERTY_SUBSCRIPTION_KEY, "abcdefg", temporary=False)
        assert MemoryPreferenceStore(path).get_credential(PROPERTY_SUBSCRIPTION_KEY) == "abcdefg"

    def test_corrupt_file_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")
        prefs = MemoryPreferenceStore(path)
        assert prefs.get_credential(PROPERTY_SUBSCRIPTION_KEY) == ""

    def test_load_without_path_is_noop(self):
        prefs = MemoryPreferenceStore()
        prefs.set_preference(PROPERTY_V2, True)
        prefs._load()
        assert prefs.get_preference(PROPERTY_V2) is True


class TestFromEnv:
    """MemoryPreferenceStore.from_env のテスト"""

    def test_from_env(self):
        prefs = MemoryPreferenceStore.from_env(
            {
                "AZURE_TRANSLATOR_KEY": "abcdefg",
                "AZURE_TRANSLATOR_REGION": "westeurope",
                "AZURE_TRANSLATOR_V2": "true",
                "AZURE_TRANSLATOR_NEURAL": "0",
            }
        )
        assert get_subscription_key(prefs) == "abcdefg"
        assert prefs.is_credential_stored_temporarily(PROPERTY_SUBSCRIPTION_KEY) is True
        assert get_region(prefs) == "westeurope"
        assert is_v2_enabled(prefs) is True
        assert is_neural_enabled(prefs) is False

    def test_from_empty_env(self):
        prefs = MemoryPreferenceStore.from_env({})
        assert prefs.get_credential(PROPERTY_SUBSCRIPTION_KEY) == ""
        assert is_v2_enabled(prefs) is False

    def test_from_process_env(self, monkeypatch):
        monkeypatch.setenv("AZURE_TRANSLATOR_KEY", "from-env")
        assert MemoryPreferenceStore.from_env().get_credential(PROPERTY_SUBSCRIPTION_KEY) == "from-env"

"""
ホストアプリケーション連携（認証情報・設定）

コネクタ本体は HostPreferences プロトコルを通じてのみ
サブスクリプションキー・リージョン・各種フラグを参照する。
MemoryPreferenceStore はホストを持たない利用（CLI、テスト）向けの既定実装。
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union, runtime_checkable

from .i18n import get_string
from .translation.exceptions import TranslationConfigError

logger = logging.getLogger(__name__)

PROPERTY_SUBSCRIPTION_KEY = "microsoft.api.subscription_key"
PROPERTY_REGION = "microsoft.api.region"
PROPERTY_V2 = "microsoft.v2"
PROPERTY_NEURAL = "microsoft.neural"

ENV_KEY = "AZURE_TRANSLATOR_KEY"
ENV_REGION = "AZURE_TRANSLATOR_REGION"
ENV_V2 = "AZURE_TRANSLATOR_V2"
ENV_NEURAL = "AZURE_TRANSLATOR_NEURAL"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@runtime_checkable
class HostPreferences(Protocol):
    """ホストが提供する認証情報・設定ストア"""

    def get_credential(self, credential_id: str) -> str:
        ...

    def set_credential(self, credential_id: str, value: str, temporary: bool) -> None:
        ...

    def get_preference(self, name: str, default: Any = None) -> Any:
        ...

    def set_preference(self, name: str, value: Any) -> None:
        ...


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def get_subscription_key(preferences: HostPreferences) -> str:
    """
    サブスクリプションキーを取得

    Raises:
        TranslationConfigError: キーが未設定または空の場合
    """
    key = preferences.get_credential(PROPERTY_SUBSCRIPTION_KEY)
    if not key or not key.strip():
        raise TranslationConfigError(get_string("MT_ENGINE_MICROSOFT_SUBSCRIPTION_KEY_NOTFOUND"))
    return key.strip()


def get_region(preferences: HostPreferences) -> str:
    """リージョンを取得（未設定なら空文字列）"""
    region = preferences.get_preference(PROPERTY_REGION, "")
    return str(region).strip() if region else ""


def is_v2_enabled(preferences: HostPreferences) -> bool:
    """レガシー V2 API を使うかどうか"""
    return _as_bool(preferences.get_preference(PROPERTY_V2, False))


def is_neural_enabled(preferences: HostPreferences) -> bool:
    """
    ニューラルエンジン（category=generalnn）を使うかどうか

    ニューラル指定は V2 でのみ意味を持つため、V2 が無効なら常に False。
    """
    if not _as_bool(preferences.get_preference(PROPERTY_NEURAL, False)):
        return False
    if not is_v2_enabled(preferences):
        logger.debug("Neural option ignored because the V2 API is not selected")
        return False
    return True


def validate_preferences(preferences: HostPreferences) -> list[str]:
    """
    設定の組み合わせを検査し、問題点のメッセージを返す

    Returns:
        問題点のリスト（空なら問題なし）
    """
    problems = []
    key = preferences.get_credential(PROPERTY_SUBSCRIPTION_KEY)
    if not key or not key.strip():
        problems.append(f"{PROPERTY_SUBSCRIPTION_KEY} is not set")
    if _as_bool(preferences.get_preference(PROPERTY_NEURAL, False)) and not is_v2_enabled(preferences):
        problems.append(f"{PROPERTY_NEURAL} has no effect unless {PROPERTY_V2} is enabled")
    return problems


class MemoryPreferenceStore:
    """
    メモリ上の設定ストア

    一時的な認証情報はセッション内のみ保持し、永続化対象の認証情報と設定は
    path が指定されていれば JSON ファイルに保存する。

    Usage:
        store = MemoryPreferenceStore()
        store.set_credential(PROPERTY_SUBSCRIPTION_KEY, "xxxx", temporary=True)
        store.set_preference(PROPERTY_V2, True)
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._path = Path(path) if path is not None else None
        self._session_credentials: Dict[str, str] = {}
        self._persistent_credentials: Dict[str, str] = {}
        self._preferences: Dict[str, Any] = {}
        self._lock = threading.Lock()
        if self._path is not None and self._path.exists():
            self._load()

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> MemoryPreferenceStore:
        """環境変数からストアを作成（キーは一時的な認証情報として扱う）"""
        env = os.environ if environ is None else environ
        store = cls()
        key = env.get(ENV_KEY, "")
        if key:
            store.set_credential(PROPERTY_SUBSCRIPTION_KEY, key, temporary=True)
        region = env.get(ENV_REGION, "")
        if region:
            store.set_preference(PROPERTY_REGION, region)
        if ENV_V2 in env:
            store.set_preference(PROPERTY_V2, _as_bool(env[ENV_V2]))
        if ENV_NEURAL in env:
            store.set_preference(PROPERTY_NEURAL, _as_bool(env[ENV_NEURAL]))
        return store

    def get_credential(self, credential_id: str) -> str:
        with self._lock:
            if credential_id in self._session_credentials:
                return self._session_credentials[credential_id]
            return self._persistent_credentials.get(credential_id, "")

    def set_credential(self, credential_id: str, value: str, temporary: bool) -> None:
        with self._lock:
            self._session_credentials[credential_id] = value
            if temporary:
                # 一時保存の場合は永続側を空にする
                self._persistent_credentials[credential_id] = ""
            else:
                self._persistent_credentials[credential_id] = value
        self._save()

    def is_credential_stored_temporarily(self, credential_id: str) -> bool:
        """認証情報がセッション内のみに保持されているか"""
        with self._lock:
            return bool(self._session_credentials.get(credential_id)) and not self._persistent_credentials.get(
                credential_id
            )

    def get_preference(self, name: str, default: Any = None) -> Any:
        with self._lock:
            return self._preferences.get(name, default)

    def set_preference(self, name: str, value: Any) -> None:
        with self._lock:
            self._preferences[name] = value
        self._save()

    def _load(self) -> None:
        if self._path is None:
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to load preferences from %s: %s", self._path, e)
            return
        self._persistent_credentials = dict(data.get("credentials", {}))
        self._preferences = dict(data.get("preferences", {}))

    def _save(self) -> None:
        if self._path is None:
            return
        with self._lock:
            data = {
                "credentials": dict(self._persistent_credentials),
                "preferences": dict(self._preferences),
            }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

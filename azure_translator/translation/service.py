"""
翻訳サービス（ホスト向けの単一エントリポイント）

キャッシュ参照 → プロトコル選択 → トークン取得/再試行 → キャッシュ格納 を統括する。
1 インスタンスにつき 1 つのロックで translate 全体を直列化し、
トークンとキャッシュの共有状態も同じロックで保護する。
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Dict, Optional

import httpx

from ..config import ConfigValidator, get_default_config, merge_config
from ..preferences import HostPreferences, MemoryPreferenceStore, is_v2_enabled
from .base import BaseRequester
from .cache import ResponseCache
from .factory import RequesterFactory
from .lang_codes import to_language_pair
from .metadata import ProtocolMetadata, ProtocolVersion
from .result import ResultStatus, TranslationResult
from .transport import create_client

logger = logging.getLogger(__name__)


class TranslationService:
    """
    Microsoft Translator 翻訳サービス

    プロトコル（V2 / V3）は呼び出しごとに設定から選択し、
    前回と異なる場合は新しいリクエスタを作成する（再起動不要）。

    Examples:
        >>> store = MemoryPreferenceStore()
        >>> store.set_credential(PROPERTY_SUBSCRIPTION_KEY, "xxxx", temporary=True)
        >>> with TranslationService(store) as service:
        ...     service.translate("en", "de", "Buy tomorrow")
        'Morgen kaufen gehen ein'
    """

    def __init__(
        self,
        preferences: Optional[HostPreferences] = None,
        config: Optional[Dict[str, Any]] = None,
        client: Optional[httpx.Client] = None,
        cache: Optional[ResponseCache] = None,
    ):
        """
        翻訳サービスを初期化

        Args:
            preferences: 認証情報・設定ストア（省略時は環境変数から作成）
            config: DEFAULT_CONFIG への上書き設定
            client: HTTP クライアント（省略時は作成し、close() で閉じる）
            cache: レスポンスキャッシュ（省略時は設定値で作成）

        Raises:
            ValueError: 設定の検証に失敗した場合
        """
        self._config = merge_config(get_default_config(), config)
        ConfigValidator.validate_or_raise(self._config)

        self._preferences = preferences if preferences is not None else MemoryPreferenceStore.from_env()
        self._owns_client = client is None
        self._client = client if client is not None else create_client(self._config["http"]["timeout"])

        cache_config = self._config["cache"]
        self._cache = cache if cache is not None else ResponseCache(
            max_entries=cache_config["max_entries"],
            ttl_seconds=cache_config["ttl_seconds"],
            max_key_length=cache_config["max_key_length"],
        )

        self._lock = threading.RLock()
        self._requester: Optional[BaseRequester] = None
        self._active_protocol: Optional[ProtocolVersion] = None

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    @property
    def preferences(self) -> HostPreferences:
        return self._preferences

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    @property
    def active_protocol(self) -> Optional[ProtocolVersion]:
        """現在のリクエスタのプロトコル（未選択なら None）"""
        return self._active_protocol

    def selected_protocol(self) -> ProtocolVersion:
        """設定から選択されるプロトコル"""
        return ProtocolVersion.LEGACY if is_v2_enabled(self._preferences) else ProtocolVersion.CURRENT

    def translate(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """
        テキストを翻訳

        Args:
            source_lang: ソース言語タグ
            target_lang: ターゲット言語タグ
            text: 翻訳対象テキスト

        Returns:
            翻訳テキスト。翻訳が得られなかった場合は None

        Raises:
            TranslationConfigError: サブスクリプションキー未設定
            TranslationNetworkError: 通信失敗、再試行後も認証拒否
        """
        result = self.translate_result(source_lang, target_lang, text)
        if result.status is ResultStatus.NO_RESULT:
            return None
        return result.text

    def translate_result(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        """
        テキストを翻訳し、TranslationResult を返す

        空の翻訳・NO_RESULT・例外はキャッシュしない。
        """
        pair = to_language_pair(source_lang, target_lang)

        # 入力バリデーション: 空文字列
        if not text or not text.strip():
            return TranslationResult.ok(
                text="",
                original_text=text,
                source_lang=pair.source,
                target_lang=pair.target,
            )

        with self._lock:
            cached = self._cache.get(pair.source, pair.target, text)
            if cached is not None:
                logger.debug("Cache hit for %s -> %s", pair.source, pair.target)
                return TranslationResult.ok(
                    text=cached,
                    original_text=text,
                    source_lang=pair.source,
                    target_lang=pair.target,
                    protocol=self._active_protocol.value if self._active_protocol else None,
                ).as_cached()

            requester = self._get_requester()
            result = requester.translate(source_lang, target_lang, text)
            if result.is_ok:
                self._cache.put(pair.source, pair.target, text, result.text)
            return result

    async def translate_async(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """
        非同期翻訳

        同期メソッドを asyncio.to_thread でラップ。
        """
        return await asyncio.to_thread(self.translate, source_lang, target_lang, text)

    def _get_requester(self) -> BaseRequester:
        selected = self.selected_protocol()
        if self._requester is None or self._active_protocol is not selected:
            if self._active_protocol is not None:
                logger.info(
                    "Switching Microsoft Translator protocol: %s -> %s",
                    self._active_protocol.value,
                    selected.value,
                )
            self._requester = RequesterFactory.create_requester(
                selected.value, **self._requester_options(selected)
            )
            self._active_protocol = selected
        return self._requester

    def _requester_options(self, protocol: ProtocolVersion) -> Dict[str, Any]:
        endpoints = self._config["endpoints"]
        metadata = ProtocolMetadata.get(protocol.value)
        if metadata is None:
            raise ValueError(f"Unknown protocol: {protocol.value}")
        options: Dict[str, Any] = {
            "preferences": self._preferences,
            "client": self._client,
            "url": endpoints[metadata.url_config_key],
            "token_url": endpoints["token_url"],
        }
        if protocol is ProtocolVersion.CURRENT:
            options["auth"] = self._config["v3"]["auth"]
        return options

    def on_project_closed(self) -> None:
        """プロジェクト/セッション終了時の通知（キャッシュを破棄）"""
        logger.info("Project closed; discarding cached translations")
        self.clear_cache()

    def clear_cache(self) -> None:
        """キャッシュを全削除"""
        with self._lock:
            self._cache.clear()

    def close(self) -> None:
        """所有している HTTP クライアントを閉じる"""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> TranslationService:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

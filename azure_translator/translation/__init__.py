"""
Microsoft Translator 翻訳パイプライン

トークン取得・プロトコル別リクエスト（V2 / V3）・言語コード正規化・
レスポンスキャッシュを提供する。

Usage:
    from azure_translator.preferences import MemoryPreferenceStore
    from azure_translator.translation import TranslationService

    store = MemoryPreferenceStore.from_env()
    with TranslationService(store) as service:
        print(service.translate("en", "de", "Buy tomorrow"))

    # プロジェクト終了時
    service.on_project_closed()
"""

from __future__ import annotations

from .base import BaseRequester
from .cache import ResponseCache, bound_text
from .exceptions import (
    TranslationAuthError,
    TranslationConfigError,
    TranslationError,
    TranslationNetworkError,
)
from .factory import RequesterFactory
from .lang_codes import (
    CHINESE_SIMPLIFIED,
    CHINESE_TRADITIONAL,
    LanguagePair,
    normalize_for_microsoft,
    to_base_language,
    to_language_pair,
)
from .metadata import ProtocolInfo, ProtocolMetadata, ProtocolVersion
from .result import ResultStatus, TranslationResult
from .retry import with_token_refresh
from .service import TranslationService
from .token import TokenProvider

__all__ = [
    # Core classes
    "TranslationService",
    "BaseRequester",
    "RequesterFactory",
    "ResponseCache",
    "TokenProvider",
    "TranslationResult",
    "ResultStatus",
    "ProtocolMetadata",
    "ProtocolInfo",
    "ProtocolVersion",
    # Exceptions
    "TranslationError",
    "TranslationConfigError",
    "TranslationNetworkError",
    "TranslationAuthError",
    # Language code utilities
    "LanguagePair",
    "CHINESE_SIMPLIFIED",
    "CHINESE_TRADITIONAL",
    "normalize_for_microsoft",
    "to_base_language",
    "to_language_pair",
    # Helpers
    "bound_text",
    "with_token_refresh",
]

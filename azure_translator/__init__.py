"""Canonical re-exports for the Azure Translator connector public API surface.

ホストアプリケーションや外部ツールが `azure_translator` 直下から
主要シンボルを取得できるようにする。

- TranslationService: キャッシュ・プロトコル選択・トークン再試行を統括する窓口
- MemoryPreferenceStore: ホストを持たない利用向けの設定ストア
- TranslationResult: 翻訳結果
- TranslationError 系: 設定エラー / ネットワークエラー
"""

# translation を preferences より先に読み込む（preferences が translation.exceptions に依存するため）
from .translation import (
    CHINESE_SIMPLIFIED,
    CHINESE_TRADITIONAL,
    LanguagePair,
    ProtocolVersion,
    ResponseCache,
    ResultStatus,
    TokenProvider,
    TranslationAuthError,
    TranslationConfigError,
    TranslationError,
    TranslationNetworkError,
    TranslationResult,
    TranslationService,
    normalize_for_microsoft,
)
from .preferences import (
    PROPERTY_NEURAL,
    PROPERTY_REGION,
    PROPERTY_SUBSCRIPTION_KEY,
    PROPERTY_V2,
    HostPreferences,
    MemoryPreferenceStore,
)
from .i18n import get_string, register_translator

__version__ = "0.1.0"

__all__ = [
    "TranslationService",
    "TranslationResult",
    "ResultStatus",
    "ResponseCache",
    "TokenProvider",
    "ProtocolVersion",
    "LanguagePair",
    "CHINESE_SIMPLIFIED",
    "CHINESE_TRADITIONAL",
    "normalize_for_microsoft",
    "TranslationError",
    "TranslationConfigError",
    "TranslationNetworkError",
    "TranslationAuthError",
    "HostPreferences",
    "MemoryPreferenceStore",
    "PROPERTY_SUBSCRIPTION_KEY",
    "PROPERTY_REGION",
    "PROPERTY_V2",
    "PROPERTY_NEURAL",
    "get_string",
    "register_translator",
    "__version__",
]

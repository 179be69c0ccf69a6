"""
翻訳リクエスタの抽象基底クラス

V2 / V3 の各プロトコル実装はこの基底クラスを継承する。
言語コードの正規化、トークンの確保、認証拒否時の再試行を共通化する。
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ..i18n import get_string
from ..preferences import get_subscription_key
from .lang_codes import LanguagePair, to_language_pair
from .result import TranslationResult
from .retry import with_token_refresh

if TYPE_CHECKING:
    import httpx

    from ..preferences import HostPreferences
    from .token import TokenProvider

logger = logging.getLogger(__name__)


class BaseRequester(ABC):
    """翻訳リクエスタの抽象基底クラス"""

    # 認証拒否とみなす HTTP ステータス（None なら判定しない）
    auth_rejection_status: Optional[int] = None

    def __init__(
        self,
        preferences: HostPreferences,
        client: httpx.Client,
        token_provider: Optional[TokenProvider] = None,
    ):
        """
        リクエスタを初期化

        Args:
            preferences: 認証情報・設定を提供するホスト側ストア
            client: HTTP クライアント（所有権は呼び出し側）
            token_provider: トークン交換を使う場合の TokenProvider
        """
        self._preferences = preferences
        self._client = client
        self._token_provider = token_provider

    @property
    def uses_token(self) -> bool:
        """トークン交換で認証するかどうか"""
        return self._token_provider is not None

    @property
    def token_provider(self) -> Optional[TokenProvider]:
        return self._token_provider

    def translate(self, source_lang: str, target_lang: str, text: str) -> TranslationResult:
        """
        テキストを翻訳

        Args:
            source_lang: ソース言語タグ
            target_lang: ターゲット言語タグ
            text: 翻訳対象テキスト

        Returns:
            TranslationResult（応答形式が想定外、または翻訳が空なら NO_RESULT）

        Raises:
            TranslationConfigError: サブスクリプションキー未設定
            TranslationNetworkError: 通信失敗、再試行後も認証拒否
        """
        pair = to_language_pair(source_lang, target_lang)
        translated = self._translate_pair(pair, text)
        if not translated:
            return TranslationResult.no_result(
                original_text=text,
                source_lang=pair.source,
                target_lang=pair.target,
                protocol=self.get_protocol_name(),
                reason=get_string("MT_ENGINE_MICROSOFT_WRONG_RESPONSE"),
            )
        return TranslationResult.ok(
            text=translated,
            original_text=text,
            source_lang=pair.source,
            target_lang=pair.target,
            protocol=self.get_protocol_name(),
        )

    @with_token_refresh(max_refreshes=1)
    def _translate_pair(self, pair: LanguagePair, text: str) -> Optional[str]:
        token = self._ensure_token()
        return self._request_translation(pair, text, token)

    def _ensure_token(self) -> Optional[str]:
        """トークンを使う場合、未取得なら取得して返す"""
        if self._token_provider is None:
            return None
        if not self._token_provider.has_token():
            return self._token_provider.acquire_token(self._get_key())
        return self._token_provider.current_token()

    def refresh_token(self) -> None:
        """保持しているトークンを破棄して再取得"""
        if self._token_provider is None:
            return
        self._token_provider.invalidate()
        self._token_provider.acquire_token(self._get_key())

    def _get_key(self) -> str:
        return get_subscription_key(self._preferences)

    @abstractmethod
    def _request_translation(self, pair: LanguagePair, text: str, token: Optional[str]) -> Optional[str]:
        """
        ベンダー固有のリクエストを送信し、応答を解析

        Returns:
            翻訳テキスト。応答形式が想定外の場合は None
        """
        ...

    @abstractmethod
    def get_protocol_name(self) -> str:
        """
        プロトコル名を取得

        Returns:
            プロトコルの識別子（"v2" または "v3"）
        """
        ...

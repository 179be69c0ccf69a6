"""
アクセストークン管理

サブスクリプションキーを短期有効なベアラートークンに交換し、メモリに保持する。
有効期限は追跡せず、認証拒否を受けたときにのみ再取得する。
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config.defaults import DEFAULT_TOKEN_URL
from ..i18n import get_string
from .exceptions import TranslationConfigError, TranslationNetworkError
from .transport import send_request

logger = logging.getLogger(__name__)


class TokenProvider:
    """
    ベアラートークンの取得と保持

    状態は NO_TOKEN と HAS_TOKEN の 2 つ。取得成功で HAS_TOKEN に遷移し、
    invalidate() でのみ NO_TOKEN に戻る。

    Examples:
        >>> provider = TokenProvider(httpx.Client())
        >>> token = provider.acquire_token("subscription-key")
        >>> provider.current_token() == token
        True
    """

    def __init__(self, client: httpx.Client, token_url: str = DEFAULT_TOKEN_URL):
        self._client = client
        self._token_url = token_url
        self._token: Optional[str] = None

    @property
    def token_url(self) -> str:
        return self._token_url

    def has_token(self) -> bool:
        return self._token is not None

    def current_token(self) -> Optional[str]:
        """保持しているトークン（未取得なら None）"""
        return self._token

    def invalidate(self) -> None:
        """保持しているトークンを破棄"""
        self._token = None

    def acquire_token(self, subscription_key: str) -> str:
        """
        トークンエンドポイントからトークンを取得して保持

        Args:
            subscription_key: サブスクリプションキー

        Returns:
            取得したトークン

        Raises:
            TranslationConfigError: キーが空の場合（通信は行わない）
            TranslationNetworkError: 通信失敗または 2xx 以外の応答
        """
        if not subscription_key or not subscription_key.strip():
            raise TranslationConfigError(get_string("MT_ENGINE_MICROSOFT_SUBSCRIPTION_KEY_NOTFOUND"))

        headers = {
            "Ocp-Apim-Subscription-Key": subscription_key,
            "Content-Type": "application/json",
            "Accept": "application/jwt",
        }
        response = send_request(
            self._client,
            "POST",
            self._token_url,
            operation="Token request",
            headers=headers,
            content=b"",
        )
        token = response.text.strip()
        if not token:
            raise TranslationNetworkError("Token request returned an empty token", status_code=response.status_code)

        self._token = token
        logger.debug("Acquired Microsoft Translator access token")
        return token

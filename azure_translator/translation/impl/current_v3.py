"""
Azure Translator V3 実装

JSON 形式の POST リクエストと応答を扱う。
認証はサブスクリプションキー + リージョンのヘッダ（auth="key"）か、
トークン交換後の Authorization ヘッダ（auth="token"）のいずれか。
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from ...config.defaults import DEFAULT_TOKEN_URL, DEFAULT_V3_URL
from ...preferences import get_region
from ..base import BaseRequester
from ..lang_codes import LanguagePair
from ..metadata import ProtocolVersion
from ..token import TokenProvider
from ..transport import send_request

if TYPE_CHECKING:
    import httpx

    from ...preferences import HostPreferences

logger = logging.getLogger(__name__)

API_VERSION = "3.0"
AUTH_MODES = ("key", "token")


class CurrentV3Requester(BaseRequester):
    """
    Azure Translator V3 (/translate?api-version=3.0)

    Examples:
        >>> requester = CurrentV3Requester(store, httpx.Client(), auth="key")
        >>> requester.translate("EN", "DE", "Buy tomorrow").text
        'Morgen kaufen gehen ein'
    """

    auth_rejection_status = 401

    def __init__(
        self,
        preferences: HostPreferences,
        client: httpx.Client,
        token_provider: Optional[TokenProvider] = None,
        url: str = DEFAULT_V3_URL,
        token_url: str = DEFAULT_TOKEN_URL,
        auth: str = "key",
    ):
        """
        CurrentV3Requester を初期化

        Args:
            preferences: 認証情報・設定を提供するホスト側ストア
            client: HTTP クライアント
            token_provider: auth="token" で共有する TokenProvider
            url: V3 翻訳エンドポイント
            token_url: トークンエンドポイント（auth="token" の場合のみ使用）
            auth: 認証方式（"key" または "token"）

        Raises:
            ValueError: 不明な認証方式が指定された場合
        """
        if auth not in AUTH_MODES:
            raise ValueError(f"Unknown V3 auth mode: {auth}. Available: {list(AUTH_MODES)}")
        if auth == "token" and token_provider is None:
            token_provider = TokenProvider(client, token_url)
        elif auth == "key":
            token_provider = None
        super().__init__(preferences, client, token_provider=token_provider)
        self._url = url
        self._auth = auth

    @property
    def auth(self) -> str:
        return self._auth

    @staticmethod
    def create_json_request(text: str) -> str:
        """
        V3 リクエスト本文（[{"text": ...}]）を作成

        引用符や制御文字は JSON としてエスケープされ、非 ASCII 文字はそのまま残す。
        """
        return json.dumps([{"text": text}], ensure_ascii=False, separators=(",", ":"))

    def build_headers(self, token: Optional[str]) -> Dict[str, str]:
        """認証方式に応じたリクエストヘッダを作成"""
        headers = {"Content-Type": "application/json; charset=UTF-8"}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
            return headers

        headers["Ocp-Apim-Subscription-Key"] = self._get_key()
        region = get_region(self._preferences)
        if region:
            headers["Ocp-Apim-Subscription-Region"] = region
        return headers

    def _request_translation(self, pair: LanguagePair, text: str, token: Optional[str]) -> Optional[str]:
        headers = self.build_headers(token)
        response = send_request(
            self._client,
            "POST",
            self._url,
            operation="V3 translate request",
            auth_rejection_status=self.auth_rejection_status if self.uses_token else None,
            params={"api-version": API_VERSION, "from": pair.source, "to": pair.target},
            headers=headers,
            content=self.create_json_request(text).encode("utf-8"),
        )
        return self.parse_response(response.text)

    @staticmethod
    def parse_response(body: str) -> Optional[str]:
        """
        V3 の応答本文から最初の翻訳テキストを抽出

        Args:
            body: 応答本文（[{"translations": [{"text": ...}]}]）

        Returns:
            翻訳テキスト。想定したフィールドがない場合は None
        """
        try:
            root: Any = json.loads(body)
        except ValueError:
            logger.warning("Microsoft Translator V3 response is not valid JSON: %.200s", body)
            return None

        translation = _first(root)
        translations = translation.get("translations") if isinstance(translation, dict) else None
        entry = _first(translations)
        text = entry.get("text") if isinstance(entry, dict) else None
        if not isinstance(text, str):
            logger.warning("Unexpected Microsoft Translator V3 response: %.200s", body)
            return None
        return text

    def get_protocol_name(self) -> str:
        """プロトコル名を取得"""
        return ProtocolVersion.CURRENT.value


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None

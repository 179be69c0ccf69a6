"""
Microsoft Translator V2 実装

クエリパラメータ形式の GET リクエストと XML 形式の応答を扱う。
認証は issueToken エンドポイントで取得したベアラートークンを appid に載せて行う。
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, Optional

from ...config.defaults import DEFAULT_TOKEN_URL, DEFAULT_V2_URL
from ...preferences import is_neural_enabled
from ..base import BaseRequester
from ..exceptions import TranslationConfigError
from ..lang_codes import LanguagePair
from ..metadata import ProtocolVersion
from ..token import TokenProvider
from ..transport import send_request

if TYPE_CHECKING:
    import httpx

    from ...preferences import HostPreferences

logger = logging.getLogger(__name__)

RE_RESPONSE = re.compile(r"<string[^>]*>(.+)</string>", re.DOTALL)

NEURAL_CATEGORY = "generalnn"


class LegacyV2Requester(BaseRequester):
    """
    Microsoft Translator V2 (http.svc/Translate)

    Examples:
        >>> requester = LegacyV2Requester(store, httpx.Client())
        >>> requester.translate("EN", "DE", "Buy tomorrow").text
        'Morgen kaufen gehen ein'
    """

    auth_rejection_status = 400

    def __init__(
        self,
        preferences: HostPreferences,
        client: httpx.Client,
        token_provider: Optional[TokenProvider] = None,
        url: str = DEFAULT_V2_URL,
        token_url: str = DEFAULT_TOKEN_URL,
    ):
        """
        LegacyV2Requester を初期化

        Args:
            preferences: 認証情報・設定を提供するホスト側ストア
            client: HTTP クライアント
            token_provider: 共有する TokenProvider（省略時は token_url で作成）
            url: V2 翻訳エンドポイント
            token_url: トークンエンドポイント
        """
        if token_provider is None:
            token_provider = TokenProvider(client, token_url)
        super().__init__(preferences, client, token_provider=token_provider)
        self._url = url

    def build_params(self, pair: LanguagePair, text: str, token: str) -> Dict[str, str]:
        """V2 リクエストのクエリパラメータを作成"""
        params = {
            "appid": f"Bearer {token}",
            "text": text,
            "from": pair.source,
            "to": pair.target,
            "contentType": "text/plain",
        }
        if is_neural_enabled(self._preferences):
            params["category"] = NEURAL_CATEGORY
        return params

    def _request_translation(self, pair: LanguagePair, text: str, token: Optional[str]) -> Optional[str]:
        if token is None:
            raise TranslationConfigError("V2 translate request requires an access token")
        response = send_request(
            self._client,
            "GET",
            self._url,
            operation="V2 translate request",
            auth_rejection_status=self.auth_rejection_status,
            params=self.build_params(pair, text, token),
        )
        return self.parse_response(response.text)

    @staticmethod
    def parse_response(body: str) -> Optional[str]:
        """
        V2 の応答本文から翻訳テキストを抽出

        Args:
            body: 応答本文（<string ...>PAYLOAD</string>）

        Returns:
            翻訳テキスト。形式が一致しない場合は None
        """
        match = RE_RESPONSE.fullmatch(body.strip())
        if match is None:
            logger.warning("Unexpected Microsoft Translator V2 response: %.200s", body)
            return None
        translated = match.group(1)
        translated = translated.replace("&lt;", "<")
        translated = translated.replace("&gt;", ">")
        return translated

    def get_protocol_name(self) -> str:
        """プロトコル名を取得"""
        return ProtocolVersion.LEGACY.value

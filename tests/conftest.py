"""
共通フィクスチャ

Microsoft Translator のトークン / V2 / V3 エンドポイントを
httpx.MockTransport で模した FakeTranslatorApi を提供する。
"""

from __future__ import annotations

import json
from typing import Dict, List, Tuple

import httpx
import pytest

from azure_translator.preferences import PROPERTY_SUBSCRIPTION_KEY, MemoryPreferenceStore

SUBSCRIPTION_KEY = "abcdefg"
PSEUDO_TOKEN = "PSEUDOTOKEN"
V2_NAMESPACE = "http://schemas.microsoft.com/2003/10/Serialization/"


class FakeTranslatorApi:
    """
    トークン / V2 / V3 エンドポイントを模したハンドラ

    各エンドポイントの応答はキューで指定し、最後の 1 件は繰り返し返す。
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._responses: Dict[str, List[Tuple[int, str]]] = {
            "token": [(200, PSEUDO_TOKEN)],
            "v2": [(200, self.v2_body("Morgen kaufen gehen ein"))],
            "v3": [(200, self.v3_body("Morgen kaufen gehen ein"))],
        }

    @staticmethod
    def v2_body(text: str) -> str:
        return f'<string xmlns="{V2_NAMESPACE}">{text}</string>'

    @staticmethod
    def v3_body(text: str) -> str:
        return json.dumps([{"translations": [{"text": text, "to": "de"}]}])

    def respond(self, endpoint: str, *responses: Tuple[int, str]) -> None:
        """エンドポイントの応答キューを置き換える"""
        self._responses[endpoint] = list(responses)

    def _next(self, endpoint: str) -> Tuple[int, str]:
        queue = self._responses[endpoint]
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = self._endpoint_of(request)
        status, body = self._next(endpoint)
        return httpx.Response(status, text=body)

    @staticmethod
    def _endpoint_of(request: httpx.Request) -> str:
        path = request.url.path
        if path.endswith("/issueToken"):
            return "token"
        if path.endswith("/Translate"):
            return "v2"
        if path.endswith("/translate"):
            return "v3"
        raise AssertionError(f"Unexpected request: {request.method} {request.url}")

    def requests_to(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if self._endpoint_of(r) == endpoint]

    @property
    def token_requests(self) -> List[httpx.Request]:
        return self.requests_to("token")

    @property
    def v2_requests(self) -> List[httpx.Request]:
        return self.requests_to("v2")

    @property
    def v3_requests(self) -> List[httpx.Request]:
        return self.requests_to("v3")


@pytest.fixture
def api() -> FakeTranslatorApi:
    return FakeTranslatorApi()


@pytest.fixture
def client(api: FakeTranslatorApi):
    with httpx.Client(transport=httpx.MockTransport(api)) as http_client:
        yield http_client


@pytest.fixture
def store() -> MemoryPreferenceStore:
    """サブスクリプションキーを一時保存したストア"""
    prefs = MemoryPreferenceStore()
    prefs.set_credential(PROPERTY_SUBSCRIPTION_KEY, SUBSCRIPTION_KEY, temporary=True)
    return prefs


@pytest.fixture
def empty_store() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()

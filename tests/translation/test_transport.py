"""
HTTP 通信ユーティリティのテスト
"""

from __future__ import annotations

import httpx
import pytest

from azure_translator.translation.exceptions import (
    TranslationAuthError,
    TranslationNetworkError,
)
from azure_translator.translation.transport import create_client, get_httpx_timeout, send_request


def _client(status: int, text: str = "") -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(status, text=text)))


class TestGetHttpxTimeout:
    """get_httpx_timeout のテスト"""

    def test_mapping(self):
        timeout = get_httpx_timeout({"connect": 1, "read": 2, "write": 3, "pool": 4})
        assert timeout == httpx.Timeout(connect=1.0, read=2.0, write=3.0, pool=4.0)

    def test_partial_mapping(self):
        timeout = get_httpx_timeout({"read": 5})
        assert timeout.read == 5.0
        assert timeout.connect == 10.0

    def test_number_rejected(self):
        """数値のタイムアウトは受け付けない（辞書で指定する）"""
        with pytest.raises(TypeError, match="must be a mapping"):
            get_httpx_timeout(12)

    def test_none(self):
        assert get_httpx_timeout(None) == httpx.Timeout(connect=10.0, read=30.0, write=30.0, pool=10.0)

    def test_create_client(self):
        with create_client({"read": 7}) as client:
            assert client.timeout.read == 7.0


class TestSendRequest:
    """send_request のテスト"""

    def test_success(self):
        with _client(200, "ok") as client:
            response = send_request(client, "GET", "https://example.com/", operation="Ping")
        assert response.text == "ok"

    def test_auth_rejection(self):
        with _client(400, "expired") as client:
            with pytest.raises(TranslationAuthError, match="Ping rejected") as exc_info:
                send_request(client, "GET", "https://example.com/", operation="Ping", auth_rejection_status=400)
        assert exc_info.value.status_code == 400

    def test_rejection_status_not_configured(self):
        with _client(400, "bad request") as client:
            with pytest.raises(TranslationNetworkError) as exc_info:
                send_request(client, "GET", "https://example.com/", operation="Ping")
        assert not isinstance(exc_info.value, TranslationAuthError)
        assert "bad request" in str(exc_info.value)

    def test_json_error_message(self):
        with _client(403, '{"error": {"code": 403001, "message": "quota exceeded"}}') as client:
            with pytest.raises(TranslationNetworkError, match="quota exceeded"):
                send_request(client, "POST", "https://example.com/", operation="Ping")

    def test_connect_error(self):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with httpx.Client(transport=httpx.MockTransport(refuse)) as client:
            with pytest.raises(TranslationNetworkError, match="Ping failed: connection refused") as exc_info:
                send_request(client, "GET", "https://example.com/", operation="Ping")
        assert exc_info.value.status_code is None

"""
HTTP 通信ユーティリティ

httpx クライアントの生成、タイムアウト設定、HTTP エラーから
翻訳例外への変換を提供する。
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .exceptions import TranslationAuthError, TranslationNetworkError

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = {"connect": 10.0, "read": 30.0, "write": 30.0, "pool": 10.0}


def get_httpx_timeout(timeout_config: Optional[Mapping[str, Any]]) -> httpx.Timeout:
    """
    タイムアウト設定を httpx.Timeout に変換

    Args:
        timeout_config: connect / read / write / pool キーを持つ辞書
            （None または欠けたキーは既定値）

    Returns:
        httpx.Timeout

    Raises:
        TypeError: 辞書以外が渡された場合
    """
    if timeout_config is None:
        timeout_config = {}
    if not isinstance(timeout_config, Mapping):
        raise TypeError(f"Timeout config must be a mapping, got {type(timeout_config).__name__}")
    return httpx.Timeout(
        connect=float(timeout_config.get("connect", _DEFAULT_TIMEOUT["connect"])),
        read=float(timeout_config.get("read", _DEFAULT_TIMEOUT["read"])),
        write=float(timeout_config.get("write", _DEFAULT_TIMEOUT["write"])),
        pool=float(timeout_config.get("pool", _DEFAULT_TIMEOUT["pool"])),
    )


def create_client(timeout_config: Optional[Mapping[str, Any]] = None, **client_options) -> httpx.Client:
    """タイムアウト付きの httpx.Client を作成"""
    return httpx.Client(timeout=get_httpx_timeout(timeout_config), **client_options)


def send_request(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    operation: str,
    auth_rejection_status: Optional[int] = None,
    **request_options,
) -> httpx.Response:
    """
    HTTP リクエストを送信し、失敗を翻訳例外に変換

    Args:
        client: httpx クライアント
        method: HTTP メソッド
        url: 送信先 URL
        operation: ログ・エラーメッセージ用の操作名
        auth_rejection_status: 認証拒否とみなすステータスコード
        **request_options: httpx に渡すパラメータ（params, headers, content など）

    Returns:
        2xx の httpx.Response

    Raises:
        TranslationAuthError: auth_rejection_status の応答を受けた場合
        TranslationNetworkError: 接続失敗、タイムアウト、その他の 2xx 以外の応答
    """
    try:
        response = client.request(method, url, **request_options)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        if auth_rejection_status is not None and status_code == auth_rejection_status:
            raise TranslationAuthError(
                f"{operation} rejected ({status_code})", status_code=status_code
            ) from e
        logger.error("%s failed: HTTP %d - %s", operation, status_code, _describe_error(e.response))
        raise TranslationNetworkError(
            f"{operation} failed ({status_code}): {_describe_error(e.response)}",
            status_code=status_code,
        ) from e
    except httpx.TimeoutException as e:
        raise TranslationNetworkError(f"{operation} timed out: {e}") from e
    except httpx.HTTPError as e:
        raise TranslationNetworkError(f"{operation} failed: {e}") from e
    return response


def _describe_error(response: httpx.Response) -> str:
    """エラー応答から短い説明を取り出す"""
    try:
        payload = response.json()
    except ValueError:
        return response.text[:500]
    if isinstance(payload, dict) and "error" in payload:
        detail = payload["error"]
        if isinstance(detail, dict):
            return str(detail.get("message", detail))
        return str(detail)
    return response.text[:500]

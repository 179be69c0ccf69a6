"""
翻訳エラーの例外クラス階層

Microsoft Translator 呼び出しで発生するエラーを分類する。
応答形式の不一致（malformed response）は例外ではなく
TranslationResult.no_result() で表現する。
"""

from __future__ import annotations

from typing import Optional


class TranslationError(Exception):
    """翻訳エラーの基底クラス"""

    pass


class TranslationConfigError(TranslationError):
    """設定エラー（サブスクリプションキー未設定など）

    ネットワーク通信の前に検出され、リトライされない。
    """

    pass


class TranslationNetworkError(TranslationError):
    """ネットワーク関連エラー（接続失敗、タイムアウト、2xx 以外の応答）"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TranslationAuthError(TranslationNetworkError):
    """認証拒否（トークン失効など）

    リクエスタ内でトークン再取得 + 1 回の再試行により回復を試みる。
    """

    def __init__(self, message: str, status_code: int):
        super().__init__(message, status_code=status_code)

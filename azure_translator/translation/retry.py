"""
トークン再取得リトライデコレータ

認証拒否（TranslationAuthError）を受けた場合にトークンを破棄・再取得し、
同じリクエストを再試行する。接続失敗など他のエラーはリトライしない。
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, TypeVar

from .exceptions import TranslationAuthError, TranslationNetworkError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def with_token_refresh(max_refreshes: int = 1) -> Callable[[F], F]:
    """
    トークン再取得リトライデコレータ

    BaseRequester のメソッドに適用する。認証拒否を受けるたびに
    requester.refresh_token() を呼び、最大 max_refreshes 回まで再試行する。
    再試行しても拒否された場合は TranslationNetworkError に格上げする。
    トークンを使わない requester の場合は再試行せずに格上げする。

    Args:
        max_refreshes: トークン再取得の最大回数（デフォルト: 1）

    Returns:
        デコレータ関数

    Examples:
        >>> class Requester(BaseRequester):
        ...     @with_token_refresh(max_refreshes=1)
        ...     def _send(self, pair, text):
        ...         ...
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            refreshes = 0
            while True:
                try:
                    return func(self, *args, **kwargs)
                except TranslationAuthError as e:
                    if not self.uses_token or refreshes >= max_refreshes:
                        raise TranslationNetworkError(
                            f"Request rejected by Microsoft Translator ({e.status_code}) "
                            f"after {refreshes} token refresh(es)",
                            status_code=e.status_code,
                        ) from e
                    refreshes += 1
                    logger.warning(
                        "Re-fetching Microsoft Translator API token due to %d response (refresh %d/%d)",
                        e.status_code,
                        refreshes,
                        max_refreshes,
                    )
                    self.refresh_token()

        return wrapper  # type: ignore[return-value]

    return decorator

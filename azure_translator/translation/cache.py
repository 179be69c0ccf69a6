"""翻訳結果のメモリキャッシュ管理"""
from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "\x1f"
TRUNCATION_MARKER = "..."


@dataclass
class CacheEntry:
    """キャッシュエントリ"""

    translation: str
    created_at: float


def bound_text(text: str, max_length: int) -> str:
    """
    キャッシュキー用にテキスト長を制限

    max_length を超える場合は先頭 (max_length - 3) 文字に "..." を付ける。
    """
    if len(text) > max_length:
        return text[: max_length - len(TRUNCATION_MARKER)] + TRUNCATION_MARKER
    return text


class ResponseCache:
    """
    翻訳結果のキャッシュ

    (ソース言語, ターゲット言語, テキスト) をキーに翻訳結果を保持する。
    容量超過時は最も長く参照されていないエントリを削除し（LRU）、
    作成から ttl_seconds 経過したエントリは参照の有無にかかわらず失効する。
    プロジェクト/セッション終了時には clear() で全削除する。
    """

    def __init__(
        self,
        max_entries: int = 1000,
        ttl_seconds: float = 24 * 60 * 60,
        max_key_length: int = 10000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._max_entries = max(1, max_entries)
        self._ttl_seconds = ttl_seconds
        self._max_key_length = max_key_length
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.RLock()
        self._hit_count = 0
        self._miss_count = 0
        self._eviction_count = 0

    def make_key(self, source_lang: str, target_lang: str, text: str) -> str:
        """キャッシュキーを作成"""
        return KEY_SEPARATOR.join(
            (source_lang, target_lang, bound_text(text, self._max_key_length))
        )

    def get(self, source_lang: str, target_lang: str, text: str) -> Optional[str]:
        """
        キャッシュから翻訳を取得

        Returns:
            キャッシュされた翻訳、または None
        """
        key = self.make_key(source_lang, target_lang, text)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._miss_count += 1
                return None
            if self._is_expired(entry):
                # 作成から TTL 経過
                del self._entries[key]
                self._miss_count += 1
                return None
            self._entries.move_to_end(key)
            self._hit_count += 1
            return entry.translation

    def put(self, source_lang: str, target_lang: str, text: str, translation: str) -> None:
        """翻訳をキャッシュ（空の翻訳は保持しない）"""
        if not translation:
            return
        key = self.make_key(source_lang, target_lang, text)
        with self._lock:
            self._entries[key] = CacheEntry(translation=translation, created_at=self._clock())
            self._entries.move_to_end(key)
            while len(self._entries) > self._max_entries:
                evicted, _ = self._entries.popitem(last=False)
                self._eviction_count += 1
                logger.debug("LRU eviction: %.80r", evicted)

    def clear(self) -> None:
        """キャッシュを全削除"""
        with self._lock:
            size = len(self._entries)
            self._entries.clear()
        logger.info("Translation cache cleared (%d entries)", size)

    def _is_expired(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.created_at >= self._ttl_seconds

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        """
        キャッシュ統計を取得

        Returns:
            キャッシュの統計情報
        """
        with self._lock:
            total = self._hit_count + self._miss_count
            return {
                "hits": self._hit_count,
                "misses": self._miss_count,
                "hit_rate": self._hit_count / total if total > 0 else 0,
                "evictions": self._eviction_count,
                "size": len(self._entries),
                "max_entries": self._max_entries,
                "ttl_seconds": self._ttl_seconds,
            }

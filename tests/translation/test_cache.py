"""
ResponseCache のテスト
"""

from __future__ import annotations

import pytest

from azure_translator.translation.cache import ResponseCache, bound_text


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


class TestBoundText:
    """bound_text のテスト"""

    def test_short_text_unchanged(self):
        assert bound_text("hello", 10) == "hello"

    def test_exact_length_unchanged(self):
        text = "a" * 10000
        assert bound_text(text, 10000) == text

    def test_long_text_truncated(self):
        text = "a" * 10001
        bounded = bound_text(text, 10000)
        assert len(bounded) == 10000
        assert bounded == "a" * 9997 + "..."


class TestResponseCacheBasic:
    """基本的な get / put のテスト"""

    def test_miss(self, clock):
        cache = ResponseCache(clock=clock)
        assert cache.get("en", "de", "Buy tomorrow") is None

    def test_put_and_get(self, clock):
        cache = ResponseCache(clock=clock)
        cache.put("en", "de", "Buy tomorrow", "Morgen kaufen gehen ein")
        assert cache.get("en", "de", "Buy tomorrow") == "Morgen kaufen gehen ein"

    def test_language_pair_is_part_of_key(self, clock):
        cache = ResponseCache(clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        assert cache.get("en", "fr", "Hello") is None
        assert cache.get("de", "en", "Hello") is None

    def test_empty_translation_not_stored(self, clock):
        cache = ResponseCache(clock=clock)
        cache.put("en", "de", "Hello", "")
        assert len(cache) == 0

    def test_long_texts_share_truncated_key(self, clock):
        """先頭が同じ長文は同じキーになる"""
        cache = ResponseCache(max_key_length=10, clock=clock)
        cache.put("en", "de", "abcdefghijXXX", "first")
        assert cache.get("en", "de", "abcdefghijYYY") == "first"

    def test_make_key_truncates_text(self, clock):
        cache = ResponseCache(max_key_length=10, clock=clock)
        key = cache.make_key("en", "de", "a" * 20)
        assert key.endswith("a" * 7 + "...")


class TestResponseCacheExpiry:
    """TTL のテスト"""

    def test_entry_valid_before_ttl(self, clock):
        cache = ResponseCache(ttl_seconds=86400, clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        clock.advance(86399)
        assert cache.get("en", "de", "Hello") == "Hallo"

    def test_entry_expires_after_ttl(self, clock):
        cache = ResponseCache(ttl_seconds=86400, clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        clock.advance(86400)
        assert cache.get("en", "de", "Hello") is None
        assert len(cache) == 0

    def test_access_does_not_extend_ttl(self, clock):
        """TTL は作成時刻から数える"""
        cache = ResponseCache(ttl_seconds=100, clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        clock.advance(60)
        assert cache.get("en", "de", "Hello") == "Hallo"
        clock.advance(60)
        assert cache.get("en", "de", "Hello") is None

    def test_put_again_resets_ttl(self, clock):
        cache = ResponseCache(ttl_seconds=100, clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        clock.advance(90)
        cache.put("en", "de", "Hello", "Hallo")
        clock.advance(90)
        assert cache.get("en", "de", "Hello") == "Hallo"


class TestResponseCacheEviction:
    """LRU 削除のテスト"""

    def test_evicts_least_recently_used(self, clock):
        cache = ResponseCache(max_entries=2, clock=clock)
        cache.put("en", "de", "one", "eins")
        cache.put("en", "de", "two", "zwei")
        cache.put("en", "de", "three", "drei")

        assert len(cache) == 2
        assert cache.get("en", "de", "one") is None
        assert cache.get("en", "de", "two") == "zwei"
        assert cache.get("en", "de", "three") == "drei"

    def test_get_refreshes_recency(self, clock):
        cache = ResponseCache(max_entries=2, clock=clock)
        cache.put("en", "de", "one", "eins")
        cache.put("en", "de", "two", "zwei")
        cache.get("en", "de", "one")
        cache.put("en", "de", "three", "drei")

        assert cache.get("en", "de", "one") == "eins"
        assert cache.get("en", "de", "two") is None

    def test_default_capacity(self, clock):
        cache = ResponseCache(clock=clock)
        for i in range(1001):
            cache.put("en", "de", f"text {i}", f"Text {i}")
        assert len(cache) == 1000
        assert cache.get("en", "de", "text 0") is None
        assert cache.stats()["evictions"] == 1


class TestResponseCacheClear:
    """clear と統計のテスト"""

    def test_clear(self, clock):
        cache = ResponseCache(clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        cache.put("en", "fr", "Hello", "Bonjour")
        cache.clear()
        assert len(cache) == 0
        assert cache.get("en", "de", "Hello") is None

    def test_stats(self, clock):
        cache = ResponseCache(clock=clock)
        cache.put("en", "de", "Hello", "Hallo")
        cache.get("en", "de", "Hello")
        cache.get("en", "de", "missing")

        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 0.5
        assert stats["size"] == 1
        assert stats["max_entries"] == 1000
        assert stats["ttl_seconds"] == 86400

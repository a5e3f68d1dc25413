"""Tests for the two-tier prompt cache."""

import json
from unittest.mock import MagicMock

import pytest
import redis

from groq_cache.entities import CacheEntryEntity, StoreResult, WriteOutcome
from groq_cache.repositories import RedisFastStore, RedisPropertyStore
from groq_cache.services import TieredCache

from .conftest import NOW_MS, BrokenStore, InMemoryDurableStore, InMemoryFastStore

KEY = "groq_aGVsbG8="
DAY_MS = 86400 * 1000


def _record(value, expires_at: int) -> str:
    return json.dumps({"v": value, "e": expires_at})


class TestLookup:
    def test_empty_tiers_miss(self, tiered_cache: TieredCache):
        assert tiered_cache.lookup(KEY) is None

    def test_fast_tier_hit_skips_slow_tier(self, tiered_cache, fast_store, slow_store):
        fast_store.data[KEY] = '{"status": "success", "content": "cached answer"}'

        entry = tiered_cache.lookup(KEY)

        assert entry == CacheEntryEntity.success("cached answer")
        assert slow_store.gets == []

    def test_fast_tier_raw_string_is_hit(self, tiered_cache, fast_store):
        fast_store.data[KEY] = "cached answer"
        assert tiered_cache.lookup(KEY) == CacheEntryEntity.success("cached answer")

    def test_fast_tier_partial_object_falls_through(self, tiered_cache, fast_store, slow_store):
        fast_store.data[KEY] = '{"content": "no status"}'
        slow_store.data[KEY] = _record("secondary answer", NOW_MS + 10_000)

        assert tiered_cache.lookup(KEY) == CacheEntryEntity.success("secondary answer")

    def test_slow_tier_hit_promotes_to_fast_tier(self, tiered_cache, fast_store, slow_store):
        slow_store.data[KEY] = _record({"status": "success", "content": "secondary answer"}, NOW_MS + 10_000)

        entry = tiered_cache.lookup(KEY)

        assert entry == CacheEntryEntity.success("secondary answer")
        assert len(fast_store.puts) == 1
        key, payload, ttl = fast_store.puts[0]
        assert key == KEY
        assert ttl == 21600
        assert json.loads(payload) == {"status": "success", "content": "secondary answer"}

    def test_slow_tier_hit_at_exact_expiry(self, tiered_cache, slow_store):
        slow_store.data[KEY] = _record("edge", NOW_MS)
        assert tiered_cache.lookup(KEY) == CacheEntryEntity.success("edge")

    def test_expired_slow_record_is_absent(self, tiered_cache, fast_store, slow_store):
        slow_store.data[KEY] = _record("expired answer", NOW_MS - 10_000)

        assert tiered_cache.lookup(KEY) is None
        assert fast_store.puts == []
        # not deleted, just ignored
        assert KEY in slow_store.data

    def test_explicit_now_overrides_clock(self, tiered_cache, slow_store):
        slow_store.data[KEY] = _record("a", NOW_MS + 10)
        assert tiered_cache.lookup(KEY, now_ms=NOW_MS + 11) is None

    def test_malformed_slow_record_is_absent(self, tiered_cache, slow_store):
        slow_store.data[KEY] = "invalid-json"
        assert tiered_cache.lookup(KEY) is None

    def test_malformed_fast_entry_falls_through(self, tiered_cache, fast_store, slow_store):
        fast_store.data[KEY] = '{"status": "success", "content": "trunc'

        assert tiered_cache.lookup(KEY) is None
        assert slow_store.gets == [KEY]

    def test_malformed_fast_entry_reaches_slow_tier(self, tiered_cache, fast_store, slow_store):
        fast_store.data[KEY] = '{"status": "success", "content": "trunc'
        slow_store.data[KEY] = _record("secondary answer", NOW_MS + 10_000)

        assert tiered_cache.lookup(KEY) == CacheEntryEntity.success("secondary answer")
        assert json.loads(fast_store.data[KEY])["content"] == "secondary answer"

    @pytest.mark.parametrize("expiry", ["Infinity", "NaN", "1e400"])
    def test_non_finite_slow_expiry_is_absent(self, tiered_cache, slow_store, expiry):
        slow_store.data[KEY] = '{"v": "a", "e": ' + expiry + "}"
        assert tiered_cache.lookup(KEY) is None

    def test_read_failures_are_misses(self):
        cache = TieredCache(fast_store=BrokenStore(), slow_store=BrokenStore(), clock=lambda: NOW_MS)
        assert cache.lookup(KEY) is None

    def test_redis_outage_through_adapters_is_a_miss(self):
        client = MagicMock(spec=redis.Redis)
        client.get.side_effect = redis.ConnectionError("down")
        client.hget.side_effect = redis.ConnectionError("down")
        cache = TieredCache(
            fast_store=RedisFastStore(client),
            slow_store=RedisPropertyStore(client),
            clock=lambda: NOW_MS,
        )

        assert cache.lookup(KEY) is None

    def test_fast_failure_still_reads_slow_tier(self, slow_store):
        slow_store.data[KEY] = _record("secondary answer", NOW_MS + 1)
        cache = TieredCache(fast_store=BrokenStore(), slow_store=slow_store, clock=lambda: NOW_MS)

        assert cache.lookup(KEY) == CacheEntryEntity.success("secondary answer")


class TestStore:
    def test_writes_both_tiers(self, tiered_cache, fast_store, slow_store):
        result = tiered_cache.store(KEY, CacheEntryEntity.success("groq answer"))

        assert result == StoreResult(fast=WriteOutcome.STORED, slow=WriteOutcome.STORED)
        assert fast_store.puts[0][2] == 21600
        assert json.loads(fast_store.data[KEY]) == {"status": "success", "content": "groq answer"}
        record = json.loads(slow_store.data[KEY])
        assert record["v"] == {"status": "success", "content": "groq answer"}
        assert record["e"] == NOW_MS + DAY_MS

    def test_store_then_lookup_round_trip(self, tiered_cache):
        tiered_cache.store(KEY, CacheEntryEntity.success("groq answer"))
        assert tiered_cache.lookup(KEY).content == "groq answer"

    def test_oversized_record_skips_slow_tier_only(self, tiered_cache, fast_store, slow_store):
        result = tiered_cache.store(KEY, CacheEntryEntity.success("x" * 9000))

        assert result.fast is WriteOutcome.STORED
        assert result.slow is WriteOutcome.SKIPPED_TOO_LARGE
        assert KEY in fast_store.data
        assert slow_store.puts == []

    def test_size_limit_counts_utf8_bytes(self, fast_store, slow_store):
        cache = TieredCache(fast_store=fast_store, slow_store=slow_store, slow_max_bytes=100, clock=lambda: NOW_MS)
        # 40 characters, 120 bytes
        result = cache.store(KEY, CacheEntryEntity.success("あ" * 40))
        assert result.slow is WriteOutcome.SKIPPED_TOO_LARGE

    def test_slow_record_uses_store_time(self, tiered_cache, slow_store):
        tiered_cache.store(KEY, CacheEntryEntity.success("a"), now_ms=5)
        assert json.loads(slow_store.data[KEY])["e"] == 5 + DAY_MS

    def test_write_failures_are_reported_not_raised(self):
        cache = TieredCache(fast_store=BrokenStore(), slow_store=BrokenStore(), clock=lambda: NOW_MS)

        result = cache.store(KEY, CacheEntryEntity.success("a"))

        assert result == StoreResult(fast=WriteOutcome.FAILED, slow=WriteOutcome.FAILED)

    def test_error_entries_are_rejected(self, tiered_cache, fast_store, slow_store):
        with pytest.raises(ValueError):
            tiered_cache.store(KEY, CacheEntryEntity.error("boom"))
        assert fast_store.puts == []
        assert slow_store.puts == []


def test_is_healthy():
    healthy = TieredCache(fast_store=InMemoryFastStore(), slow_store=InMemoryDurableStore())
    broken = TieredCache(fast_store=InMemoryFastStore(), slow_store=BrokenStore())
    assert healthy.is_healthy() is True
    assert broken.is_healthy() is False

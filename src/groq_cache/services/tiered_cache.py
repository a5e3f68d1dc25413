"""Two-tier prompt cache.

Lookup order is fast tier, then slow tier. A live slow-tier hit is promoted
back into the fast tier. Every storage failure degrades: a failed or
unreadable read is a miss, a failed write is logged and reported in the
returned StoreResult. Nothing here raises for backend errors.
"""

import time
from collections.abc import Callable

import structlog

from groq_cache.config import settings
from groq_cache.entities import CacheEntryEntity, StoreResult, TierRecordEntity, WriteOutcome
from groq_cache.protocols import DurableStore, FastStore, StoreError

from .serializers import dump_entry, dump_record, parse_entry, parse_record

log = structlog.get_logger()


def _now_ms() -> int:
    return int(time.time() * 1000)


class TieredCache:
    """Prompt cache over a fast tier and a slow (durable) tier.

    Example:
        ```python
        from groq_cache.repositories import RedisFastStore, RedisPropertyStore
        from groq_cache.services import TieredCache

        cache = TieredCache.create(
            fast_store=RedisFastStore.create(),
            slow_store=RedisPropertyStore.create(),
        )
        entry = cache.lookup("groq_aGVsbG8=")
        ```
    """

    def __init__(
        self,
        fast_store: FastStore,
        slow_store: DurableStore,
        fast_ttl: int | None = None,
        slow_ttl: int | None = None,
        slow_max_bytes: int | None = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        """Initialize the tiered cache.

        Args:
            fast_store: Short-TTL tier (required).
            slow_store: Durable tier (required).
            fast_ttl: Fast tier TTL in seconds. Defaults to settings.
            slow_ttl: Slow tier logical TTL in seconds. Defaults to settings.
            slow_max_bytes: Largest serialized slow-tier record. Defaults to settings.
            clock: Returns the current time as Unix milliseconds.
        """
        self._fast = fast_store
        self._slow = slow_store
        self._fast_ttl = fast_ttl or settings.fast_tier_ttl
        self._slow_ttl = slow_ttl or settings.slow_tier_ttl
        self._slow_max_bytes = slow_max_bytes or settings.slow_tier_max_bytes
        self._clock = clock

    @classmethod
    def create(
        cls,
        fast_store: FastStore,
        slow_store: DurableStore,
        fast_ttl: int | None = None,
        slow_ttl: int | None = None,
    ) -> "TieredCache":
        """Factory method to create TieredCache with settings defaults."""
        return cls(
            fast_store=fast_store,
            slow_store=slow_store,
            fast_ttl=fast_ttl,
            slow_ttl=slow_ttl,
        )

    def lookup(self, key: str, now_ms: int | None = None) -> CacheEntryEntity | None:
        """Find a cached entry for key.

        Args:
            key: Cache key from derive_key
            now_ms: Current time in Unix milliseconds. Defaults to the clock.

        Returns:
            The cached entry, or None on a miss
        """
        entry = self._read_fast(key)
        if entry is not None:
            log.debug("fast_tier_hit", key=key)
            return entry

        record = self._read_slow(key)
        if record is None:
            log.debug("cache_miss", key=key)
            return None

        now_ms = self._clock() if now_ms is None else now_ms
        if record.is_expired(now_ms):
            # Left in place; the next successful store overwrites it
            log.debug("slow_tier_expired", key=key, expires_at=record.expires_at)
            return None

        log.debug("slow_tier_hit", key=key)
        self._write_fast(key, record.value)
        return record.value

    def store(self, key: str, entry: CacheEntryEntity, now_ms: int | None = None) -> StoreResult:
        """Write a successful entry to both tiers, best effort.

        Args:
            key: Cache key from derive_key
            entry: Entry to cache; must have status SUCCESS
            now_ms: Current time in Unix milliseconds. Defaults to the clock.

        Returns:
            StoreResult with the outcome for each tier

        Raises:
            ValueError: If entry is an error entry
        """
        if not entry.is_success:
            raise ValueError("Only successful entries may be cached")

        fast_outcome = self._write_fast(key, entry)

        now_ms = self._clock() if now_ms is None else now_ms
        record = TierRecordEntity(value=entry, expires_at=now_ms + self._slow_ttl * 1000)
        slow_outcome = self._write_slow(key, record)

        return StoreResult(fast=fast_outcome, slow=slow_outcome)

    def is_healthy(self) -> bool:
        """Check if both tiers are reachable."""
        return self._fast.health_check() and self._slow.health_check()

    def _read_fast(self, key: str) -> CacheEntryEntity | None:
        try:
            payload = self._fast.get(key)
        except StoreError as e:
            log.warning("tier_read_failed", tier="fast", key=key, error=str(e))
            return None

        if payload is None:
            return None

        entry = parse_entry(payload)
        if entry is None:
            log.info("tier_payload_unreadable", tier="fast", key=key)
        return entry

    def _read_slow(self, key: str) -> TierRecordEntity | None:
        try:
            payload = self._slow.get(key)
        except StoreError as e:
            log.warning("tier_read_failed", tier="slow", key=key, error=str(e))
            return None

        if payload is None:
            return None

        record = parse_record(payload)
        if record is None:
            log.info("tier_payload_unreadable", tier="slow", key=key)
        return record

    def _write_fast(self, key: str, entry: CacheEntryEntity) -> WriteOutcome:
        try:
            self._fast.put(key, dump_entry(entry), self._fast_ttl)
        except StoreError as e:
            log.warning("tier_write_failed", tier="fast", key=key, error=str(e))
            return WriteOutcome.FAILED
        return WriteOutcome.STORED

    def _write_slow(self, key: str, record: TierRecordEntity) -> WriteOutcome:
        payload = dump_record(record)
        size = len(payload.encode("utf-8"))
        if size > self._slow_max_bytes:
            log.info("tier_write_skipped", tier="slow", key=key, size=size, limit=self._slow_max_bytes)
            return WriteOutcome.SKIPPED_TOO_LARGE

        try:
            self._slow.put(key, payload)
        except StoreError as e:
            log.warning("tier_write_failed", tier="slow", key=key, error=str(e))
            return WriteOutcome.FAILED
        return WriteOutcome.STORED

    @property
    def fast_ttl(self) -> int:
        return self._fast_ttl

    @property
    def slow_ttl(self) -> int:
        return self._slow_ttl

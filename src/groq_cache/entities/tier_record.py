"""Slow-tier record and write bookkeeping entities."""

from dataclasses import dataclass
from enum import StrEnum

from .cache_entry import CacheEntryEntity


@dataclass(frozen=True)
class TierRecordEntity:
    """Durable-tier wrapper pairing a cached entry with an absolute expiry.

    Attributes:
        value: The cached entry
        expires_at: Expiry as a Unix timestamp in milliseconds
    """

    value: CacheEntryEntity
    expires_at: int

    def is_expired(self, now_ms: int) -> bool:
        """A record is still valid at exactly its expiry instant."""
        return now_ms > self.expires_at


class WriteOutcome(StrEnum):
    STORED = "stored"
    SKIPPED_TOO_LARGE = "skipped_too_large"
    FAILED = "failed"


@dataclass(frozen=True)
class StoreResult:
    """Per-tier outcome of a best-effort cache write."""

    fast: WriteOutcome
    slow: WriteOutcome

"""Domain entities for internal representation.

These are pure dataclasses (frozen) and enums used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Entities carry no JSON logic; see ``groq_cache.services.serializers``.
"""

from .cache_entry import CacheEntryEntity, EntryStatus
from .tier_record import StoreResult, TierRecordEntity, WriteOutcome

__all__ = [
    "CacheEntryEntity",
    "EntryStatus",
    "StoreResult",
    "TierRecordEntity",
    "WriteOutcome",
]

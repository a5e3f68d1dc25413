"""Groq Cache - cached LLM completions over a two-tier store.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (FastStore, DurableStore, CompletionProvider, SecretProvider)
    - repositories: Redis tiers and the Groq client
    - services: Tiered cache logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from groq_cache import TieredCache, derive_key
    from groq_cache.repositories import RedisFastStore, RedisPropertyStore

    cache = TieredCache.create(
        fast_store=RedisFastStore.create(),
        slow_store=RedisPropertyStore.create(),
    )
    entry = cache.lookup(derive_key("hello"))
    ```

For HTTP API:
    ```python
    from groq_cache.api.app import app
    ```
"""

from groq_cache.config import get_redis_client, settings
from groq_cache.dto import CompletionQuery, CompletionResponse, ErrorResponse
from groq_cache.entities import CacheEntryEntity, EntryStatus, StoreResult, TierRecordEntity, WriteOutcome
from groq_cache.handlers import CompletionHandler
from groq_cache.keys import derive_key
from groq_cache.protocols import CompletionProvider, DurableStore, FastStore, SecretProvider, StoreError
from groq_cache.repositories import GroqCompletionClient, RedisFastStore, RedisPropertyStore
from groq_cache.services import TieredCache

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CompletionProvider",
    "DurableStore",
    "FastStore",
    "SecretProvider",
    "StoreError",
    # Keys
    "derive_key",
    # Services (business logic)
    "TieredCache",
    # Handlers (HTTP)
    "CompletionHandler",
    # Repositories (data access)
    "GroqCompletionClient",
    "RedisFastStore",
    "RedisPropertyStore",
    # Entities (domain models)
    "CacheEntryEntity",
    "EntryStatus",
    "StoreResult",
    "TierRecordEntity",
    "WriteOutcome",
    # DTOs (API contracts)
    "CompletionQuery",
    "CompletionResponse",
    "ErrorResponse",
]

"""Repository layer for data access.

This layer abstracts external dependencies (Redis, the Groq API) behind
protocol-based interfaces. The repositories are protocol-based (structural
typing), not inheritance-based.
"""

from groq_cache.protocols import CompletionProvider, DurableStore, FastStore

from .groq_client import GroqCompletionClient
from .redis_repository import RedisFastStore, RedisPropertyStore

__all__ = [
    "CompletionProvider",
    "DurableStore",
    "FastStore",
    "GroqCompletionClient",
    "RedisFastStore",
    "RedisPropertyStore",
]

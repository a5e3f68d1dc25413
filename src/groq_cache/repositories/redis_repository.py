"""Redis implementations of the cache tier protocols.

The fast tier is a plain string key with an expiry (``SET ... EX``). The
slow tier is a single Redis hash used as a property store: one field per
cache key, no per-field TTL, so expiry travels inside the payload.

Both classes raise ``StoreError`` (chained from ``redis.RedisError``); the
tiered cache decides what a failure means.
"""

import redis

from groq_cache.config import get_redis_client, settings
from groq_cache.protocols import StoreError


class RedisFastStore:
    """Redis implementation of FastStore.

    This class satisfies the FastStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the fast tier.

        Args:
            redis_client: Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisFastStore":
        """Factory method to create RedisFastStore with defaults."""
        return cls(redis_client=redis_client)

    def get(self, key: str) -> str | None:
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise StoreError(f"fast tier read failed: {e}") from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value  # type: ignore[return-value]

    def put(self, key: str, payload: str, ttl: int) -> None:
        try:
            self._client.set(key, payload, ex=ttl)
        except redis.RedisError as e:
            raise StoreError(f"fast tier write failed: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except Exception:
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client


class RedisPropertyStore:
    """Redis hash implementation of DurableStore.

    Relies on the Redis server's persistence (RDB/AOF) for durability.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        hash_name: str | None = None,
    ) -> None:
        """Initialize the slow tier.

        Args:
            redis_client: Redis client instance. If None, creates default.
            hash_name: Name of the hash holding all properties. Defaults to settings.
        """
        self._client = redis_client or get_redis_client()
        self._hash_name = hash_name or settings.slow_tier_hash

    @classmethod
    def create(
        cls,
        redis_client: redis.Redis | None = None,
        hash_name: str | None = None,
    ) -> "RedisPropertyStore":
        """Factory method to create RedisPropertyStore with defaults."""
        return cls(redis_client=redis_client, hash_name=hash_name)

    def get(self, key: str) -> str | None:
        try:
            value = self._client.hget(self._hash_name, key)
        except redis.RedisError as e:
            raise StoreError(f"slow tier read failed: {e}") from e
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value  # type: ignore[return-value]

    def put(self, key: str, payload: str) -> None:
        try:
            self._client.hset(self._hash_name, key, payload)
        except redis.RedisError as e:
            raise StoreError(f"slow tier write failed: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except Exception:
            return False

    @property
    def hash_name(self) -> str:
        return self._hash_name

"""Shared test fixtures: in-memory tiers, a scripted provider, a fixed clock."""

import pytest

from groq_cache.entities import CacheEntryEntity
from groq_cache.handlers import CompletionHandler
from groq_cache.protocols import StoreError
from groq_cache.services import TieredCache

NOW_MS = 1_760_000_000_000


class InMemoryFastStore:
    """FastStore fake that records every write with its TTL."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.puts: list[tuple[str, str, int]] = []
        self.gets: list[str] = []

    def get(self, key: str) -> str | None:
        self.gets.append(key)
        return self.data.get(key)

    def put(self, key: str, payload: str, ttl: int) -> None:
        self.puts.append((key, payload, ttl))
        self.data[key] = payload

    def health_check(self) -> bool:
        return True


class InMemoryDurableStore:
    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.puts: list[tuple[str, str]] = []
        self.gets: list[str] = []

    def get(self, key: str) -> str | None:
        self.gets.append(key)
        return self.data.get(key)

    def put(self, key: str, payload: str) -> None:
        self.puts.append((key, payload))
        self.data[key] = payload

    def health_check(self) -> bool:
        return True


class BrokenStore:
    """Store whose every operation fails, as any backend reports it."""

    def get(self, key: str) -> str | None:
        raise StoreError("connection refused")

    def put(self, key: str, payload: str, ttl: int | None = None) -> None:
        raise StoreError("connection refused")

    def health_check(self) -> bool:
        return False


class ScriptedProvider:
    """CompletionProvider fake returning a fixed entry and counting calls."""

    model_name = "test-model"

    def __init__(self, entry: CacheEntryEntity | None = None) -> None:
        self.entry = entry or CacheEntryEntity.success("groq answer")
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> CacheEntryEntity:
        self.prompts.append(prompt)
        return self.entry


@pytest.fixture()
def fast_store() -> InMemoryFastStore:
    return InMemoryFastStore()


@pytest.fixture()
def slow_store() -> InMemoryDurableStore:
    return InMemoryDurableStore()


@pytest.fixture()
def provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture()
def tiered_cache(fast_store: InMemoryFastStore, slow_store: InMemoryDurableStore) -> TieredCache:
    return TieredCache(
        fast_store=fast_store,
        slow_store=slow_store,
        fast_ttl=21600,
        slow_ttl=86400,
        slow_max_bytes=9000,
        clock=lambda: NOW_MS,
    )


@pytest.fixture()
def handler(tiered_cache: TieredCache, provider: ScriptedProvider) -> CompletionHandler:
    return CompletionHandler(cache=tiered_cache, provider=provider)

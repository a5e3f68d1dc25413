"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from groq_cache.config import get_redis_client, settings
from groq_cache.handlers import CompletionHandler
from groq_cache.logging_config import configure_logging
from groq_cache.repositories import GroqCompletionClient, RedisFastStore, RedisPropertyStore
from groq_cache.services import TieredCache

log = structlog.get_logger()


def get_handler(request: Request) -> CompletionHandler:
    """Dependency injection for CompletionHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The CompletionHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "completion_handler", None)
    if handler is None:
        raise RuntimeError("CompletionHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (both tiers share one Redis client, plus the Groq client)
    2. Service (tiered cache) - stored in app.state.tiered_cache
    3. Handler (HTTP endpoints) - stored in app.state.completion_handler

    Cleanup:
        Closes the Groq HTTP client and removes services from app.state
    """
    configure_logging(settings)

    redis_client = get_redis_client()
    fast_store = RedisFastStore.create(redis_client=redis_client)
    slow_store = RedisPropertyStore.create(redis_client=redis_client)
    provider = GroqCompletionClient.create()

    tiered_cache = TieredCache.create(fast_store=fast_store, slow_store=slow_store)
    completion_handler = CompletionHandler(cache=tiered_cache, provider=provider)

    app.state.tiered_cache = tiered_cache
    app.state.completion_handler = completion_handler
    app.state.provider = provider

    log.info(
        "service_started",
        model=provider.model_name,
        redis_url=settings.redis_url,
        fast_ttl=tiered_cache.fast_ttl,
        slow_ttl=tiered_cache.slow_ttl,
        cache_healthy=tiered_cache.is_healthy(),
    )

    yield

    await provider.close()
    del app.state.completion_handler
    del app.state.tiered_cache
    del app.state.provider
    log.info("service_stopped")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[CompletionHandler, Depends(get_handler)]

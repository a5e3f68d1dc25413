"""HTTP handler for the completion endpoint.

Handlers convert between DTOs (API contracts) and service calls. This one
never raises for upstream or storage failures: every path ends in a
response DTO.
"""

import structlog

from groq_cache.dto import (
    CompletionQuery,
    CompletionResponse,
    ErrorResponse,
    HealthCheckResponse,
)
from groq_cache.dto.responses import MISSING_PROMPT_MESSAGE
from groq_cache.keys import derive_key
from groq_cache.protocols import CompletionProvider
from groq_cache.services import TieredCache

log = structlog.get_logger()


class CompletionHandler:
    """Answers prompts from the tiered cache, falling back to the provider.

    Example:
        ```python
        handler = CompletionHandler(cache=tiered_cache, provider=groq_client)

        @app.get("/")
        async def complete(query: Annotated[CompletionQuery, Query()]):
            return await handler.handle(query)
        ```
    """

    def __init__(self, cache: TieredCache, provider: CompletionProvider) -> None:
        """Initialize the completion handler.

        Args:
            cache: The tiered cache (required).
            provider: Upstream completion provider (required).
        """
        self._cache = cache
        self._provider = provider

    async def handle(self, query: CompletionQuery) -> CompletionResponse | ErrorResponse:
        """Handle GET / requests.

        Args:
            query: The parsed query parameters

        Returns:
            CompletionResponse, or ErrorResponse when the prompt is missing
        """
        prompt = query.p
        if not prompt:
            return ErrorResponse(error=MISSING_PROMPT_MESSAGE)

        key = derive_key(prompt)

        if query.bypass_cache:
            log.debug("cache_bypassed", key=key)
        else:
            hit = self._cache.lookup(key)
            if hit is not None:
                return CompletionResponse(prompt=prompt, answer=hit.content, cached=True)

        result = await self._provider.complete(prompt)
        if result.is_success:
            self._cache.store(key, result)

        return CompletionResponse(prompt=prompt, answer=result.content, cached=False)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._cache.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=is_healthy,
        )

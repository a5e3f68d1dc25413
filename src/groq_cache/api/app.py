from typing import Annotated, Any

from fastapi import FastAPI, Query

from groq_cache.api.dependencies import HandlerDep, lifespan
from groq_cache.config import settings
from groq_cache.dto import CompletionQuery, CompletionResponse, ErrorResponse, HealthCheckResponse

app = FastAPI(
    title="Groq Cache API",
    description="Cached Groq completions behind a single GET endpoint",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/", response_model=CompletionResponse | ErrorResponse)
async def complete(
    query: Annotated[CompletionQuery, Query()],
    handler: HandlerDep,
) -> Any:
    """
    Answer a prompt, from cache when possible.

    Args:
        query: ``p`` is the prompt; ``cache=no`` skips cache reads.

    Returns:
        ``{prompt, answer, cached}``, or ``{error}`` when ``p`` is missing.
    """
    return await handler.handle(query)


@app.get("/health", response_model=HealthCheckResponse)
async def health(handler: HandlerDep) -> HealthCheckResponse:
    """Health check endpoint."""
    return await handler.health_check()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "groq_cache.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )

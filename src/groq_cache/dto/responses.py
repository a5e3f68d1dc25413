"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field

MISSING_PROMPT_MESSAGE = "Parameter 'p' is required."


class CompletionResponse(BaseModel):
    """Response DTO for a completion request."""

    prompt: str = Field(..., description="The prompt as received")
    answer: str = Field(..., description="The answer, or the upstream error text")
    cached: bool = Field(..., description="Whether the answer came from either cache tier")


class ErrorResponse(BaseModel):
    """Response DTO for a rejected request."""

    error: str = Field(..., description="Human-readable reason")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether both cache tiers are reachable")

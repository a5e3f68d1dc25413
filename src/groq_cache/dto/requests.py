"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

CACHE_BYPASS_VALUE = "no"


class CompletionQuery(BaseModel):
    """Query parameters of the completion endpoint.

    Both fields are optional at this level: a missing prompt is answered
    with an error body rather than a validation failure.
    """

    p: str | None = Field(None, description="The prompt text")
    cache: str | None = Field(None, description="'no' skips cache reads; results are still stored")

    @property
    def bypass_cache(self) -> bool:
        return self.cache == CACHE_BYPASS_VALUE

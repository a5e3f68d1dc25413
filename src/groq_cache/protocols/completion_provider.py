"""Completion provider protocol.

Implementations can include:
- Groq chat completions (default)
- Any other OpenAI-compatible chat completions endpoint
"""

from typing import Protocol, runtime_checkable

from groq_cache.entities import CacheEntryEntity


@runtime_checkable
class CompletionProvider(Protocol):
    """Protocol for upstream LLM completion services.

    ``complete`` must not raise: transport and provider failures come back
    as an entry with status ERROR.
    """

    @property
    def model_name(self) -> str:
        """Return the model identifier sent upstream."""
        ...

    async def complete(self, prompt: str) -> CacheEntryEntity:
        """Send a single user message and return the normalized outcome.

        Args:
            prompt: The prompt, sent verbatim

        Returns:
            CacheEntryEntity with status SUCCESS and the answer, or ERROR and a message
        """
        ...

"""Groq chat completions client.

Sends one user-role message per call to an OpenAI-compatible chat
completions endpoint and folds every outcome into a CacheEntryEntity:

- ``choices[0].message.content`` present and non-empty -> success
- otherwise ``error.message`` present -> error with that message
- otherwise -> error "Unexpected response format"
- transport failure or unparseable body -> error "Error: <exception>"

HTTP status codes are not inspected; Groq reports failures in the body.
No retries: a failed call is final for that request.
"""

from typing import Any

import httpx
import structlog

from groq_cache.config import EnvSecretProvider, settings
from groq_cache.entities import CacheEntryEntity
from groq_cache.protocols import SecretProvider

log = structlog.get_logger()

UNEXPECTED_FORMAT_MESSAGE = "Unexpected response format"


class GroqCompletionClient:
    """Groq implementation of CompletionProvider protocol.

    This class satisfies the CompletionProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        client = GroqCompletionClient.create()
        entry = await client.complete("What is a cache?")
        if entry.is_success:
            print(entry.content)
        ```
    """

    def __init__(
        self,
        secret_provider: SecretProvider | None = None,
        api_url: str | None = None,
        model_name: str | None = None,
        temperature: float | None = None,
        timeout: float | None = None,
        api_key_name: str | None = None,
    ) -> None:
        """Initialize the Groq client.

        Args:
            secret_provider: Source of the API key. Defaults to the environment.
            api_url: Chat completions URL. Defaults to settings.groq_api_url.
            model_name: Model identifier. Defaults to settings.groq_model.
            temperature: Sampling temperature. Defaults to settings.groq_temperature.
            timeout: Request timeout in seconds. Defaults to settings.groq_timeout.
            api_key_name: Secret name of the API key. Defaults to settings.groq_api_key_name.
        """
        self._secrets = secret_provider or EnvSecretProvider()
        self._api_url = api_url or settings.groq_api_url
        self._model_name = model_name or settings.groq_model
        self._temperature = settings.groq_temperature if temperature is None else temperature
        self._timeout = timeout or settings.groq_timeout
        self._api_key_name = api_key_name or settings.groq_api_key_name
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @classmethod
    def create(
        cls,
        secret_provider: SecretProvider | None = None,
        model_name: str | None = None,
    ) -> "GroqCompletionClient":
        """Factory method to create GroqCompletionClient with defaults.

        Args:
            secret_provider: Source of the API key. If None, reads the environment.
            model_name: Model identifier. If None, uses settings.

        Returns:
            Configured GroqCompletionClient
        """
        return cls(secret_provider=secret_provider, model_name=model_name)

    @property
    def model_name(self) -> str:
        return self._model_name

    def build_payload(self, prompt: str) -> dict[str, Any]:
        """Build the JSON request body for a prompt."""
        return {
            "model": self._model_name,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
        }

    async def complete(self, prompt: str) -> CacheEntryEntity:
        """Request a completion for prompt.

        Args:
            prompt: The prompt, sent verbatim as the user message

        Returns:
            CacheEntryEntity; never raises for transport or provider failures
        """
        api_key = self._secrets.get_secret(self._api_key_name)
        if api_key is None:
            log.warning("upstream_call_failed", reason="missing_api_key", key_name=self._api_key_name)
            return CacheEntryEntity.error(f"Error: {self._api_key_name} is not configured")

        headers = {"Authorization": f"Bearer {api_key}"}

        try:
            response = await self.client.post(
                self._api_url,
                json=self.build_payload(prompt),
                headers=headers,
            )
            data = response.json()
        except Exception as e:
            log.warning("upstream_call_failed", error=str(e), error_type=type(e).__name__)
            return CacheEntryEntity.error(f"Error: {e}")

        return self._normalize(data, response.status_code)

    def _normalize(self, data: Any, status_code: int) -> CacheEntryEntity:
        content = _extract_content(data)
        if content:
            return CacheEntryEntity.success(content)

        message = _extract_error_message(data) or UNEXPECTED_FORMAT_MESSAGE
        log.warning("upstream_error_response", status_code=status_code, message=message)
        return CacheEntryEntity.error(message)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def _extract_content(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None


def _extract_error_message(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    message = error.get("message") if isinstance(error, dict) else None
    return message if isinstance(message, str) and message else None

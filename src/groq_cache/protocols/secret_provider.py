"""Secret provider protocol for process-wide configuration."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SecretProvider(Protocol):
    def get_secret(self, name: str) -> str | None:
        """Return the secret named name, or None if it is not configured."""
        ...

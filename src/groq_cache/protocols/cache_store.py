"""Cache tier storage protocols.

Both tiers exchange opaque string payloads; parsing and tolerance of legacy
formats live in the service layer so the tiers share one policy.

Implementations raise ``StoreError`` for backend failures, chaining the
backend exception; the tiered cache absorbs those.
"""

from typing import Protocol, runtime_checkable


class StoreError(Exception):
    """A cache tier could not be read or written."""


@runtime_checkable
class FastStore(Protocol):
    """Short-lived, quota-limited key-value store with per-entry TTL."""

    def get(self, key: str) -> str | None:
        """Return the payload stored under key, or None if absent or expired."""
        ...

    def put(self, key: str, payload: str, ttl: int) -> None:
        """Store payload under key for ttl seconds, replacing any previous value."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...


@runtime_checkable
class DurableStore(Protocol):
    """Persistent property-style store: one value per key, no TTL.

    Expiry is the caller's concern, carried inside the payload.
    """

    def get(self, key: str) -> str | None:
        """Return the payload stored under key, or None if absent."""
        ...

    def put(self, key: str, payload: str) -> None:
        """Store payload under key, replacing any previous value."""
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

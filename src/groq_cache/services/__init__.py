"""Service layer for business logic.

This layer contains the caching logic. Services depend on protocols
(interfaces), not concrete implementations, making them testable with
in-memory stores.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Caching) -> (Data Access)
"""

from .tiered_cache import TieredCache

__all__ = [
    "TieredCache",
]

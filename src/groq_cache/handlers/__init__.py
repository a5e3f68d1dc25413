"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Caching) -> (Data Access)
"""

from .completion_handler import CompletionHandler

__all__ = [
    "CompletionHandler",
]

"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> Memcached, Groq -> another provider)
- Unit testing with in-memory fakes
- Clear separation of concerns

Usage:
    ```python
    from groq_cache.protocols import FastStore

    # Type hints work with any implementation
    store: FastStore = RedisFastStore()  # works
    ```
"""

from .cache_store import DurableStore, FastStore, StoreError
from .completion_provider import CompletionProvider
from .secret_provider import SecretProvider

__all__ = [
    "CompletionProvider",
    "DurableStore",
    "FastStore",
    "SecretProvider",
    "StoreError",
]

"""Factory for creating cache stores."""

from typing import Any

from .base import CacheStore


def create_cache_store(
    backend: str = "memory",
    **kwargs: Any
) -> CacheStore:
    """Create a cache store.

    Args:
        backend: Backend type (only "memory" is available)
        **kwargs: Backend-specific configuration

    Returns:
        CacheStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "memory":
        from .in_memory import InMemoryCacheStore
        return InMemoryCacheStore(**kwargs)

    raise ValueError(
        f"Unsupported cache backend: {backend}. "
        f"Supported backends: memory"
    )

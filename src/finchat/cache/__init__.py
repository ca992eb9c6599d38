"""Snapshot cache module for finchat.

Provides a TTL key-value store with get-or-compute semantics.
"""

from .base import CacheStore
from .factory import create_cache_store
from .in_memory import InMemoryCacheStore
from .models import CacheEntry, CacheKey

__all__ = [
    "CacheEntry",
    "CacheKey",
    "CacheStore",
    "InMemoryCacheStore",
    "create_cache_store",
]

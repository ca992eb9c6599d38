"""Abstract base class for cache stores.

The abstraction hides:
- Storage location (process memory, external cache server)
- Expiry bookkeeping
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from .models import CacheKey

T = TypeVar("T")


class CacheStore(ABC):
    """Key-value store with per-entry time-to-live.

    There is no invalidation API. Staleness is bounded by the TTL and by the
    version token carried in every ``CacheKey``.
    """

    @abstractmethod
    async def fetch_or_compute(
        self,
        key: CacheKey,
        ttl: float,
        compute: Callable[[], Awaitable[T]]
    ) -> T:
        """Return the live value for ``key`` or compute and store it.

        Concurrent callers missing on the same key may each run ``compute``;
        the last write wins.

        Args:
            key: Cache key
            ttl: Seconds the computed value stays live
            compute: Async callable producing the value on a miss

        Returns:
            Cached or freshly computed value
        """

    @abstractmethod
    def get(self, key: CacheKey) -> Any | None:
        """Return the live value for ``key`` without computing, or None."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""

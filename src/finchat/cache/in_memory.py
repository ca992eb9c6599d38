"""In-memory cache store.

Simple dict-based storage shared by every request in the process.
Data is lost when the application exits.
"""

import logging
import time
from collections import OrderedDict
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..config import CACHE_MAX_ENTRIES
from .base import CacheStore
from .models import CacheEntry, CacheKey

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryCacheStore(CacheStore):
    """Process-local cache store.

    Every write drops expired entries, then evicts least recently used
    entries beyond ``max_entries``. Keys superseded by a new version token
    or a new period therefore leave the store once their TTL passes.

    Args:
        clock: Monotonic clock returning seconds; injectable for tests
        max_entries: Maximum number of entries kept
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        max_entries: int = CACHE_MAX_ENTRIES
    ):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self._clock = clock
        self._max_entries = max_entries
        self._entries: OrderedDict[CacheKey, CacheEntry] = OrderedDict()

    async def fetch_or_compute(
        self,
        key: CacheKey,
        ttl: float,
        compute: Callable[[], Awaitable[T]]
    ) -> T:
        entry = self._entries.get(key)
        if entry is not None and entry.is_live(self._clock()):
            logger.debug("Cache hit: %s", key)
            self._entries.move_to_end(key)
            return entry.value

        logger.debug("Cache miss: %s", key)
        value = await compute()
        now = self._clock()
        self._entries[key] = CacheEntry(key=key, value=value, expires_at=now + ttl)
        self._entries.move_to_end(key)
        self._prune(now)
        return value

    def get(self, key: CacheKey) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if not entry.is_live(self._clock()):
            del self._entries[key]
            return None
        return entry.value

    def _prune(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if not entry.is_live(now)]
        for key in expired:
            del self._entries[key]

        while len(self._entries) > self._max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Cache evict: %s", evicted)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def backend_type(self) -> str:
        return "memory"

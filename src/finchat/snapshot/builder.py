import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from datetime import date

from ..cache import CacheStore, InMemoryCacheStore
from ..config import (
    FALLBACK_PERIOD_KEY,
    FETCHER_DEADLINE_SECONDS,
    SNAPSHOT_CACHE_TTL_SECONDS,
    SNAPSHOT_DEADLINE_SECONDS,
)
from ..finance import Family, FinanceService, InvalidPeriodKeyError, Period
from .deadline import Deadline
from .fetchers import SnapshotContext, SnapshotFetcher, default_fetchers
from .models import Snapshot

logger = logging.getLogger(__name__)


def resolve_period(key: str | None, today: date | None = None) -> Period:
    """Resolve a user's default period key, falling back to the current month."""
    try:
        return Period.from_key(key or FALLBACK_PERIOD_KEY, today)
    except InvalidPeriodKeyError:
        logger.debug("Invalid default period %r, using %s", key, FALLBACK_PERIOD_KEY)
        return Period.from_key(FALLBACK_PERIOD_KEY, today)


class SnapshotBuilder:
    """Builds financial snapshots under a global time budget.

    Hidden design decisions:
    - Fetchers run concurrently, each under a child deadline nested in
      the outer one
    - Lines are merged in fixed fetcher order, whatever the completion order
    - Any failure of the whole build degrades to ``Snapshot.unavailable()``
    """

    def __init__(
        self,
        finance: FinanceService,
        cache: CacheStore | None = None,
        fetchers: Sequence[SnapshotFetcher] | None = None,
        timeout: float = SNAPSHOT_DEADLINE_SECONDS,
        fetcher_timeout: float = FETCHER_DEADLINE_SECONDS,
        cache_ttl: float = SNAPSHOT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the builder.

        Args:
            finance: Finance service to read from
            cache: Cache shared across builds (default: a new in-memory store)
            fetchers: Fetchers in line order (default: ``default_fetchers()``)
            timeout: Outer budget for a whole build, in seconds
            fetcher_timeout: Budget for each fetcher, in seconds
            cache_ttl: Time-to-live of cached reads, in seconds
            clock: Monotonic clock used for deadlines
        """
        self._finance = finance
        self._cache = cache if cache is not None else InMemoryCacheStore()
        self._fetchers = list(fetchers) if fetchers is not None else default_fetchers()
        self._timeout = timeout
        self._fetcher_timeout = fetcher_timeout
        self._cache_ttl = cache_ttl
        self._clock = clock

    @property
    def cache(self) -> CacheStore:
        return self._cache

    async def build(
        self,
        family: Family,
        default_period_key: str | None = FALLBACK_PERIOD_KEY,
        today: date | None = None,
    ) -> Snapshot:
        """Build a snapshot for a family.

        Never raises; returns ``Snapshot.unavailable()`` if the build fails or
        exceeds the outer deadline.

        Args:
            family: Family to summarize
            default_period_key: User's preferred period key
            today: Reference date (default: today)

        Returns:
            The snapshot
        """
        deadline = Deadline.after(self._timeout, self._clock)
        start_time = time.time()

        try:
            today = today or date.today()
            ctx = SnapshotContext(
                family=family,
                period=resolve_period(default_period_key, today),
                today=today,
                finance=self._finance,
                cache=self._cache,
                ttl=self._cache_ttl,
            )
            lines = await asyncio.wait_for(self._collect(ctx, deadline), timeout=deadline.remaining())
            snapshot = Snapshot.from_lines(lines)
        except asyncio.TimeoutError:
            snapshot = None
        except Exception as e:
            logger.warning("Snapshot for family %s failed: %s", family.id, e, exc_info=True)
            return Snapshot.unavailable()

        # Fetchers capped by the outer deadline may finish just as it expires;
        # a late build is discarded rather than returned partially.
        if snapshot is None or deadline.expired:
            logger.warning("Snapshot for family %s exceeded %.1fs", family.id, self._timeout)
            return Snapshot.unavailable()

        logger.debug(
            "Built snapshot for family %s: %d lines in %.0fms",
            family.id, len(snapshot.lines), (time.time() - start_time) * 1000
        )
        return snapshot

    async def _collect(self, ctx: SnapshotContext, deadline: Deadline) -> list[str | None]:
        return await asyncio.gather(*(
            fetcher.run(ctx, deadline.child(self._fetcher_timeout))
            for fetcher in self._fetchers
        ))

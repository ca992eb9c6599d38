"""Wall-clock budgets threaded through snapshot computations."""

import time
from collections.abc import Callable


class Deadline:
    """A point in time after which in-flight work should be abandoned.

    Deadlines are passed explicitly to every fetcher. A child deadline never
    outlives its parent, so nested budgets compose.

    Usage:
        outer = Deadline.after(2.0)
        inner = outer.child(1.0)
        await asyncio.wait_for(work(), timeout=inner.remaining())
    """

    def __init__(self, expires_at: float, clock: Callable[[], float] = time.monotonic):
        self._expires_at = expires_at
        self._clock = clock

    @classmethod
    def after(cls, seconds: float, clock: Callable[[], float] = time.monotonic) -> "Deadline":
        """Create a deadline ``seconds`` from now."""
        return cls(clock() + seconds, clock)

    @property
    def expires_at(self) -> float:
        return self._expires_at

    def remaining(self) -> float:
        """Seconds left before expiry, never negative."""
        return max(0.0, self._expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def child(self, seconds: float) -> "Deadline":
        """Create a nested deadline capped by this one."""
        return Deadline(min(self._expires_at, self._clock() + seconds), self._clock)

    def __repr__(self) -> str:
        return f"Deadline(remaining={self.remaining():.3f}s)"

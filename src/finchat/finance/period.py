"""Reporting periods.

A period is resolved from a short key (e.g. ``last_30_days``) relative to a
reference date. Unknown keys raise ``InvalidPeriodKeyError``.
"""

from collections.abc import Callable
from datetime import date, timedelta

from pydantic import BaseModel, ConfigDict, Field


class InvalidPeriodKeyError(ValueError):
    """Raised when a period key is not one of the known keys."""


def _days_ago(days: int) -> Callable[[date], date]:
    return lambda today: today - timedelta(days=days)


def _years_ago(years: int) -> Callable[[date], date]:
    def start(today: date) -> date:
        try:
            return today.replace(year=today.year - years)
        except ValueError:
            # Feb 29 in a non-leap target year
            return today.replace(year=today.year - years, day=28)
    return start


# key -> (label, start date given today)
_PERIODS: dict[str, tuple[str, Callable[[date], date]]] = {
    "last_day": ("Last Day", _days_ago(1)),
    "current_week": ("Current Week", lambda today: today - timedelta(days=today.weekday())),
    "last_7_days": ("Last 7 Days", _days_ago(7)),
    "current_month": ("Current Month", lambda today: today.replace(day=1)),
    "last_30_days": ("Last 30 Days", _days_ago(30)),
    "last_90_days": ("Last 90 Days", _days_ago(90)),
    "current_year": ("Current Year", lambda today: today.replace(month=1, day=1)),
    "last_365_days": ("Last 365 Days", _days_ago(365)),
    "last_5_years": ("Last 5 Years", _years_ago(5)),
}

PERIOD_KEYS = tuple(_PERIODS)


class Period(BaseModel):
    """An inclusive date range with a display label."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(description="Period key, e.g. 'current_month'")
    label: str = Field(description="Human readable label")
    start_date: date
    end_date: date

    @classmethod
    def from_key(cls, key: str, today: date | None = None) -> "Period":
        """Resolve a period key relative to ``today``.

        Args:
            key: One of ``PERIOD_KEYS``
            today: Reference date (default: today)

        Returns:
            Resolved period

        Raises:
            InvalidPeriodKeyError: If the key is unknown
        """
        if key not in _PERIODS:
            raise InvalidPeriodKeyError(
                f"Invalid period key: {key!r}. Valid keys: {', '.join(PERIOD_KEYS)}"
            )
        today = today or date.today()
        label, start = _PERIODS[key]
        return cls(key=key, label=label, start_date=start(today), end_date=today)

    @classmethod
    def current_month(cls, today: date | None = None) -> "Period":
        """Get the period from the first of this month to today."""
        return cls.from_key("current_month", today)

    def contains(self, day: date) -> bool:
        """Check whether ``day`` falls inside the period."""
        return self.start_date <= day <= self.end_date

"""Financial snapshot module for finchat.

Builds the bounded-latency text summary of a family's finances that is
embedded in the assistant instructions.
"""

from .builder import SnapshotBuilder, resolve_period
from .deadline import Deadline
from .fetchers import (
    BudgetFetcher,
    CategoryBreakdownFetcher,
    MedianIncomeFetcher,
    NetWorthFetcher,
    PeriodSummaryFetcher,
    RecentTransactionsFetcher,
    SnapshotContext,
    SnapshotFetcher,
    TopAccountsFetcher,
    default_fetchers,
)
from .models import Snapshot

__all__ = [
    "BudgetFetcher",
    "CategoryBreakdownFetcher",
    "Deadline",
    "MedianIncomeFetcher",
    "NetWorthFetcher",
    "PeriodSummaryFetcher",
    "RecentTransactionsFetcher",
    "Snapshot",
    "SnapshotBuilder",
    "SnapshotContext",
    "SnapshotFetcher",
    "TopAccountsFetcher",
    "default_fetchers",
    "resolve_period",
]

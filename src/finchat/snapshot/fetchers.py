"""Snapshot source fetchers.

Each fetcher produces at most one snapshot line from one finance read.
Fetchers never raise: failures and timeouts turn into an omitted line.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TypeVar

from ..cache import CacheKey, CacheStore
from ..config import (
    RECENT_TRANSACTIONS_LIMIT,
    SNAPSHOT_CACHE_TTL_SECONDS,
    TOP_ACCOUNTS_LIMIT,
    TOP_CATEGORIES_LIMIT,
)
from ..finance import (
    BalanceSheet,
    Budget,
    Classification,
    Family,
    FinanceService,
    IncomeStatement,
    Period,
    Transaction,
    format_money,
)
from .deadline import Deadline

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SnapshotContext:
    """Everything a fetcher needs for one snapshot build.

    Reads go through the cache so that fetchers sharing a source (e.g. the
    balance sheet) reuse each other's results.
    """

    family: Family
    period: Period
    today: date
    finance: FinanceService
    cache: CacheStore
    ttl: float = SNAPSHOT_CACHE_TTL_SECONDS

    def _key(self, namespace: str, *params: str) -> CacheKey:
        return CacheKey(
            namespace=namespace,
            entity_id=self.family.id,
            version=self.family.entries_cache_version,
            params=params,
        )

    async def _cached(self, key: CacheKey, compute: Callable[[], Awaitable[T]]) -> T:
        return await self.cache.fetch_or_compute(key, self.ttl, compute)

    async def balance_sheet(self) -> BalanceSheet:
        return await self._cached(
            self._key("balance_sheet"),
            lambda: self.finance.balance_sheet(self.family),
        )

    async def income_statement(self) -> IncomeStatement:
        return await self._cached(
            self._key(
                "income_statement",
                self.period.key,
                self.period.start_date.isoformat(),
                self.period.end_date.isoformat(),
            ),
            lambda: self.finance.income_statement(self.family, self.period),
        )

    async def median_income(self) -> Decimal:
        return await self._cached(
            self._key("median_income", "month"),
            lambda: self.finance.median_income(self.family, interval="month"),
        )

    async def current_budget(self) -> Budget | None:
        month_start = self.today.replace(day=1)
        return await self._cached(
            self._key("budget", month_start.isoformat()),
            lambda: self.finance.find_or_bootstrap_budget(self.family, month_start),
        )

    async def recent_transactions(self, limit: int) -> list[Transaction]:
        return await self._cached(
            self._key(
                "recent_transactions",
                self.period.start_date.isoformat(),
                self.period.end_date.isoformat(),
                str(limit),
            ),
            lambda: self.finance.recent_transactions(self.family, self.period, limit=limit),
        )

    def money(self, amount: Decimal, currency: str | None = None) -> str:
        return format_money(amount, currency or self.family.currency)


class SnapshotFetcher(ABC):
    """One bounded, cached, fault-tolerant snapshot line."""

    name: str = "fetcher"

    @abstractmethod
    async def fetch(self, ctx: SnapshotContext) -> str | None:
        """Produce the line, or None to omit it. May raise."""

    async def run(self, ctx: SnapshotContext, deadline: Deadline) -> str | None:
        """Produce the line within ``deadline``, or None on any failure."""
        if deadline.expired:
            logger.debug("Skipping %s: deadline already expired", self.name)
            return None

        try:
            line = await asyncio.wait_for(self.fetch(ctx), timeout=deadline.remaining())
        except asyncio.TimeoutError:
            logger.warning("Snapshot fetcher %s timed out", self.name)
            return None
        except Exception as e:
            logger.warning("Snapshot fetcher %s failed: %s", self.name, e, exc_info=True)
            return None

        return line or None


class NetWorthFetcher(SnapshotFetcher):
    name = "net_worth"

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        sheet = await ctx.balance_sheet()
        return (
            f"Net worth: {ctx.money(sheet.net_worth)} | "
            f"Assets: {ctx.money(sheet.assets.total)} | "
            f"Liabilities: {ctx.money(sheet.liabilities.total)}"
        )


class PeriodSummaryFetcher(SnapshotFetcher):
    name = "period_summary"

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        statement = await ctx.income_statement()
        return (
            f"{ctx.period.label}: Income {ctx.money(statement.income.total)}, "
            f"Expenses {ctx.money(statement.expense.total)}"
        )


class TopAccountsFetcher(SnapshotFetcher):
    """Largest accounts of one balance sheet side by converted balance."""

    _TITLES = {
        Classification.ASSET: "Top assets",
        Classification.LIABILITY: "Top debts",
    }

    def __init__(self, classification: Classification, limit: int = TOP_ACCOUNTS_LIMIT):
        self._classification = classification
        self._limit = limit
        self.name = f"top_{classification.value}_accounts"

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        sheet = await ctx.balance_sheet()
        group = sheet.assets if self._classification == Classification.ASSET else sheet.liabilities

        accounts = sorted(group.accounts, key=lambda row: row.converted_balance, reverse=True)
        accounts = accounts[:self._limit]
        if not accounts:
            return None

        items = [f"{row.name}: {ctx.money(row.converted_balance, group.currency)}" for row in accounts]
        return f"{self._TITLES[self._classification]}: {', '.join(items)}"


class MedianIncomeFetcher(SnapshotFetcher):
    name = "median_income"

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        median = await ctx.median_income()
        if median is None or median <= 0:
            return None
        return f"Median monthly income (salary proxy): {ctx.money(median)}"


class BudgetFetcher(SnapshotFetcher):
    name = "budget"

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        budget = await ctx.current_budget()
        if budget is None:
            return None

        planned = budget.budgeted_spending or Decimal("0")
        return (
            f"Budget {budget.name}: Planned {ctx.money(planned)}, "
            f"Spent {ctx.money(budget.actual_spending)}, "
            f"Income {ctx.money(budget.actual_income)}"
        )


class CategoryBreakdownFetcher(SnapshotFetcher):
    """Top-level expense categories with non-zero totals, heaviest first."""

    name = "category_breakdown"

    def __init__(self, limit: int = TOP_CATEGORIES_LIMIT):
        self._limit = limit

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        totals = (await ctx.income_statement()).expense

        parents = [
            ct for ct in totals.category_totals
            if not ct.category.is_subcategory and ct.total != 0
        ]
        parents.sort(key=lambda ct: ct.weight, reverse=True)

        parts = [
            f"{ct.category.name}: {ctx.money(ct.total, totals.currency)}"
            for ct in parents[:self._limit]
        ]
        if not parts:
            return None
        return f"Top categories: {', '.join(parts)}"


class RecentTransactionsFetcher(SnapshotFetcher):
    name = "recent_transactions"

    def __init__(self, limit: int = RECENT_TRANSACTIONS_LIMIT):
        self._limit = limit

    async def fetch(self, ctx: SnapshotContext) -> str | None:
        transactions = await ctx.recent_transactions(self._limit)
        if not transactions:
            return None

        items = []
        for txn in transactions[:self._limit]:
            base = f"{txn.date.isoformat()} {txn.name or 'Txn'}: {ctx.money(txn.amount, txn.currency)}"
            items.append(f"{base} ({txn.category_name})" if txn.category_name else base)

        return f"Recent transactions (latest {self._limit}): {'; '.join(items)}"


def default_fetchers() -> list[SnapshotFetcher]:
    """Fetchers in snapshot line order."""
    return [
        NetWorthFetcher(),
        PeriodSummaryFetcher(),
        TopAccountsFetcher(Classification.ASSET),
        TopAccountsFetcher(Classification.LIABILITY),
        MedianIncomeFetcher(),
        BudgetFetcher(),
        CategoryBreakdownFetcher(),
        RecentTransactionsFetcher(),
    ]

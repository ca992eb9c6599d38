"""Abstract interface to the finance subsystem.

This module hides where financial data comes from:
- Database queries and balance sheet arithmetic
- Currency conversion
- Budget bootstrapping
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal

from .models import BalanceSheet, Budget, Family, IncomeStatement, Transaction
from .period import Period


class FinanceService(ABC):
    """Read-only access to a family's financial data.

    Every method may be slow or fail; callers are expected to bound and
    guard them.
    """

    @abstractmethod
    async def balance_sheet(self, family: Family) -> BalanceSheet:
        """Get the family's current balance sheet."""

    @abstractmethod
    async def income_statement(self, family: Family, period: Period) -> IncomeStatement:
        """Get income and expense totals for a period."""

    @abstractmethod
    async def median_income(self, family: Family, interval: str = "month") -> Decimal:
        """Get the median income per interval (e.g. per month)."""

    @abstractmethod
    async def find_or_bootstrap_budget(self, family: Family, start_date: date) -> Budget | None:
        """Get the budget starting on ``start_date``, creating it if the family budgets.

        Returns:
            The budget, or None if the family has no budget for that month
        """

    @abstractmethod
    async def recent_transactions(
        self,
        family: Family,
        period: Period,
        limit: int = 10
    ) -> list[Transaction]:
        """Get visible transactions within a period, newest first."""

"""Finance service backed by a precomputed ledger file.

The ledger holds values already computed by the finance subsystem (balance
sheet, income statements per period, budgets). This service only looks
them up and filters transactions, which makes it suitable for the CLI and
for tests.

Example ledger (YAML)::

    family:
      id: fam-1
      currency: USD
    user:
      id: user-1
      display_name: Alex
      default_period: current_month
    balance_sheet:
      currency: USD
      net_worth: "12000"
      assets: {classification: asset, currency: USD, total: "15000", accounts: []}
      liabilities: {classification: liability, currency: USD, total: "3000", accounts: []}
    income_statements:
      current_month:
        period_key: current_month
        income: {currency: USD, total: "5000"}
        expense: {currency: USD, total: "3200"}
"""

from datetime import date
from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .base import FinanceService
from .models import BalanceSheet, Budget, Family, IncomeStatement, Transaction, User
from .period import Period


class Ledger(BaseModel):
    """Precomputed financial data of one family."""

    family: Family
    user: User | None = None
    balance_sheet: BalanceSheet | None = None
    income_statements: dict[str, IncomeStatement] = Field(
        default_factory=dict,
        description="Income statements keyed by period key"
    )
    median_monthly_income: Decimal = Decimal("0")
    budgets: list[Budget] = Field(default_factory=list)
    transactions: list[Transaction] = Field(default_factory=list)


def load_ledger(path: Path | str) -> Ledger:
    """Load a ledger from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated ledger

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the content does not match ``Ledger``
    """
    text = Path(path).read_text(encoding="utf-8")
    return Ledger.model_validate(yaml.safe_load(text) or {})


class StaticFinanceService(FinanceService):
    """Finance service answering from a ``Ledger``."""

    def __init__(self, ledger: Ledger):
        self._ledger = ledger

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def _check_family(self, family: Family) -> None:
        if family.id != self._ledger.family.id:
            raise LookupError(f"Unknown family: {family.id}")

    async def balance_sheet(self, family: Family) -> BalanceSheet:
        self._check_family(family)
        if self._ledger.balance_sheet is None:
            raise LookupError(f"No balance sheet for family {family.id}")
        return self._ledger.balance_sheet

    async def income_statement(self, family: Family, period: Period) -> IncomeStatement:
        self._check_family(family)
        statement = self._ledger.income_statements.get(period.key)
        if statement is None:
            raise LookupError(f"No income statement for period {period.key}")
        return statement

    async def median_income(self, family: Family, interval: str = "month") -> Decimal:
        self._check_family(family)
        if interval != "month":
            raise ValueError(f"Unsupported interval: {interval}")
        return self._ledger.median_monthly_income

    async def find_or_bootstrap_budget(self, family: Family, start_date: date) -> Budget | None:
        self._check_family(family)
        for budget in self._ledger.budgets:
            if budget.start_date == start_date:
                return budget
        return None

    async def recent_transactions(
        self,
        family: Family,
        period: Period,
        limit: int = 10
    ) -> list[Transaction]:
        self._check_family(family)
        visible = [
            txn for txn in self._ledger.transactions
            if not txn.excluded and period.contains(txn.date)
        ]
        visible.sort(key=lambda txn: txn.date, reverse=True)
        return visible[:limit]

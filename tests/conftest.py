"""Pytest configuration and shared fixtures."""
import os
from datetime import date
from decimal import Decimal

import pytest

from finchat.finance import (
    AccountTotal,
    BalanceSheet,
    Budget,
    Category,
    CategoryTotal,
    Classification,
    ClassificationGroup,
    Family,
    IncomeStatement,
    Ledger,
    PeriodTotals,
    StaticFinanceService,
    Transaction,
    User,
)

TODAY = date(2025, 6, 15)


class CountingFinanceService(StaticFinanceService):
    """Static finance service that records how often each read is made."""

    def __init__(self, ledger: Ledger):
        super().__init__(ledger)
        self.calls: dict[str, int] = {}

    def _count(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    async def balance_sheet(self, family):
        self._count("balance_sheet")
        return await super().balance_sheet(family)

    async def income_statement(self, family, period):
        self._count("income_statement")
        return await super().income_statement(family, period)

    async def median_income(self, family, interval="month"):
        self._count("median_income")
        return await super().median_income(family, interval)

    async def find_or_bootstrap_budget(self, family, start_date):
        self._count("budget")
        return await super().find_or_bootstrap_budget(family, start_date)

    async def recent_transactions(self, family, period, limit=10):
        self._count("recent_transactions")
        return await super().recent_transactions(family, period, limit)


@pytest.fixture
def today():
    """Fixed reference date for period resolution."""
    return TODAY


@pytest.fixture
def family():
    """Return a USD family."""
    return Family(id="fam-1", currency="USD", date_format="%m-%d-%Y", country="US", entries_cache_version="v1")


@pytest.fixture
def user():
    """Return a user preferring the current month."""
    return User(id="user-1", display_name="Alex", default_period="current_month")


def _group(classification, total, accounts):
    return ClassificationGroup(
        classification=classification,
        currency="USD",
        total=Decimal(total),
        accounts=[AccountTotal(name=name, converted_balance=Decimal(balance)) for name, balance in accounts],
    )


@pytest.fixture
def ledger(family, user):
    """Return a ledger with data for every snapshot line."""
    expense = PeriodTotals(
        currency="USD",
        total=Decimal("3200"),
        category_totals=[
            CategoryTotal(category=Category(name="Housing"), total=Decimal("1800"), weight=56.25),
            CategoryTotal(category=Category(name="Food"), total=Decimal("900"), weight=28.1),
            CategoryTotal(
                category=Category(name="Groceries", parent_name="Food"), total=Decimal("700"), weight=21.9
            ),
            CategoryTotal(category=Category(name="Travel"), total=Decimal("0"), weight=0.0),
            CategoryTotal(category=Category(name="Transport"), total=Decimal("500"), weight=15.6),
        ],
    )
    return Ledger(
        family=family,
        user=user,
        balance_sheet=BalanceSheet(
            currency="USD",
            net_worth=Decimal("12000"),
            assets=_group(Classification.ASSET, "15000", [("Savings", "5000"), ("Checking", "10000")]),
            liabilities=_group(Classification.LIABILITY, "3000", [("Visa", "3000")]),
        ),
        income_statements={
            "current_month": IncomeStatement(
                period_key="current_month",
                income=PeriodTotals(currency="USD", total=Decimal("5000")),
                expense=expense,
            ),
        },
        median_monthly_income=Decimal("4800"),
        budgets=[
            Budget(
                name="June 2025",
                start_date=date(2025, 6, 1),
                budgeted_spending=Decimal("4000"),
                actual_spending=Decimal("3200"),
                actual_income=Decimal("5000"),
            ),
        ],
        transactions=[
            Transaction(date=date(2025, 6, 10), name="Rent", amount=Decimal("1800"), category_name="Housing"),
            Transaction(date=date(2025, 6, 12), name="Grocer", amount=Decimal("84.5")),
            Transaction(date=date(2025, 6, 1), name="Hidden", amount=Decimal("5"), excluded=True),
            Transaction(date=date(2025, 5, 30), name="Last month", amount=Decimal("10")),
        ],
    )


@pytest.fixture
def finance(ledger):
    """Return a call-counting finance service over the sample ledger."""
    return CountingFinanceService(ledger)


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }

"""Data models for financial entities read by the snapshot.

These describe what finchat needs from the finance subsystem. How the
values are computed is the subsystem's concern.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Classification(str, Enum):
    """Balance sheet side of an account."""

    ASSET = "asset"
    LIABILITY = "liability"


class Family(BaseModel):
    """Household that owns accounts and shares preferences."""

    model_config = ConfigDict(frozen=True)

    id: str
    currency: str = Field(default="USD", description="ISO code of the preferred currency")
    date_format: str = Field(default="%m-%d-%Y", description="Preferred date format")
    country: str = Field(default="US")
    entries_cache_version: str = Field(
        default="0",
        description="Token that changes whenever the family's entries change"
    )


class User(BaseModel):
    """Member of a family chatting with the assistant."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    default_period: str = Field(default="last_30_days", description="Default period key")


class AccountTotal(BaseModel):
    """Account balance converted to the family currency."""

    model_config = ConfigDict(frozen=True)

    name: str
    converted_balance: Decimal


class ClassificationGroup(BaseModel):
    """Assets or liabilities side of a balance sheet."""

    model_config = ConfigDict(frozen=True)

    classification: Classification
    currency: str
    total: Decimal
    accounts: list[AccountTotal] = Field(default_factory=list)


class BalanceSheet(BaseModel):
    """Net worth with its asset and liability groups."""

    model_config = ConfigDict(frozen=True)

    currency: str
    net_worth: Decimal
    assets: ClassificationGroup
    liabilities: ClassificationGroup


class Category(BaseModel):
    """Transaction category; a category with a parent is a subcategory."""

    model_config = ConfigDict(frozen=True)

    name: str
    parent_name: str | None = None

    @property
    def is_subcategory(self) -> bool:
        return self.parent_name is not None


class CategoryTotal(BaseModel):
    """Total of one category within a period."""

    model_config = ConfigDict(frozen=True)

    category: Category
    total: Decimal
    weight: float = Field(default=0.0, description="Share of the period total, in percent")


class PeriodTotals(BaseModel):
    """Income or expense totals for a period."""

    model_config = ConfigDict(frozen=True)

    currency: str
    total: Decimal
    category_totals: list[CategoryTotal] = Field(default_factory=list)


class IncomeStatement(BaseModel):
    """Income and expense totals of a family for one period."""

    model_config = ConfigDict(frozen=True)

    period_key: str
    income: PeriodTotals
    expense: PeriodTotals


class Budget(BaseModel):
    """Monthly budget."""

    model_config = ConfigDict(frozen=True)

    name: str
    start_date: date
    budgeted_spending: Decimal | None = None
    actual_spending: Decimal = Decimal("0")
    actual_income: Decimal = Decimal("0")


class Transaction(BaseModel):
    """A visible transaction entry."""

    model_config = ConfigDict(frozen=True)

    date: date
    name: str | None = None
    amount: Decimal = Decimal("0")
    currency: str | None = None
    category_name: str | None = None
    excluded: bool = Field(default=False, description="Hidden from reports and the assistant")

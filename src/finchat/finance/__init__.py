"""Finance boundary module for finchat.

Defines the financial data the assistant reads and the service interface
it reads it through.
"""

from .base import FinanceService
from .models import (
    AccountTotal,
    BalanceSheet,
    Budget,
    Category,
    CategoryTotal,
    Classification,
    ClassificationGroup,
    Family,
    IncomeStatement,
    PeriodTotals,
    Transaction,
    User,
)
from .money import Currency, format_money
from .period import PERIOD_KEYS, InvalidPeriodKeyError, Period
from .static import Ledger, StaticFinanceService, load_ledger

__all__ = [
    "AccountTotal",
    "BalanceSheet",
    "Budget",
    "Category",
    "CategoryTotal",
    "Classification",
    "ClassificationGroup",
    "Currency",
    "Family",
    "FinanceService",
    "IncomeStatement",
    "InvalidPeriodKeyError",
    "Ledger",
    "PERIOD_KEYS",
    "Period",
    "PeriodTotals",
    "StaticFinanceService",
    "Transaction",
    "User",
    "format_money",
    "load_ledger",
]

"""Functions the assistant exposes to the model.

The catalog is closed: each member carries its description and the pydantic
models describing its arguments and result. Executing a function is the
calling layer's job.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field


class NoParams(BaseModel):
    """Function takes no arguments."""


class GetTransactionsParams(BaseModel):
    page: int = Field(default=1, ge=1, description="Page number")
    order: Literal["asc", "desc"] = Field(default="desc", description="Sort order by date")
    search: str | None = Field(default=None, description="Text to search for in transaction names")
    accounts: list[str] = Field(default_factory=list, description="Account names to filter by")
    categories: list[str] = Field(default_factory=list, description="Category names to filter by")
    merchants: list[str] = Field(default_factory=list, description="Merchant names to filter by")
    tags: list[str] = Field(default_factory=list, description="Tag names to filter by")
    amount: Decimal | None = Field(default=None, description="Amount to compare against")
    amount_operator: Literal["<", ">", "="] | None = None
    start_date: date = Field(description="Start of the date range (inclusive)")
    end_date: date = Field(description="End of the date range (inclusive)")


class TransactionRow(BaseModel):
    date: date
    name: str
    amount: str = Field(description="Formatted amount")
    classification: Literal["income", "expense"]
    account: str
    category: str | None = None
    merchant: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_transfer: bool = False


class GetTransactionsResult(BaseModel):
    transactions: list[TransactionRow]
    total_results: int
    page: int
    page_size: int
    total_pages: int
    total_income: str
    total_expenses: str


class AccountRow(BaseModel):
    name: str
    balance: Decimal
    currency: str
    balance_formatted: str
    classification: Literal["asset", "liability"]
    type: str
    start_date: date | None = None
    is_active: bool = True


class GetAccountsResult(BaseModel):
    as_of_date: date
    accounts: list[AccountRow]


class BalanceSummary(BaseModel):
    current: str = Field(description="Formatted current value")
    monthly_history: dict[str, str] = Field(
        default_factory=dict,
        description="Formatted value at the end of each month, keyed YYYY-MM"
    )


class GetBalanceSheetResult(BaseModel):
    as_of_date: date
    currency: str
    net_worth: BalanceSummary
    assets: BalanceSummary
    liabilities: BalanceSummary


class GetIncomeStatementParams(BaseModel):
    start_date: date = Field(description="Start of the period (inclusive)")
    end_date: date = Field(description="End of the period (inclusive)")


class CategoryAmount(BaseModel):
    name: str
    total: str = Field(description="Formatted total")
    percentage_of_total: float


class ClassificationSummary(BaseModel):
    total: str = Field(description="Formatted total")
    by_category: list[CategoryAmount] = Field(default_factory=list)


class GetIncomeStatementResult(BaseModel):
    currency: str
    period_start: date
    period_end: date
    income: ClassificationSummary
    expense: ClassificationSummary


class AssistantFunction(str, Enum):
    """Closed catalog of functions the model may call."""

    GET_TRANSACTIONS = "get_transactions"
    GET_ACCOUNTS = "get_accounts"
    GET_BALANCE_SHEET = "get_balance_sheet"
    GET_INCOME_STATEMENT = "get_income_statement"

    @property
    def function_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return _SPECS[self][0]

    @property
    def params_model(self) -> type[BaseModel]:
        return _SPECS[self][1]

    @property
    def result_model(self) -> type[BaseModel]:
        return _SPECS[self][2]

    def params_schema(self) -> dict[str, Any]:
        """JSON schema of the function's arguments."""
        return self.params_model.model_json_schema()

    def result_schema(self) -> dict[str, Any]:
        """JSON schema of the function's result."""
        return self.result_model.model_json_schema()

    def parse_params(self, arguments: dict[str, Any]) -> BaseModel:
        """Validate raw call arguments.

        Raises:
            pydantic.ValidationError: If the arguments do not match the schema
        """
        return self.params_model.model_validate(arguments)


_SPECS: dict[AssistantFunction, tuple[str, type[BaseModel], type[BaseModel]]] = {
    AssistantFunction.GET_TRANSACTIONS: (
        "Search the user's transactions with filters, paginated, to answer questions "
        "about specific spending, merchants or categories.",
        GetTransactionsParams,
        GetTransactionsResult,
    ),
    AssistantFunction.GET_ACCOUNTS: (
        "List the user's accounts with their current balances.",
        NoParams,
        GetAccountsResult,
    ),
    AssistantFunction.GET_BALANCE_SHEET: (
        "Get the user's net worth, assets and liabilities with monthly history.",
        NoParams,
        GetBalanceSheetResult,
    ),
    AssistantFunction.GET_INCOME_STATEMENT: (
        "Get income and expenses by category for a date range.",
        GetIncomeStatementParams,
        GetIncomeStatementResult,
    ),
}

DEFAULT_FUNCTIONS: tuple[AssistantFunction, ...] = (
    AssistantFunction.GET_TRANSACTIONS,
    AssistantFunction.GET_ACCOUNTS,
    AssistantFunction.GET_BALANCE_SHEET,
    AssistantFunction.GET_INCOME_STATEMENT,
)

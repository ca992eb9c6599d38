from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from ..finance import Currency, Family, User
from ..llm import ChatResponse
from ..snapshot import Snapshot
from .functions import AssistantFunction


class ChatContext(BaseModel):
    """The user and family a chat belongs to."""

    model_config = ConfigDict(frozen=True)

    user: User
    family: Family


class InstructionContext(BaseModel):
    """Values rendered into the assistant instructions template."""

    model_config = ConfigDict(frozen=True)

    preferred_currency: Currency
    preferred_date_format: str
    user_name: str
    family_country: str
    default_period: str
    financial_snapshot: str
    current_date: date

    def template_vars(self) -> dict[str, str]:
        currency = self.preferred_currency
        return {
            "user_name": self.user_name,
            "family_country": self.family_country,
            "default_period": self.default_period,
            "financial_snapshot": self.financial_snapshot,
            "preferred_date_format": self.preferred_date_format,
            "currency_symbol": currency.symbol,
            "currency_iso_code": currency.iso_code,
            "currency_precision": str(currency.default_precision),
            "currency_format": currency.default_format,
            "currency_separator": currency.separator,
            "currency_delimiter": currency.delimiter,
            "current_date": self.current_date.isoformat(),
        }


class AssistantConfig(BaseModel):
    """Instructions and functions for one chat turn."""

    model_config = ConfigDict(frozen=True)

    instructions: str
    functions: list[AssistantFunction] = Field(default_factory=list)
    snapshot: Snapshot = Field(default_factory=Snapshot.unavailable)


class AssistantReply(BaseModel):
    """Result of one assistant turn."""

    model_config = ConfigDict(frozen=True)

    response: ChatResponse
    snapshot_available: bool = Field(
        description="False when the turn ran without financial context"
    )

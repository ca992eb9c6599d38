import logging
from datetime import date

from ..finance import Currency
from ..prompts import render_prompt
from ..snapshot import SnapshotBuilder
from .functions import DEFAULT_FUNCTIONS
from .models import AssistantConfig, ChatContext, InstructionContext

logger = logging.getLogger(__name__)

INSTRUCTIONS_PROMPT = "instructions"


class AssistantConfigBuilder:
    """Builds the instructions and function catalog for a chat.

    The financial snapshot is built fresh for every call (reads inside it
    may be served from cache).
    """

    def __init__(self, snapshot_builder: SnapshotBuilder, prompt_name: str = INSTRUCTIONS_PROMPT):
        self._snapshot_builder = snapshot_builder
        self._prompt_name = prompt_name

    async def build(self, chat: ChatContext, today: date | None = None) -> AssistantConfig:
        """Build the configuration for a chat turn.

        Args:
            chat: User and family of the chat
            today: Reference date (default: today)

        Returns:
            Instructions, functions and the snapshot they embed
        """
        today = today or date.today()
        user, family = chat.user, chat.family

        snapshot = await self._snapshot_builder.build(
            family,
            default_period_key=user.default_period,
            today=today,
        )
        if not snapshot.available:
            logger.info("Building instructions for user %s without a snapshot", user.id)

        context = InstructionContext(
            preferred_currency=Currency.find(family.currency),
            preferred_date_format=family.date_format,
            user_name=user.display_name,
            family_country=family.country,
            default_period=user.default_period,
            financial_snapshot=snapshot.text,
            current_date=today,
        )

        return AssistantConfig(
            instructions=render_instructions(context, self._prompt_name),
            functions=list(DEFAULT_FUNCTIONS),
            snapshot=snapshot,
        )


def render_instructions(context: InstructionContext, prompt_name: str = INSTRUCTIONS_PROMPT) -> str:
    """Render the assistant instructions for a context."""
    return render_prompt(prompt_name, context)

import logging
from collections.abc import Callable
from datetime import date

from .. import settings
from ..llm import LLMProvider, Streamer
from .builder import AssistantConfigBuilder
from .models import AssistantReply, ChatContext

logger = logging.getLogger(__name__)


class Assistant:
    """Runs one chat turn: configuration, model selection, provider call.

    A missing financial snapshot never fails the turn; it is reported through
    ``AssistantReply.snapshot_available``. Provider failures propagate as
    ``ProviderError`` so callers can report them separately.
    """

    def __init__(
        self,
        llm: LLMProvider,
        config_builder: AssistantConfigBuilder,
        default_model: Callable[[], str] = settings.default_model,
    ):
        """Initialize the assistant.

        Args:
            llm: Provider used for chat responses
            config_builder: Builder of instructions and functions
            default_model: Called on every turn to pick the model
        """
        self._llm = llm
        self._config_builder = config_builder
        self._default_model = default_model

    async def respond(
        self,
        chat: ChatContext,
        prompt: str,
        model: str | None = None,
        previous_response_id: str | None = None,
        streamer: Streamer | None = None,
        today: date | None = None,
    ) -> AssistantReply:
        """Answer a user prompt.

        Args:
            chat: User and family of the chat
            prompt: User message
            model: Model override (default: resolved per call)
            previous_response_id: Id of the previous assistant response
            streamer: Optional chunk callback
            today: Reference date (default: today)

        Returns:
            The provider response and whether a snapshot was available

        Raises:
            UnsupportedModelError: If the model is not supported
            ProviderError: If the provider call fails
        """
        model_to_use = model or self._default_model()
        config = await self._config_builder.build(chat, today=today)

        logger.debug("Chat turn for user %s with model %s", chat.user.id, model_to_use)
        response = await self._llm.chat_response(
            prompt,
            model=model_to_use,
            instructions=config.instructions,
            functions=config.functions,
            previous_response_id=previous_response_id,
            streamer=streamer,
        )

        return AssistantReply(response=response, snapshot_available=config.snapshot.available)

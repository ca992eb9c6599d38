import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable

from .catalog import ModelCatalog
from .models import ChatResponse, ChatStreamChunk

Streamer = Callable[[ChatStreamChunk], Awaitable[None] | None]


@runtime_checkable
class FunctionDescriptor(Protocol):
    """A capability the model may ask the caller to execute."""

    @property
    def function_name(self) -> str: ...


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which LLM provider to use.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Error normalization into ``ProviderError``

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_response("Hi", model="gemini-2.5-pro")
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def catalog(self) -> ModelCatalog:
        """Models this provider is certified to use."""

    def supports_model(self, model: str) -> bool:
        """Check whether ``model`` is in this provider's catalog."""
        return self.catalog.supports_model(model)

    @abstractmethod
    async def chat_response(
        self,
        prompt: str,
        model: str | None = None,
        instructions: str | None = None,
        functions: Sequence[FunctionDescriptor] = (),
        function_results: Sequence[Any] = (),
        previous_response_id: str | None = None,
        streamer: Streamer | None = None,
    ) -> ChatResponse:
        """Generate a chat response.

        Args:
            prompt: User prompt
            model: Model identifier; must be in ``catalog``. None selects
                the provider's default model
            instructions: System instructions
            functions: Functions the model may call
            function_results: Results of previously requested function calls
            previous_response_id: Id of the response this one follows up
            streamer: Optional callback receiving stream chunks in order

        Returns:
            Normalized chat response

        Raises:
            UnsupportedModelError: If the model is not supported
            ProviderError: On transport or protocol failure
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise


async def emit(streamer: Streamer, chunk: ChatStreamChunk) -> None:
    """Deliver a chunk to a sync or async streamer."""
    result = streamer(chunk)
    if inspect.isawaitable(result):
        await result

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from uuid_extensions import uuid7


def new_id() -> str:
    """Generate a unique, time-ordered identifier."""
    return str(uuid7())


class ChatMessage(BaseModel):
    """A message produced by the model."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    text: str = Field(description="Message text")


class FunctionCall(BaseModel):
    """A function the model asked the caller to execute."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    call_id: str = Field(description="Provider identifier used to return the result")
    function_name: str
    function_args: dict[str, Any] = Field(default_factory=dict)


class ChatRequest(BaseModel):
    """Provider-independent chat request."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    instructions: str | None = None
    functions: list[str] = Field(default_factory=list, description="Names of callable functions")
    previous_response_id: str | None = None


class ChatResponse(BaseModel):
    """Normalized response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id, description="Locally generated response id")
    model: str = Field(description="Model that generated the response")
    messages: list[ChatMessage] = Field(default_factory=list)
    function_calls: list[FunctionCall] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """All message texts joined."""
        return "".join(message.text for message in self.messages)


class TextChunk(BaseModel):
    """Streamed reply text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class ResponseChunk(BaseModel):
    """Final streamed chunk carrying the complete response."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["response"] = "response"
    response: ChatResponse


ChatStreamChunk = Annotated[Union[TextChunk, ResponseChunk], Field(discriminator="kind")]

from .base import FunctionDescriptor, LLMProvider, Streamer
from .catalog import GEMINI_MODELS, ModelCatalog
from .errors import MissingAPIKeyError, ProviderError, UnsupportedModelError
from .factory import create_llm_provider
from .models import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ChatStreamChunk,
    FunctionCall,
    ResponseChunk,
    TextChunk,
    new_id,
)
from .providers import GeminiProvider

__all__ = [
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "ChatStreamChunk",
    "FunctionCall",
    "FunctionDescriptor",
    "GEMINI_MODELS",
    "GeminiProvider",
    "LLMProvider",
    "MissingAPIKeyError",
    "ModelCatalog",
    "ProviderError",
    "ResponseChunk",
    "Streamer",
    "TextChunk",
    "UnsupportedModelError",
    "create_llm_provider",
    "new_id",
]

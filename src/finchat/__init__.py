"""
finchat: Personal finance chat assistant with a bounded-latency financial snapshot.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .assistant import (
    Assistant,
    AssistantConfig,
    AssistantConfigBuilder,
    AssistantFunction,
    ChatContext,
)
from .llm import (
    ChatResponse,
    GeminiProvider,
    LLMProvider,
    ProviderError,
    create_llm_provider,
)
from .snapshot import Snapshot, SnapshotBuilder

__all__ = [
    "Assistant",
    "AssistantConfig",
    "AssistantConfigBuilder",
    "AssistantFunction",
    "ChatContext",
    "ChatResponse",
    "GeminiProvider",
    "LLMProvider",
    "ProviderError",
    "Snapshot",
    "SnapshotBuilder",
    "create_llm_provider",
]

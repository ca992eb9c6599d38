"""Assistant configuration module for finchat.

Turns a chat's user and family into model instructions, a function
catalog and, through ``Assistant``, a provider response.
"""

from .builder import AssistantConfigBuilder, render_instructions
from .functions import DEFAULT_FUNCTIONS, AssistantFunction
from .models import AssistantConfig, AssistantReply, ChatContext, InstructionContext
from .responder import Assistant

__all__ = [
    "Assistant",
    "AssistantConfig",
    "AssistantConfigBuilder",
    "AssistantFunction",
    "AssistantReply",
    "ChatContext",
    "DEFAULT_FUNCTIONS",
    "InstructionContext",
    "render_instructions",
]

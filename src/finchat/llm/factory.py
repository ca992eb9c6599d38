from typing import Any

from .base import LLMProvider
from .providers import GeminiProvider


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type (only 'gemini' is available)
        **config: Provider-specific configuration
            For Gemini:
                - api_key: str (default: GEMINI_API_KEY from the environment)
                - model: str (default: 'gemini-2.5-pro')
                - base_url: str
                - timeout: float

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        MissingAPIKeyError: If the provider has no API key

    Examples:
        >>> provider = create_llm_provider(
        ...     "gemini",
        ...     api_key="...",
        ...     model="gemini-2.5-flash"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower in ("gemini", "google"):
        return GeminiProvider(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'gemini'"
    )

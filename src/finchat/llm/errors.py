from typing import Any


class ProviderError(Exception):
    """Failure talking to an LLM provider.

    Attributes:
        message: Human readable summary
        details: Raw provider payload for diagnostics (e.g. the response body)
    """

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details is None:
            return self.message
        return f"{self.message}: {self.details}"


class MissingAPIKeyError(ProviderError):
    """Raised at construction when a provider has no API key."""


class UnsupportedModelError(ProviderError):
    """Raised before any request when a model is not in the catalog."""

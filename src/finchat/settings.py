"""Environment-backed settings.

Values are read from the process environment on every call so that changes
made after import (e.g. by ``load_dotenv()`` or a test's ``monkeypatch``)
take effect immediately.

Environment variables:
    GEMINI_API_KEY: Gemini API key
    GEMINI_DEFAULT_MODEL: Chat model used when none is given (default: gemini-2.5-pro)
    FINCHAT_LOG_LEVEL: Log level for the CLI (default: WARNING)
"""

import os

DEFAULT_MODEL = "gemini-2.5-pro"
DEFAULT_LOG_LEVEL = "WARNING"


def gemini_api_key() -> str | None:
    """Get the Gemini API key, or None if unset."""
    return os.getenv("GEMINI_API_KEY")


def default_model() -> str:
    """Get the chat model to use for a new request."""
    return os.getenv("GEMINI_DEFAULT_MODEL", DEFAULT_MODEL)


def log_level() -> str:
    """Get the configured log level name."""
    return os.getenv("FINCHAT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

"""Provider factory functions for CLI.

Centralizes creation of the finance service, snapshot builder, and LLM
instances from command arguments and environment variables.
"""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .. import settings
from ..assistant import AssistantConfigBuilder, ChatContext
from ..cache import create_cache_store
from ..finance import Ledger, StaticFinanceService, User, load_ledger
from ..llm import LLMProvider, MissingAPIKeyError, create_llm_provider
from ..snapshot import SnapshotBuilder

# Default console for output
_console = Console()


def configure_logging(level: str | None = None, console: Console | None = None) -> None:
    """Send library logs to the console through Rich.

    Args:
        level: Log level name (default: FINCHAT_LOG_LEVEL)
        console: Optional Rich console for output
    """
    logging.basicConfig(
        level=(level or settings.log_level()).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )
    # Request URLs carry the Gemini API key
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_ledger(path: Path, console: Console | None = None) -> Ledger:
    """Load a ledger file, exiting on invalid content.

    Raises:
        SystemExit: If the ledger cannot be read or validated
    """
    con = console or _console
    try:
        return load_ledger(path)
    except (OSError, ValidationError) as e:
        con.print(f"[red]Error: cannot load ledger {path}: {e}[/red]")
        raise typer.Exit(code=1)


def get_chat_context(ledger: Ledger) -> ChatContext:
    """Chat context for the ledger's user, or a placeholder user."""
    user = ledger.user or User(id="cli", display_name="there")
    return ChatContext(user=user, family=ledger.family)


def get_config_builder(ledger: Ledger) -> AssistantConfigBuilder:
    """Create an assistant config builder reading from ``ledger``."""
    snapshot_builder = SnapshotBuilder(
        StaticFinanceService(ledger),
        cache=create_cache_store("memory"),
    )
    return AssistantConfigBuilder(snapshot_builder)


def require_llm(console: Console | None = None) -> LLMProvider:
    """Create the Gemini provider, exiting if it is not configured.

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)

    Raises:
        SystemExit: If GEMINI_API_KEY is not set
    """
    con = console or _console
    try:
        return create_llm_provider("gemini")
    except MissingAPIKeyError:
        con.print("[red]Error: GEMINI_API_KEY not set in environment[/red]")
        raise typer.Exit(code=1)

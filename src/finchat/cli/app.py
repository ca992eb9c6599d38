"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from .. import settings
from ..assistant import Assistant
from ..llm import GEMINI_MODELS, ChatStreamChunk, ProviderError, TextChunk
from .providers import (
    configure_logging,
    get_chat_context,
    get_config_builder,
    get_ledger,
    require_llm,
)

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="finchat",
    help="Personal finance assistant backed by Gemini",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LEDGER_ARGUMENT = typer.Argument(
    ...,
    exists=True,
    file_okay=True,
    dir_okay=False,
    help="YAML ledger with the family's financial data"
)


@app.callback()
def main(
    log_level: str = typer.Option(
        None,
        "--log-level",
        "-L",
        help="Log level (default: FINCHAT_LOG_LEVEL or WARNING)"
    )
):
    """Configure logging for all commands."""
    configure_logging(log_level)


@app.command()
def models():
    """List the supported Gemini models."""
    default = settings.default_model()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Model", style="cyan")
    table.add_column("Default", width=8)

    for model in GEMINI_MODELS:
        table.add_row(model, "*" if model == default else "")

    console.print(table)
    if default not in GEMINI_MODELS:
        console.print(f"[yellow]Warning: GEMINI_DEFAULT_MODEL={default} is not supported[/yellow]")


@app.command()
def snapshot(ledger_path: Path = LEDGER_ARGUMENT):
    """Print the financial snapshot for a ledger."""
    async def _snapshot():
        ledger = get_ledger(ledger_path, console)
        chat = get_chat_context(ledger)
        config = await get_config_builder(ledger).build(chat)

        if not config.snapshot.available:
            console.print("[yellow]Snapshot unavailable[/yellow]")
            raise typer.Exit(code=1)

        for line in config.snapshot.lines:
            console.print(f"- {line}", markup=False)

    asyncio.run(_snapshot())


@app.command()
def instructions(ledger_path: Path = LEDGER_ARGUMENT):
    """Print the assistant instructions rendered for a ledger."""
    async def _instructions():
        ledger = get_ledger(ledger_path, console)
        config = await get_config_builder(ledger).build(get_chat_context(ledger))

        console.print(config.instructions, markup=False, highlight=False)
        console.print(f"[dim]Functions: {', '.join(f.function_name for f in config.functions)}[/dim]")

    asyncio.run(_instructions())


@app.command()
def chat(
    ledger_path: Path = LEDGER_ARGUMENT,
    prompt: str = typer.Argument(..., help="Question for the assistant"),
    model: str = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use (default: GEMINI_DEFAULT_MODEL)"
    ),
    stream: bool = typer.Option(
        False,
        "--stream",
        "-s",
        help="Print reply text as soon as it arrives"
    )
):
    """Ask the assistant one question about a ledger."""
    async def _chat():
        ledger = get_ledger(ledger_path, console)
        llm = require_llm(console)

        def _print_chunk(chunk: ChatStreamChunk) -> None:
            if isinstance(chunk, TextChunk):
                console.print(Markdown(chunk.text))

        try:
            assistant = Assistant(llm, get_config_builder(ledger))
            reply = await assistant.respond(
                get_chat_context(ledger),
                prompt,
                model=model,
                streamer=_print_chunk if stream else None,
            )

            if not reply.snapshot_available:
                console.print("[yellow]Answered without financial snapshot[/yellow]")
            if not stream:
                console.print(Panel(
                    Markdown(reply.response.text or "_(empty reply)_"),
                    title=reply.response.model,
                    border_style="cyan"
                ))

        except ProviderError as e:
            console.print(f"[red]Assistant unavailable: {e.message}[/red]")
            if e.details:
                console.print(str(e.details), style="dim", markup=False)
            raise typer.Exit(code=1)
        finally:
            await llm.close()

    asyncio.run(_chat())


if __name__ == "__main__":
    app()

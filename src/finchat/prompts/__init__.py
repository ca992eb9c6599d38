"""Prompt management module.

Externalizes prompts to text files for easy customization.
Prompts can be overridden by placing files in the working directory.

Templates use ``$name`` placeholders and are rendered from a typed context
record; a placeholder without a matching context field fails the render.
"""

from functools import lru_cache
from pathlib import Path
from string import Template
from typing import Protocol

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent


class TemplateContext(Protocol):
    """A typed record that can fill a prompt template."""

    def template_vars(self) -> dict[str, str]: ...


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: finchat/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    # Check working directory first (allows user overrides)
    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8")

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8")

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def render_prompt(name: str, context: TemplateContext) -> str:
    """Render a prompt template with a context record.

    Args:
        name: Prompt name (without .txt extension)
        context: Record providing the template variables

    Returns:
        Rendered prompt text

    Raises:
        FileNotFoundError: If the prompt file is not found
        KeyError: If the template uses a variable the context does not provide
    """
    return Template(load_prompt(name)).substitute(context.template_vars())


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "TemplateContext",
    "clear_cache",
    "load_prompt",
    "render_prompt",
]

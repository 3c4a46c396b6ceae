"""Glyphs and Rich markup helpers shared by choices and separators."""

from __future__ import annotations

import sys

from rich.markup import escape
from rich.text import Text

IS_WINDOWS = sys.platform == "win32"

# Active-row indicator
POINTER = ">" if IS_WINDOWS else "❯"
POINTER_STYLE = "cyan"

# State glyphs (Rich markup), keyed by ChoiceState value
if IS_WINDOWS:
    RADIO_SYMBOLS: dict[str, str] = {
        "on": "[green](*)[/green]",
        "off": "( )",
        "disabled": "[bright_black](|)[/bright_black]",
    }
else:
    RADIO_SYMBOLS = {
        "on": "[green]◉[/green]",
        "off": "◯",
        "disabled": "[bright_black]Ⓘ[/bright_black]",
    }

SEPARATOR_RULE = "─" * 8
DEFAULT_SEPARATOR_LINE = f" [dim]{SEPARATOR_RULE}[/dim]"
DISABLED_LABEL = "Disabled"
MORE_CHOICES_HINT = "[dim](Move up and down to reveal more choices)[/dim]"


def format_pointer(pointer: str | None = None) -> str:
    """Return the pointer markup. Custom pointers are used verbatim."""
    if pointer is None:
        return f"[{POINTER_STYLE}]{POINTER}[/{POINTER_STYLE}]"
    return pointer


def visible_width(markup: str) -> int:
    """Cell width of a markup string once tags are stripped."""
    return Text.from_markup(markup).cell_len


def padding(markup: str) -> str:
    """Blank string as wide as the rendered markup."""
    return " " * visible_width(markup)


def dim(text: str) -> str:
    return f"[dim]{text}[/dim]"


def bold(text: str) -> str:
    return f"[bold]{text}[/bold]"


def escape_label(label: object) -> str:
    """Escape a label so user text is never parsed as markup."""
    return escape(str(label))

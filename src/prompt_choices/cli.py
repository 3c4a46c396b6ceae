"""CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from prompt_choices.choices import ChoiceCollection

app = typer.Typer(
    name="prompt-choices",
    help="Preview and run checkbox/radio choice lists.",
    no_args_is_help=True,
)
console = Console()

SEPARATOR_ARG = "---"


def _build_collection(
    choices: list[str],
    radio: bool = False,
    limit: int | None = None,
    pointer: str | None = None,
    symbols: bool = True,
) -> ChoiceCollection:
    """Lazy import and build a collection from CLI arguments."""
    from prompt_choices.choices import ChoiceCollection
    from prompt_choices.separator import Separator

    options: dict = {"radio": radio}
    if limit is not None:
        options["limit"] = limit
    if pointer is not None:
        options["pointer"] = pointer
    if not symbols:
        options["checkbox"] = False

    values = [Separator() if c == SEPARATOR_ARG else c for c in choices]
    return ChoiceCollection(values, options)


@app.command()
def render(
    choices: Annotated[list[str], typer.Argument(help="Choice labels ('---' for a separator)")],
    cursor: Annotated[int, typer.Option("--cursor", "-c", help="Cursor position")] = 0,
    check: Annotated[
        list[str] | None, typer.Option("--check", help="Key of a choice to check")
    ] = None,
    radio: Annotated[bool, typer.Option("--radio", help="Add all/none choices")] = False,
    limit: Annotated[int | None, typer.Option("--limit", "-l", help="Max visible rows")] = None,
    pointer: Annotated[str | None, typer.Option("--pointer", help="Cursor indicator")] = None,
    no_symbols: Annotated[bool, typer.Option("--no-symbols", help="Hide state glyphs")] = False,
):
    """Print a choice list without prompting."""
    collection = _build_collection(choices, radio, limit, pointer, not no_symbols)

    for key in check or []:
        if collection.get_index(key) == -1:
            console.print(f"[red]Error:[/red] Unknown choice '{key}'")
            raise typer.Exit(1)
        collection.check(key)

    if not collection.is_valid_index(cursor):
        console.print(f"[red]Error:[/red] Cursor {cursor} out of range")
        raise typer.Exit(1)

    console.print(collection.render(cursor), highlight=False)


@app.command()
def pick(
    choices: Annotated[list[str], typer.Argument(help="Choice labels ('---' for a separator)")],
    message: Annotated[str, typer.Option("--message", "-m", help="Prompt title")] = "",
    radio: Annotated[bool, typer.Option("--radio", help="Add all/none choices")] = False,
    limit: Annotated[int | None, typer.Option("--limit", "-l", help="Max visible rows")] = None,
):
    """Select choices interactively and print the checked values."""
    from prompt_choices.ui.prompt import CheckboxPrompt

    collection = _build_collection(choices, radio, limit)
    selected = CheckboxPrompt(collection, message=message, limit=limit, console=console).show()

    if selected is None:
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(1)

    for value in selected:
        console.print(value, markup=False, highlight=False)


def main() -> None:
    app()

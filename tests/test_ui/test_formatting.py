"""Tests for glyph and markup helpers."""

from prompt_choices.ui.formatting import (
    POINTER,
    bold,
    dim,
    escape_label,
    format_pointer,
    padding,
    visible_width,
)


def test_default_pointer_is_coloured():
    assert format_pointer() == f"[cyan]{POINTER}[/cyan]"


def test_custom_pointer_is_verbatim():
    assert format_pointer(">>") == ">>"


def test_visible_width_ignores_markup():
    assert visible_width("[cyan]ab[/cyan]") == 2
    assert visible_width("abc") == 3


def test_padding_matches_width():
    assert padding("[cyan]>>[/cyan]") == "  "
    assert padding("") == ""


def test_dim_and_bold():
    assert dim("x") == "[dim]x[/dim]"
    assert bold("x") == "[bold]x[/bold]"


def test_escape_label():
    assert escape_label("[red]x") == "\\[red]x"
    assert escape_label(42) == "42"

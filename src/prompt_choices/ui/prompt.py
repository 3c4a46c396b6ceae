"""Interactive checkbox prompt driven by readchar and Rich Live."""

from __future__ import annotations

from typing import Any

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel

from prompt_choices.actions import Actions
from prompt_choices.choices import ChoiceCollection

# UI Constants
LIVE_REFRESH_RATE = 20
DEFAULT_PANEL_WIDTH = 80
DEFAULT_TERMINAL_HEIGHT = 24
FOOTER = "[dim]  ↑↓/jk nav · space select · a all · i invert · enter done · q quit[/dim]"

SUBMIT = "submit"
QUIT = "quit"


class CheckboxPrompt:
    """Checkbox list over a ChoiceCollection.

    Example:
        choices = ChoiceCollection(["Apple", "Banana", "Cherry"], {"radio": True})
        selected = CheckboxPrompt(choices, message="Fruits").show()
        # selected is choices.checked, or None if the user quit
    """

    def __init__(
        self,
        choices: ChoiceCollection,
        message: str = "",
        limit: int | None = None,
        width: int = DEFAULT_PANEL_WIDTH,
        console: Console | None = None,
    ):
        self.choices = choices
        self.actions = Actions(choices)
        self.message = message
        self.limit = limit
        self.width = width
        self.cursor = choices.position
        self._console = console or Console()

    def handle_key(self, key: str) -> str | None:
        """Apply one keypress. Returns SUBMIT, QUIT or None to keep going."""
        if key in (readchar.key.UP, "k"):
            self.cursor = self.actions.up(self.cursor)
        elif key in (readchar.key.DOWN, "j"):
            self.cursor = self.actions.down(self.cursor)
        elif key == readchar.key.SPACE:
            self.cursor = self.actions.space(self.cursor)
        elif len(key) == 1 and key.isdigit() and 0 < int(key) <= self.choices.real_length:
            self.cursor = self.actions.number(int(key))
            self.choices.position = self.cursor
        elif key == "a":
            self.cursor = self.actions.toggle_all()
        elif key == "i":
            self.cursor = self.actions.invert()
        elif key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
            self.cursor = self.actions.enter(self.cursor)
            return SUBMIT
        elif key == readchar.key.TAB:
            self.cursor = self.actions.tab(self.cursor)
        elif key == "q":
            return QUIT
        return None

    def build_panel(self) -> Panel:
        height = self._console.height or DEFAULT_TERMINAL_HEIGHT
        # Reserve: blank + footer + borders
        limit = self.limit or max(height - 6, 1)
        content = self.choices.render(self.cursor, {"limit": limit})
        return Panel(
            f"{content}\n\n{FOOTER}",
            title=f"[bold]{self.message}[/bold]" if self.message else None,
            border_style="blue",
            width=min(self.width, (self._console.width or DEFAULT_PANEL_WIDTH)),
        )

    def show(self) -> list[Any] | None:
        """Run the prompt. Returns the checked values, or None if cancelled."""
        self._console.clear()
        with Live(
            self.build_panel(), console=self._console, refresh_per_second=LIVE_REFRESH_RATE
        ) as live:
            while True:
                try:
                    key = readchar.readkey()
                except KeyboardInterrupt:
                    return None

                result = self.handle_key(key)
                if result == QUIT:
                    return None
                if result == SUBMIT:
                    return self.choices.checked

                live.update(self.build_panel())

"""Keypress-level operations on a choice collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prompt_choices.choices import ChoiceCollection


class Actions:
    """Cursor movement and selection helpers for a prompt loop.

    Positions are offsets into the collection's indexable universe.
    """

    def __init__(self, choices: ChoiceCollection | None):
        if choices is None:
            raise TypeError("expected choices to be a ChoiceCollection")
        self.choices = choices

    def number(self, pos: int, radio: bool = False) -> int:
        """Toggle the choice at 1-based position ``pos``."""
        if 1 <= pos <= self.choices.real_length:
            if radio:
                self.choices.position = pos - 1
                self.choices.radio()
            else:
                self.choices.toggle(pos - 1)
        return pos - 1

    def down(self, pos: int) -> int:
        n = pos + 1 if pos < self.choices.real_length - 1 else 0
        self.choices.position = n
        return n

    def up(self, pos: int) -> int:
        n = pos - 1 if pos > 0 else max(self.choices.real_length - 1, 0)
        self.choices.position = n
        return n

    def enter(self, pos: int) -> int:
        return pos

    def tab(self, pos: int) -> int:
        return pos

    def space(self, pos: int) -> int:
        self.choices.position = pos
        self.choices.radio()
        return pos

    def toggle_all(self) -> int:
        """Check or uncheck everything ("a" key)."""
        choices = self.choices
        all_choice = choices.synthetic_choice("all")
        if all_choice is not None and choices.real_length > 2:
            if all_choice.checked:
                choices.uncheck()
            else:
                choices.check()
            none_choice = choices.synthetic_choice("none")
            if none_choice is not None:
                none_choice.checked = not all_choice.checked
        else:
            choices.toggle()
        return choices.position

    def invert(self) -> int:
        """Flip every choice ("i" key)."""
        choices = self.choices
        for choice in choices:
            choice.checked = not choice.checked

        if choices.is_augmented:
            all_choice = choices.synthetic_choice("all")
            none_choice = choices.synthetic_choice("none")
            real_count = sum(1 for choice in choices if not choices.is_synthetic(choice))
            checked_count = len(choices.checked)
            all_choice.checked = checked_count == real_count
            none_choice.checked = checked_count == 0
        return choices.position

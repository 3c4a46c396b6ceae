"""Ordered collection of choices backing one rendered choice list."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from prompt_choices.choice import Choice, ChoiceInput, to_choice
from prompt_choices.config import Options
from prompt_choices.errors import InvalidIndexError, ReadOnlyPropertyError
from prompt_choices.separator import Separator
from prompt_choices.ui.paginator import Paginator
from prompt_choices.utils import arrayify, clone, flatten, is_number, is_object

logger = logging.getLogger("prompt_choices.choices")

ALL = "all"
NONE = "none"

Target = int | str | list | tuple | None


class ChoiceCollection:
    """Choices and separators in display order, plus lookup indices.

    ``choices`` holds every entry including separators. ``items`` holds the
    indexable universe: entries that are neither separators nor disabled
    when added. ``keymap`` and ``keys`` are kept parallel to ``items``.

    Example:
        choices = ChoiceCollection(["foo", "bar", "baz"])
        choices.toggle(1)
        choices.checked  # ["bar"]
    """

    def __init__(
        self,
        choices: list[ChoiceInput] | ChoiceInput | None = None,
        options: Mapping[str, Any] | Options | None = None,
    ):
        logger.debug("initializing collection with %d raw choices", len(arrayify(choices)))
        self.options = Options.load(options)
        self.paginator = Paginator(self.options.limit)
        self.choices: list[Choice | Separator] = []
        self.items: list[Choice] = []
        self.keymap: dict[str, Choice] = {}
        self.keys: list[str] = []
        self.original: tuple = ()
        self.position = 0
        self._synthetic: dict[str, Choice] = {}

        if choices:
            self.original = tuple(clone(value) for value in arrayify(choices))
            self.add_choices(choices)

    # --- construction ---------------------------------------------------

    def choice(self, value: ChoiceInput) -> Choice | Separator:
        """Normalize value with this collection's options."""
        return to_choice(value, self.options)

    def separator(self, line: str | None = None) -> Separator:
        return Separator(line)

    def to_choice(self, value: ChoiceInput) -> Choice | Separator:
        """Normalize value and assign its index in the indexable universe."""
        choice = self.choice(value)
        if isinstance(choice, Separator):
            return choice
        choice.index = -1 if choice.disabled else len(self.items)
        return choice

    def add_choice(self, value: ChoiceInput) -> ChoiceCollection:
        choice = self.to_choice(value)
        if isinstance(choice, Choice) and not choice.disabled:
            if choice.key in self.keymap:
                logger.debug("duplicate key %r overwrites an earlier choice", choice.key)
            self.keymap[choice.key] = choice
            self.keys.append(choice.key)
            self.items.append(choice)
        self.choices.append(choice)
        return self

    def add_choices(self, choices: list[ChoiceInput] | ChoiceInput) -> ChoiceCollection:
        """Add one or more choices, injecting "all"/"none" entries in radio mode."""
        values = arrayify(choices)

        if self.options.radio is True and len(values) >= 2 and not self._synthetic:
            logger.debug("adding synthetic %r/%r choices", ALL, NONE)
            self._synthetic = {
                ALL: Choice(name=ALL, synthetic=True, options=self.options),
                NONE: Choice(name=NONE, synthetic=True, options=self.options),
            }
            values = [
                self.separator(""),
                self._synthetic[ALL],
                self._synthetic[NONE],
                self.separator(),
                *values,
            ]

        for value in values:
            self.add_choice(value)
        return self

    def push(self, *values: Any) -> int:
        """Append choices (nested lists are flattened). Returns the new length."""
        self.add_choices(flatten(values))
        return self.length

    # --- lookup ---------------------------------------------------------

    def is_valid_index(self, index: Any) -> bool:
        """True for a whole-number offset into the indexable universe."""
        if not is_number(index) or (isinstance(index, float) and not index.is_integer()):
            return False
        return 0 <= index < len(self.items)

    def get_index(self, key: Any) -> int:
        """Index of the choice for a key or index, or -1 if there is none."""
        if isinstance(key, str):
            choice = self.keymap.get(key)
            for i, item in enumerate(self.items):
                if item is choice:
                    return i
            return -1
        return int(key) if self.is_valid_index(key) else -1

    def get(self, key: int | str) -> Choice | None:
        """Get the choice at an index or with a key, or None if out of range.

        Raises:
            InvalidIndexError: key is neither a number nor a string.
        """
        if isinstance(key, str):
            key = self.get_index(key)
        if not is_number(key):
            raise InvalidIndexError("expected index to be a number or string")
        return self.get_choice(key)

    def get_choice(self, key: Any) -> Choice | None:
        """Like get(), but returns None instead of raising."""
        if isinstance(key, str):
            key = self.get_index(key)
        if not self.is_valid_index(key):
            return None
        return self.items[int(key)]

    def has_choice(self, key: int | str) -> bool:
        return self.get(key) is not None

    def is_checked(self, key: int | str) -> bool | None:
        choice = self.get(key)
        if choice is None:
            return None
        return choice.checked is True

    def key(self, index: int) -> str | None:
        choice = self.get_choice(index)
        return choice.key if choice else None

    # --- state ----------------------------------------------------------

    def check(self, target: Target = None) -> ChoiceCollection:
        """Check the choice(s) at the given keys/indices, or all of them."""
        return self._set_checked(target, True)

    def uncheck(self, target: Target = None) -> ChoiceCollection:
        """Uncheck the choice(s) at the given keys/indices, or all of them."""
        return self._set_checked(target, False)

    def _set_checked(self, target: Target, checked: bool) -> ChoiceCollection:
        if target is None:
            target = list(range(len(self.items)))
        if isinstance(target, (list, tuple)):
            for value in target:
                self._set_checked(value, checked)
            return self
        choice = self.get(target)
        if choice is not None:
            choice.checked = checked
        return self

    def toggle(self, target: Target = None, radio: bool = False) -> ChoiceCollection:
        """Flip the checked state of the target choice(s).

        With ``radio=True`` the target is checked and every other choice is
        unchecked.
        """
        if target is None:
            target = list(range(len(self.items)))
        if isinstance(target, (list, tuple)):
            for value in target:
                self.toggle(value, radio)
            return self
        if isinstance(target, str):
            target = self.get_index(target)

        if radio:
            if self.is_valid_index(target):
                for i, item in enumerate(self.items):
                    item.checked = i == target
        else:
            choice = self.get(target)
            if choice is not None:
                choice.toggle()
        return self

    def radio(self) -> ChoiceCollection:
        """Select all, none, or the single choice under the cursor."""
        if self.real_length > 1:
            choice = self.get(self.position)
            if choice is None:
                return self
            if choice is self._synthetic.get(ALL):
                if choice.checked:
                    self.uncheck()
                else:
                    self.check()
                self._synthetic[NONE].toggle()
            elif choice is self._synthetic.get(NONE):
                self.uncheck()
                self.check(self.position)
            else:
                for entry in self._synthetic.values():
                    entry.checked = False
                self.toggle(self.position)
        else:
            self.toggle(self.position)
        return self

    @property
    def is_augmented(self) -> bool:
        """True if synthetic "all"/"none" choices were added."""
        return bool(self._synthetic)

    def synthetic_choice(self, name: str) -> Choice | None:
        """The synthetic "all" or "none" choice, if the collection has one."""
        return self._synthetic.get(name)

    def is_synthetic(self, choice: Choice) -> bool:
        return any(choice is entry for entry in self._synthetic.values())

    # --- queries --------------------------------------------------------

    def __iter__(self) -> Iterator[Choice]:
        return iter(self.items)

    def filter(self, fn: Callable[[Choice], Any]) -> list[Choice]:
        return [choice for choice in self.items if fn(choice)]

    def where(self, query: Any) -> list[Choice]:
        """Return choices matching a predicate, name/key, pattern or field mapping.

        A list of queries returns the concatenated matches of each element.
        Unsupported query types match nothing.
        """
        if callable(query):
            return self.filter(query)

        if isinstance(query, str):
            return self.filter(lambda choice: choice.name == query or choice.key == query)

        if isinstance(query, re.Pattern):
            return self.filter(
                lambda choice: bool(
                    query.search(str(choice.name)) or query.search(str(choice.key))
                )
            )

        if is_object(query):
            return self.filter(lambda choice: _matches(choice, query))

        if isinstance(query, (list, tuple)):
            matches: list[Choice] = []
            for value in query:
                matches.extend(self.where(value))
            return matches

        return []

    def pluck(self, field: str) -> list[Any]:
        return [choice.get_field(field) for choice in self.items]

    # --- derived, read-only ---------------------------------------------

    @property
    def length(self) -> int:
        """Number of entries, separators included."""
        return len(self.choices)

    @length.setter
    def length(self, value: Any) -> None:
        raise ReadOnlyPropertyError("length")

    @property
    def real_length(self) -> int:
        """Number of entries in the indexable universe."""
        return len(self.items)

    @real_length.setter
    def real_length(self, value: Any) -> None:
        raise ReadOnlyPropertyError("real_length")

    @property
    def real_choices(self) -> list[Choice]:
        """Non-separator entries that are currently enabled."""
        return [
            choice
            for choice in self.choices
            if isinstance(choice, Choice) and not choice.disabled
        ]

    @real_choices.setter
    def real_choices(self, value: Any) -> None:
        raise ReadOnlyPropertyError("real_choices")

    @property
    def checked(self) -> list[Any]:
        """Values (or choices, with the ``objects`` option) of checked entries."""
        objects = self.options.objects
        return [
            choice if objects else choice.value
            for choice in self.items
            if choice.checked is True and not self.is_synthetic(choice)
        ]

    @checked.setter
    def checked(self, value: Any) -> None:
        raise ReadOnlyPropertyError("checked")

    @property
    def answers(self) -> dict:
        return self.options.answers

    @answers.setter
    def answers(self, value: dict) -> None:
        self.options.set("answers", value)

    # --- rendering ------------------------------------------------------

    def render(
        self,
        position: int | None = None,
        options: Mapping[str, Any] | Options | None = None,
    ) -> str:
        """Render every entry and paginate the result.

        Returns Rich markup starting with a line break, one row per entry.
        """
        opts = self.options.merged(options)
        self.position = position or 0

        rows: list[str] = []
        cursor_row = 0
        for entry in self.choices:
            if isinstance(entry, Choice) and entry.index == self.position:
                cursor_row = sum(row.count("\n") for row in rows)
            rows.append(entry.render(self.position, opts))

        text = "\n" + "".join(rows).rstrip()
        return self.paginator.paginate(text, cursor_row, opts.limit)


def _matches(choice: Choice, query: Mapping[str, Any]) -> bool:
    """True if every key in query is a field of choice with an equal value."""
    for key, expected in query.items():
        if not choice.has_field(key) and key != "disabled":
            return False
        if choice.get_field(key) != expected:
            return False
    return True


def wrap_or_create(
    choices: ChoiceCollection | list[ChoiceInput] | ChoiceInput | None = None,
    options: Mapping[str, Any] | Options | None = None,
) -> ChoiceCollection:
    """Return choices unchanged if it is already a collection, else build one."""
    if isinstance(choices, ChoiceCollection):
        return choices
    return ChoiceCollection(choices, options)

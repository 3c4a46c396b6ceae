"""Normalized choice records."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from enum import Enum
from typing import Any, Union

from prompt_choices.config import Options
from prompt_choices.errors import InvalidChoiceError, ReadOnlyPropertyError
from prompt_choices.separator import Separator
from prompt_choices.ui.formatting import (
    DISABLED_LABEL,
    RADIO_SYMBOLS,
    bold,
    dim,
    escape_label,
    format_pointer,
    padding,
)
from prompt_choices.utils import is_object

_MISSING = object()

Disabled = Union[bool, str, Callable[[dict], Union[bool, str]]]


class ChoiceState(Enum):
    """Display state of a choice."""

    ON = "on"
    OFF = "off"
    DISABLED = "disabled"


class Choice:
    """One selectable option.

    Identity fields are derived in this order: ``name`` falls back to
    ``value``, ``value`` falls back to ``name``, ``short`` to ``name`` and
    ``key`` to ``short``, stringified when unhashable. Unknown record fields
    are kept in ``extra`` and read through attribute access.
    """

    def __init__(
        self,
        name: Any = None,
        value: Any = _MISSING,
        short: Any = None,
        key: Any = None,
        checked: bool = False,
        disabled: Disabled = False,
        synthetic: bool = False,
        options: Mapping[str, Any] | Options | None = None,
        **extra: Any,
    ):
        if name is None and value is _MISSING:
            raise InvalidChoiceError("expected choice to have a name or value")

        self.name = name if name or value is _MISSING else value
        self.value = self.name if value is _MISSING else value
        self.short = short or self.name
        self.key = key or self.short
        if not isinstance(self.key, Hashable):
            self.key = str(self.key)
        self.checked = checked
        self.disabled = disabled
        self.synthetic = synthetic
        self.options = options if isinstance(options, Options) else Options(options)
        self.extra: dict[str, Any] = extra

        # Offset in the indexable universe (-1 when not indexed)
        self.index = 0
        # Cursor offset at the last render
        self.position: int | None = None

    def __getattr__(self, name: str) -> Any:
        """Read extra record fields as attributes."""
        if name.startswith("_") or name == "extra":
            raise AttributeError(name)
        extra = self.__dict__.get("extra", {})
        if name in extra:
            return extra[name]
        raise AttributeError(f"Choice has no attribute '{name}'")

    def __repr__(self) -> str:
        return f"Choice(name={self.name!r}, value={self.value!r}, checked={self.checked!r})"

    def has_field(self, name: str) -> bool:
        """True if name is an identity/state field or an extra record field."""
        return name in self.__dict__ and not name.startswith("_") or name in self.extra

    def get_field(self, name: str, default: Any = None) -> Any:
        if name == "disabled":
            return self.disabled
        if self.has_field(name):
            return getattr(self, name)
        return default

    @property
    def is_separator(self) -> bool:
        return False

    @property
    def type(self) -> str:
        return self.extra.get("type", "choice")

    # --- disabled -------------------------------------------------------

    @property
    def disabled(self) -> bool | str:
        """Disabled flag or reason; callables are evaluated on every access."""
        raw = self._disabled
        if callable(raw):
            return raw(self.options.answers)
        return raw

    @disabled.setter
    def disabled(self, value: Disabled) -> None:
        self._disabled = value

    # --- derived, read-only ---------------------------------------------

    @property
    def state(self) -> ChoiceState:
        if self.disabled:
            return ChoiceState.DISABLED
        return ChoiceState.ON if self.checked else ChoiceState.OFF

    @state.setter
    def state(self, value: Any) -> None:
        raise ReadOnlyPropertyError("state")

    @property
    def symbol(self) -> str:
        """Glyph for the current state, or '' when glyphs are turned off."""
        return self._symbol_for(self.options)

    @symbol.setter
    def symbol(self, value: Any) -> None:
        raise ReadOnlyPropertyError("symbol")

    @property
    def pointer(self) -> str:
        return format_pointer(self.options.pointer)

    @property
    def prefix(self) -> str:
        """Filler as wide as the pointer, for inactive rows."""
        return padding(self.pointer)

    @property
    def line(self) -> str:
        """Row for the position set at the last render."""
        return self._line(self.options)

    @line.setter
    def line(self, value: Any) -> None:
        raise ReadOnlyPropertyError("line")

    # --- operations -----------------------------------------------------

    def toggle(self) -> Choice:
        self.checked = not self.checked
        return self

    def format(self, text: str, options: Options | None = None) -> str:
        """Apply the format callback, then dim disabled labels."""
        opts = options or self.options
        if callable(opts.format):
            text = opts.format(text)
        return dim(text) if self.disabled else text

    def render(self, position: int | None = None, options: Mapping[str, Any] | Options | None = None) -> str:
        """Render the row for the given cursor position.

        The pointer is drawn only when ``position`` equals this choice's
        index; otherwise a blank filler of the same width keeps columns
        aligned.
        """
        opts = self.options.merged(options)
        self.position = position
        return self._line(opts)

    def _symbol_for(self, opts: Options) -> str:
        if opts.checkbox is False:
            return ""
        symbols = opts.checkbox if isinstance(opts.checkbox, Mapping) else RADIO_SYMBOLS
        return symbols.get(self.state.value, RADIO_SYMBOLS[self.state.value])

    def _line(self, opts: Options) -> str:
        label = escape_label(self.name)
        if self.synthetic:
            label = bold(label)

        disabled = self.disabled
        active = not disabled and self.position is not None and self.position == self.index
        if isinstance(disabled, str):
            label += f" ({escape_label(disabled)})"
        elif disabled:
            label += f" ({DISABLED_LABEL})"

        pointer = format_pointer(opts.pointer)
        if not active:
            pointer = padding(pointer)
        text = self.format(label, opts).rstrip()
        return f"{pointer}{self._symbol_for(opts)} {text}\n"


ChoiceInput = Union[str, Mapping[str, Any], Choice, Separator]


def to_choice(
    value: ChoiceInput,
    options: Mapping[str, Any] | Options | None = None,
) -> Choice | Separator:
    """Normalize a string, record, choice or separator.

    Choices and separators are returned unchanged so that normalization
    is idempotent and state is shared by reference.
    """
    if isinstance(value, (Choice, Separator)):
        return value
    if isinstance(value, str):
        return Choice(name=value, options=options)
    if not is_object(value):
        raise InvalidChoiceError(
            f"expected choice to be a string or mapping, got {type(value).__name__}"
        )
    if value.get("type") == "separator" or value.get("is_separator"):
        return Separator.from_record(value)

    record = dict(value)
    record.pop("options", None)
    record.pop("index", None)
    record.pop("position", None)
    return Choice(options=options, **record)

"""Display-only separator lines."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from prompt_choices.ui.formatting import DEFAULT_SEPARATOR_LINE, escape_label


@dataclass
class Separator:
    """A non-selectable line in a choice list.

    Separators are never indexed, keyed, checked or counted in the
    indexable universe of a collection.
    """

    line: str = DEFAULT_SEPARATOR_LINE
    type: str = field(default="separator", init=False)

    def __post_init__(self) -> None:
        if self.line is None:
            self.line = DEFAULT_SEPARATOR_LINE

    @property
    def is_separator(self) -> bool:
        return True

    def render(self, position: int | None = None, options: Any = None) -> str:
        """Return the line; the cursor position is ignored.

        Custom lines are plain text and escaped; only the default rule is markup.
        """
        if self.line == DEFAULT_SEPARATOR_LINE:
            return f"{self.line}\n"
        return f"{escape_label(self.line)}\n"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Separator":
        """Build a separator from a ``{"type": "separator"}`` record."""
        line = record.get("line", record.get("value"))
        return cls(line)

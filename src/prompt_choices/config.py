"""Options for choice collections with environment overrides."""

import os
from collections.abc import Mapping
from typing import Any

ENV_PREFIX = "PROMPT_CHOICES_"


class Options:
    """Runtime options shared by a collection and its choices.

    Recognized keys:
        answers: context mapping passed to callable ``disabled`` fields
        radio: inject synthetic "all"/"none" entries
        objects: make ``checked`` return choices instead of values
        pointer: active-row indicator override
        checkbox: mapping of state -> glyph, or False to hide glyphs
        format: callable applied to each rendered label
        limit: max visible rows before pagination
    """

    DEFAULTS: dict[str, Any] = {
        "answers": None,  # Replaced by a fresh dict per instance
        "radio": False,
        "objects": False,
        "pointer": None,
        "checkbox": None,
        "format": None,
        "limit": None,
    }

    # Keys that may be set from PROMPT_CHOICES_* env vars
    ENV_TYPES: dict[str, type] = {
        "pointer": str,
        "limit": int,
    }

    def __init__(self, values: Mapping[str, Any] | None = None, **overrides: Any):
        self._data: dict[str, Any] = {}
        if values:
            self._data.update(values)
        self._data.update(overrides)

    @classmethod
    def load(cls, values: "Mapping[str, Any] | Options | None" = None) -> "Options":
        """Factory method - build options and apply env overrides."""
        if isinstance(values, Options):
            return values
        options = cls(values)
        options._apply_env_overrides()
        return options

    def __getattr__(self, name: str) -> Any:
        """Access option values as attributes."""
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._data:
            return self._data[name]
        if name in self.DEFAULTS:
            return self.DEFAULTS[name]
        raise AttributeError(f"Options has no attribute '{name}'")

    @property
    def answers(self) -> dict:
        if self._data.get("answers") is None:
            self._data["answers"] = {}
        return self._data["answers"]

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._data:
            return self._data[key]
        return self.DEFAULTS.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set value in place."""
        self._data[key] = value

    def merged(self, other: "Mapping[str, Any] | Options | None") -> "Options":
        """Return new options with the keys explicitly set in other laid on top.

        The answers mapping is shared by reference.
        """
        if other is None or other is self:
            return self
        overlay = other._data if isinstance(other, Options) else dict(other)
        if overlay.get("answers") is None:
            overlay = {k: v for k, v in overlay.items() if k != "answers"}
        if "answers" not in overlay:
            # Materialize so both instances share the same dict
            self.answers  # noqa: B018
        return Options({**self._data, **overlay})

    def to_dict(self) -> dict[str, Any]:
        """Serialize explicit values merged over defaults."""
        return {**self.DEFAULTS, **self._data, "answers": self.answers}

    def _apply_env_overrides(self) -> None:
        """Apply PROMPT_CHOICES_* env vars for keys not set explicitly."""
        for key, target_type in self.ENV_TYPES.items():
            env_key = f"{ENV_PREFIX}{key.upper()}"
            if key not in self._data and env_key in os.environ:
                self._data[key] = self._coerce(os.environ[env_key], target_type)

    @staticmethod
    def _coerce(value: str, target_type: type) -> Any:
        """Coerce string env value to target type."""
        if target_type is bool:
            return value.lower() in ("true", "1", "yes")
        if target_type is int:
            return int(value)
        return value

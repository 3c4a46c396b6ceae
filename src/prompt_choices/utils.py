"""Shared helpers for choice normalization and lookup."""

from collections.abc import Iterable, Mapping
from typing import Any


def is_number(value: Any) -> bool:
    """Return True for ints and floats (bools are not numbers here)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


def is_object(value: Any) -> bool:
    """Return True if value is a record-like mapping."""
    return isinstance(value, Mapping)


def arrayify(value: Any) -> list:
    """Cast value to a list. None and empty values become []."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def flatten(values: Iterable) -> list:
    """Flatten arbitrarily nested lists and tuples."""
    result: list = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(flatten(value))
        else:
            result.append(value)
    return result


def clone(value: Any) -> Any:
    """Shallow copy a record or list. Other values are returned as-is.

    Field values are shared by reference, never copied.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, list):
        return list(value)
    return value

"""UI module."""

from .paginator import Paginator, calculate_visible_range

__all__ = [
    "Paginator",
    "calculate_visible_range",
]

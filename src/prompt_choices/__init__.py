"""Choice collections for interactive checkbox and radio prompts."""

from .actions import Actions
from .choice import Choice, ChoiceState, to_choice
from .choices import ChoiceCollection, wrap_or_create
from .config import Options
from .errors import ChoicesError, InvalidChoiceError, InvalidIndexError, ReadOnlyPropertyError
from .separator import Separator

__version__ = "0.1.0"

__all__ = [
    "Actions",
    "Choice",
    "ChoiceCollection",
    "ChoiceState",
    "ChoicesError",
    "InvalidChoiceError",
    "InvalidIndexError",
    "Options",
    "ReadOnlyPropertyError",
    "Separator",
    "to_choice",
    "wrap_or_create",
]

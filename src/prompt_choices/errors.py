"""Exceptions raised by prompt_choices."""


class ChoicesError(Exception):
    """Base class for prompt_choices errors."""


class InvalidChoiceError(ChoicesError, TypeError):
    """Raised when a value cannot be normalized into a choice."""


class InvalidIndexError(ChoicesError, TypeError):
    """Raised when a lookup key is neither an index nor a string key."""


class ReadOnlyPropertyError(ChoicesError, AttributeError):
    """Raised on assignment to a computed property."""

    def __init__(self, name: str):
        super().__init__(f".{name} is computed and cannot be assigned")
        self.name = name

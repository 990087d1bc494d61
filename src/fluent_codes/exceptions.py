"""
Exceptions raised while assembling fluent codes.
"""

from typing import Optional


class FluentCodesError(Exception):
    """Base exception for fluent code generation."""
    pass


class StoreUnavailable(FluentCodesError):
    """Raised when the lexical store cannot be opened or read."""
    pass


class ConfigurationError(FluentCodesError):
    """Raised when settings are malformed or inconsistent."""
    pass


class InvalidLengthRange(FluentCodesError, ValueError):
    """Raised when a word length bound is negative or not an integer."""
    pass


class NoMatchingWord(FluentCodesError):
    """Raised when no word of a category fits the requested length range."""

    def __init__(self, category, length_range, message: Optional[str] = None):
        self.category = category
        self.length_range = length_range
        if message is None:
            message = (
                f"No {category.label} with length between "
                f"{length_range.min_length} and {length_range.max_length}"
            )
        super().__init__(message)

"""Exception classes for marklex.

The classifiers and transforms are total and never raise. Errors only
surface when building configuration.
"""

from __future__ import annotations


class MarklexError(Exception):
    """Base exception for all marklex errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(MarklexError):
    """Invalid lexer configuration.

    Raised by LexConfig when a field holds a value the primitives cannot use.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending LexConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid config field '{field}': {message}")

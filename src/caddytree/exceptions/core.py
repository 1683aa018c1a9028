"""
Exception classes for caddytree.

The tree itself never raises for caller content: lookups return ``None`` or
an empty list and names/arguments are written verbatim. These exceptions
cover misuse of the package's own configuration and writer parameters.
"""

from typing import Any


class CaddyTreeError(Exception):
    """Base exception for all caddytree errors."""

    pass


class FormatOptionsError(CaddyTreeError, ValueError):
    """Raised when a serializer option has an unusable value."""

    def __init__(self, option: str, value: Any, reason: str):
        """
        Initialize the exception.

        Params:
            option: Name of the rejected option
            value: The rejected value
            reason: Why the value cannot be used
        """
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid format option {option}={value!r}: {reason}")


class NestingLevelError(CaddyTreeError, ValueError):
    """Raised when a writer is asked to start at a negative nesting level."""

    def __init__(self, level: int):
        """
        Initialize the exception.

        Params:
            level: The rejected nesting level
        """
        self.level = level
        super().__init__(f"Nesting level must be zero or positive, got {level}")

"""Base utilities shared across fretbox.

This module provides the exception raised when exhaustive dispatch over
one of the closed enumerations (fingering modes, display styles, label
modes) falls through.
"""

from typing import Any


class MatchException(Exception):
    """Exception raised when pattern matching fails."""

    def __init__(self, value: Any) -> None:
        """Initialize a MatchException with the unmatched value.

        Args:
            value: The value that failed to match any pattern.
        """
        super().__init__(f"Failed to match value: {value}")

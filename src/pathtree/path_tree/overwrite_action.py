"""Overwrite action enum for handling inserts onto paths that already hold a value."""

from enum import Enum


class OverwriteAction(str, Enum):
    """Action to take when an insert targets a path that already holds a value.

    Values:
        REPLACE: Silently replace the previous value (default behavior)
        RAISE: Raise a PathExistsError and leave the tree unchanged
    """

    REPLACE = "replace"
    RAISE = "raise"

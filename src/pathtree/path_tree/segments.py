"""Parsing and joining of '/'-delimited tree paths.

Paths are logical keys, not host filesystem paths: '/' is the only separator on every
platform and no normalization ('.', '..', case folding) is performed.
"""

from typing import Iterable

from pathtree.exceptions import InvalidPathError
from pathtree.types import Segments

SEPARATOR = "/"


def split_path(path: str) -> Segments:
    """Split a path into its segments, validating every segment.

    The whole path is checked before anything is returned, so callers can validate
    first and mutate afterwards.

    Args:
        path: A '/'-delimited path such as "home/users/arthur".

    Returns:
        The ordered segments of the path.

    Raises:
        InvalidPathError: If the path is not a string, is empty, or contains an empty
            segment (leading, trailing or doubled '/').

    Example:
        >>> split_path("home/users/arthur")
        ('home', 'users', 'arthur')
        >>> split_path("a//b")
        Traceback (most recent call last):
        ...
        pathtree.exceptions.InvalidPathError: Invalid path 'a//b': empty segment at position 1
    """
    if not isinstance(path, str):
        raise InvalidPathError(repr(path), f"expected str, got {type(path).__name__}")
    if not path:
        raise InvalidPathError(path, "path is empty")

    segments = tuple(path.split(SEPARATOR))
    for position, segment in enumerate(segments):
        if not segment:
            raise InvalidPathError(path, f"empty segment at position {position}")
    return segments


def join_path(segments: Iterable[str]) -> str:
    """Join segments back into a path string.

    Example:
        >>> join_path(("home", "users"))
        'home/users'
        >>> join_path(())
        ''
    """
    return SEPARATOR.join(segments)


def child_path(parent_path: str, segment: str) -> str:
    """Return the full path of a child given its parent's full path.

    The root's path is the empty string, so its children's paths are bare segments.

    Example:
        >>> child_path("", "home")
        'home'
        >>> child_path("home", "users")
        'home/users'
    """
    return f"{parent_path}{SEPARATOR}{segment}" if parent_path else segment

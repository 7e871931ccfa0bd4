"""Path selection using .gitignore pattern syntax."""

from typing import Iterable, List, Optional

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore


class PathPatternRules:
    """Selects tree paths using .gitignore pattern syntax.

    This class uses the pathspec library to match '/'-delimited tree paths against
    patterns in the same way that Git matches repository paths.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Patterns are processed in the order they are added, with later patterns
    potentially overriding earlier ones (particularly for negation patterns with !).

    Attributes:
        lines (List[str]): The pattern lines in the order they were added.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = PathPatternRules(["*.txt", "!password.txt"])
        >>> rules.matches("home/users/arthur/answer.txt")
        True
        >>> rules.matches("home/users/arthur/password.txt")
        False
        >>> rules.add_pattern("users/")
        >>> rules.matches("home/users/")
        True

    Note:
        A path ending in '/' is treated as a directory. PathTree.find passes structural
        nodes that way so that directory patterns select them.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        """Initialize PathPatternRules with an optional list of patterns.

        Args:
            patterns: Lines in .gitignore syntax. Blank lines and comments are ignored.
        """
        self.lines: List[str] = list(patterns or [])
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self.lines)

    def matches(self, path: str) -> bool:
        """Check whether a path is selected by the patterns.

        The path is matched exactly as provided; no normalization is performed.

        Args:
            path: A '/'-delimited tree path. Append '/' to match it as a directory.

        Returns:
            bool: True if the path matches a non-negated pattern that isn't overridden by
                a later negated pattern, False otherwise.
        """
        return bool(self.spec.match_file(path))

    def add_pattern(self, pattern: str) -> None:
        """Add a single .gitignore pattern.

        Args:
            pattern: A single pattern (e.g., "*.txt", "users/", "!password.txt").

        Example:
            >>> rules = PathPatternRules()
            >>> rules.add_pattern("**/arthur/*")
            >>> rules.matches("home/users/arthur/answer.txt")
            True
        """
        self.lines.append(pattern)
        self.spec = PathSpec.from_lines(GitWildMatchPattern, self.lines)

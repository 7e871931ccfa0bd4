"""Pattern matching for selecting paths in a tree."""

from .path_patterns import PathPatternRules

__all__ = [
    "PathPatternRules",
]

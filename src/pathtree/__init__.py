"""Path-keyed tree utilities.

This package provides an in-memory tree that maps '/'-delimited paths to values,
creates intermediate path segments on insert, and supports bottom-up aggregation,
value mapping, searching and ordered traversal over the hierarchy.
"""

from importlib.metadata import PackageNotFoundError, version

from pathtree.exceptions import InvalidPathError, PathExistsError, PathNotFoundError, PathTreeError
from pathtree.path_tree import OverwriteAction, PathNode, PathTree

# Expose the version for programmatic use
try:
    __version__ = version("pathtree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "InvalidPathError",
    "OverwriteAction",
    "PathExistsError",
    "PathNode",
    "PathNotFoundError",
    "PathTree",
    "PathTreeError",
]

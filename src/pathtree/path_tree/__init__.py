"""Path-keyed tree container.

This module provides classes for storing values under '/'-delimited paths and for
traversing, aggregating, transforming, searching and rendering the resulting hierarchy.
"""

from .overwrite_action import OverwriteAction
from .path_node import PathNode
from .path_tree import PathTree

__all__ = [
    "OverwriteAction",
    "PathNode",
    "PathTree",
]

"""Path-keyed tree container with topological traversal operations.

This module provides the main PathTree class, which stores values under
'/'-delimited path keys while keeping the hierarchy implied by the path segments.
Missing ancestors are created on insert, and every bulk operation (traverse, reduce,
map, any) is built on one deterministic post-order walk.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, TextIO, Tuple, TypeVar, Union

from anytree import AbstractStyle

from pathtree.exceptions import InvalidPathError, PathExistsError, PathNotFoundError
from pathtree.matching.path_patterns import PathPatternRules
from pathtree.path_tree.overwrite_action import OverwriteAction
from pathtree.path_tree.path_node import PathNode
from pathtree.path_tree.segments import SEPARATOR, child_path, join_path, split_path
from pathtree.types import NodeKind, PredicateFunction, Segments, VisitFunction

logger = logging.getLogger(__name__)

A = TypeVar("A")

ROOT_NAME = "root"

# Plain indentation, two spaces per depth level
INDENT_STYLE = AbstractStyle("  ", "  ", "  ")


class PathTree:
    """A tree of values keyed by '/'-delimited paths.

    Inserting "home/users/arthur/answer.txt" creates the structural nodes "home",
    "home/users" and "home/users/arthur" (no value) and the value-bearing node
    "home/users/arthur/answer.txt". Children keep their insertion order, which makes
    traversal and rendering deterministic for a given sequence of inserts.

    Traversal Order:
        All bulk operations share a post-order walk: every node is visited after all of
        its descendants, siblings in insertion order. The synthetic root is always
        visited, last, with the empty path "" and value None. The walk uses an explicit
        stack, so deep hierarchies do not hit the interpreter's recursion limit.

    Overwrite Handling:
        Inserting onto a path that already holds a value can be handled in two ways:
        - REPLACE (default): Silently replace the previous value
        - RAISE: Raise PathExistsError and leave the tree unchanged

    Attributes:
        overwrite_action (OverwriteAction): How to handle inserts onto occupied paths.

    Example:
        >>> tree = PathTree()
        >>> tree.insert("home/users/arthur/answer.txt", 42)
        >>> tree.insert("home/users/arthur/password.txt", 128)
        >>> tree.get("home/users/arthur/answer.txt")
        42
        >>> import operator
        >>> tree.topo_reduce(operator.add, 0)
        170
        >>> print(tree.get_tree_representation())
        root
          home
            users
              arthur
                answer.txt: 42
                password.txt: 128
    """

    def __init__(self, overwrite_action: OverwriteAction = OverwriteAction.REPLACE) -> None:
        """Initialize an empty PathTree containing only the root node.

        Args:
            overwrite_action: How to handle inserts onto paths that already hold a value.
                Defaults to REPLACE.
        """
        self.overwrite_action = OverwriteAction(overwrite_action)
        self._root = PathNode(ROOT_NAME)
        self._value_count: int = 0
        self._structural_count: int = 0

    @classmethod
    def from_items(
        cls,
        items: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]],
        overwrite_action: OverwriteAction = OverwriteAction.REPLACE,
    ) -> "PathTree":
        """Build a tree from a mapping or an iterable of (path, value) pairs.

        Items are inserted in iteration order, which fixes the sibling order.

        Raises:
            InvalidPathError: If any path is malformed. Items before it stay inserted.
            PathExistsError: If overwrite_action is RAISE and a path repeats.

        Example:
            >>> tree = PathTree.from_items({"a/b": 10, "a/c": 20})
            >>> len(tree)
            2
        """
        tree = cls(overwrite_action=overwrite_action)
        pairs = items.items() if isinstance(items, Mapping) else items
        for path, value in pairs:
            tree.insert(path, value)
        return tree

    @property
    def root(self) -> PathNode:
        """The synthetic root node. It never carries a value."""
        return self._root

    # ------------------------------------------------------------------
    # Insertion and lookup
    # ------------------------------------------------------------------

    def insert(self, path: str, value: Any) -> None:
        """Store a value at a path, creating missing ancestors as structural nodes.

        The path is fully validated before any node is created, so a rejected insert
        leaves the tree untouched.

        Args:
            path: A '/'-delimited path with no empty segments.
            value: The value to store. Any object, including None.

        Raises:
            InvalidPathError: If the path is empty or has an empty segment.
            PathExistsError: If the path already holds a value and overwrite_action is
                RAISE.
        """
        segments = split_path(path)

        if self.overwrite_action == OverwriteAction.RAISE:
            existing = self._find_node(segments)
            if existing is not None and existing.has_value:
                raise PathExistsError(path)

        node = self._root
        for depth, segment in enumerate(segments[:-1]):
            child = node.get_child(segment)
            if child is None:
                child = PathNode(segment, parent=node)
                self._structural_count += 1
                logger.debug("Created structural node %s", join_path(segments[: depth + 1]))
            node = child

        target = node.get_child(segments[-1])
        if target is None:
            target = PathNode(segments[-1], parent=node)
            self._value_count += 1
        elif target.has_value:
            logger.debug("Replacing value at %s", path)
        else:
            self._structural_count -= 1
            self._value_count += 1
        target.value = value

    def get(self, path: str) -> Any:
        """Return the value stored at exactly this path.

        Raises:
            InvalidPathError: If the path is empty or has an empty segment.
            PathNotFoundError: If the path is missing or only exists as a structural node.
        """
        node = self._find_node(split_path(path))
        if node is None or not node.has_value:
            raise PathNotFoundError(path)
        return node.value

    def get_node(self, path: str) -> PathNode:
        """Return the node at a path, whether or not it holds a value.

        The node is part of the tree; change values through insert so the tree's counts
        stay accurate.

        Raises:
            InvalidPathError: If the path is empty or has an empty segment.
            PathNotFoundError: If no node exists at the path.
        """
        node = self._find_node(split_path(path))
        if node is None:
            raise PathNotFoundError(path, "No node at path")
        return node

    def exists(self, path: str) -> bool:
        """Return True if a node exists at the path, structural nodes included."""
        return self._find_node(split_path(path)) is not None

    def _find_node(self, segments: Segments) -> Optional[PathNode]:
        node = self._root
        for segment in segments:
            child = node.get_child(segment)
            if child is None:
                return None
            node = child
        return node

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        try:
            segments = split_path(path)
        except InvalidPathError:
            return False
        node = self._find_node(segments)
        return node is not None and node.has_value

    def __len__(self) -> int:
        return self._value_count

    def get_value_count(self) -> int:
        """Get the number of value-bearing nodes in the tree."""
        return self._value_count

    def get_structural_count(self) -> int:
        """Get the number of structural nodes in the tree (excluding root)."""
        return self._structural_count

    # ------------------------------------------------------------------
    # Topological traversal core
    # ------------------------------------------------------------------

    def iter_post_order(
        self, start: Optional[PathNode] = None, start_path: str = ""
    ) -> Iterator[Tuple[str, PathNode]]:
        """Walk the tree children-before-parent, yielding (full path, node) pairs.

        Siblings are visited in insertion order. The walk is lazy, so consumers may stop
        early.

        Args:
            start: Node to start from. Defaults to the root.
            start_path: Full path of the start node. The root's path is "".

        Yields:
            Pairs of (full_path, node), each descendant strictly before its ancestors.

        Example:
            >>> tree = PathTree.from_items([("a/b", 1), ("a/c", 2)])
            >>> [path for path, _ in tree.iter_post_order()]
            ['a/b', 'a/c', 'a', '']
        """
        stack = [(start if start is not None else self._root, start_path, False)]
        while stack:
            node, path, expanded = stack.pop()
            if expanded:
                yield path, node
                continue
            stack.append((node, path, True))
            for child in reversed(node.children):
                stack.append((child, child_path(path, child.name), False))

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Yield (path, value) for every value-bearing node, in post-order."""
        for path, node in self.iter_post_order():
            if node.has_value:
                yield path, node.value

    def topo_traverse(self, visit_fn: VisitFunction) -> None:
        """Call visit_fn(path, value) once for every node, in post-order.

        Structural nodes and the root are visited too, with value None.

        Args:
            visit_fn: Callback taking the node's full path and its value.

        Example:
            >>> tree = PathTree.from_items({"a/b": 10})
            >>> tree.topo_traverse(lambda path, value: print(repr(path), value))
            'a/b' 10
            'a' None
            '' None
        """
        for path, node in self.iter_post_order():
            visit_fn(path, node.value)

    def topo_reduce(self, combine_fn: Callable[[A, Any], A], initial: A, path: Optional[str] = None) -> A:
        """Fold every stored value into one accumulator, children before parents.

        At each node the children are folded first, in sibling order, then the node's own
        value; structural nodes contribute only their children. The result is a single
        accumulator for the whole tree, or for the subtree at path when given.

        Args:
            combine_fn: Called as combine_fn(accumulator, value), returns the new
                accumulator.
            initial: Starting accumulator.
            path: Restrict the fold to the subtree rooted at this path, its own value
                included. None or "" (the root's path) selects the whole tree.

        Returns:
            The final accumulator.

        Raises:
            InvalidPathError: If path is given and malformed.
            PathNotFoundError: If path is given and no node exists there.

        Example:
            >>> import operator
            >>> tree = PathTree.from_items({"a/b": 10, "a/c": 20, "d": 5})
            >>> tree.topo_reduce(operator.add, 0)
            35
            >>> tree.topo_reduce(operator.add, 0, path="a")
            30
        """
        if path is None or path == "":
            start, start_path = self._root, ""
        else:
            start, start_path = self.get_node(path), path

        accumulator = initial
        for _, node in self.iter_post_order(start, start_path):
            if node.has_value:
                accumulator = combine_fn(accumulator, node.value)
        return accumulator

    def topo_map(self, transform_fn: Callable[[Any], Any]) -> "PathTree":
        """Return a new tree of identical shape with every stored value transformed.

        Structural nodes stay valueless. The source tree is not modified and the new tree
        shares no nodes with it. transform_fn is called in post-order.

        Args:
            transform_fn: Called with each stored value, returns the new value.

        Returns:
            A new PathTree with the same overwrite_action.

        Example:
            >>> tree = PathTree.from_items({"a/b": 10, "a/c": 20})
            >>> doubled = tree.topo_map(lambda v: v * 2)
            >>> list(doubled.items())
            [('a/b', 20), ('a/c', 40)]
            >>> list(tree.items())
            [('a/b', 10), ('a/c', 20)]
        """
        mapped_tree = PathTree(overwrite_action=self.overwrite_action)
        copies = {}

        for _, node in self.iter_post_order():
            if node is self._root:
                copy = mapped_tree._root
            elif node.has_value:
                copy = node.copy_detached(transform_fn(node.value))
            else:
                copy = node.copy_detached()
            # Children were copied earlier in the walk
            copy.children = [copies.pop(child) for child in node.children]
            copies[node] = copy

        mapped_tree._value_count = self._value_count
        mapped_tree._structural_count = self._structural_count
        logger.debug("Mapped %d values into a new tree", self._value_count)
        return mapped_tree

    def topo_any(self, predicate_fn: PredicateFunction) -> bool:
        """Return True if predicate_fn(path, value) holds for any node.

        Nodes are tested in post-order, and the walk stops at the first match. The root is
        tested last, with path "" and value None.

        Example:
            >>> tree = PathTree.from_items({"a/b/c": 1})
            >>> tree.topo_any(lambda path, value: path == "a/b")
            True
            >>> tree.topo_any(lambda path, value: value == 2)
            False
        """
        return any(predicate_fn(path, node.value) for path, node in self.iter_post_order())

    # ------------------------------------------------------------------
    # Searching
    # ------------------------------------------------------------------

    def find(self, patterns: Union[PathPatternRules, Sequence[str]]) -> Iterator[Tuple[str, Any]]:
        """Yield (path, value) for every node whose full path matches the patterns.

        Patterns use .gitignore syntax. Nodes acting as directories (structural nodes and
        valued nodes that have children) are matched with a trailing '/', so directory
        patterns such as "users/" select them as well as everything beneath them.
        Results come in post-order; the root is never matched.

        Args:
            patterns: A PathPatternRules instance or a sequence of pattern strings.

        Yields:
            Pairs of (full_path, value); value is None for structural nodes.

        Example:
            >>> tree = PathTree.from_items({"src/main.py": 1, "src/notes.txt": 2})
            >>> list(tree.find(["*.py"]))
            [('src/main.py', 1)]
        """
        rules = patterns if isinstance(patterns, PathPatternRules) else PathPatternRules(patterns)
        for path, node in self.iter_post_order():
            if node is self._root:
                continue
            candidate = path + SEPARATOR if node.children or not node.has_value else path
            if rules.matches(candidate):
                yield path, node.value

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def stream_tree_representation(self, style: Optional[AbstractStyle] = None) -> Iterator[str]:
        """Generate an indented representation of the tree one line at a time.

        Each node gets one line in pre-order with children in insertion order. The walk
        uses an explicit stack, so deep trees render without recursion. A line
        shows the node's segment, followed by ": <value>" for value-bearing nodes. The
        root line is just "root". This is an inspection aid, not a stable format.

        Args:
            style: An anytree render style. Defaults to two spaces of indentation per
                depth level; pass anytree.ContStyle() for tree-command connectors.

        Yields:
            Lines of the tree representation.

        Example:
            >>> from anytree import ContStyle
            >>> tree = PathTree.from_items({"src/main.py": 3, "docs/readme.md": 1})
            >>> for line in tree.stream_tree_representation(ContStyle()):
            ...     print(line)
            root
            ├── src
            │   └── main.py: 3
            └── docs
                └── readme.md: 1
        """
        style = style if style is not None else INDENT_STYLE

        yield self._format_label(self._root)

        # Entries are (node, fill from ancestors, is last sibling)
        stack = [(child, "", index == len(self._root.children) - 1) for index, child in enumerate(self._root.children)]
        stack.reverse()
        while stack:
            node, fill, is_last = stack.pop()
            yield f"{fill}{style.end if is_last else style.cont}{self._format_label(node)}"
            child_fill = fill + (style.empty if is_last else style.vertical)
            last = len(node.children) - 1
            for index in range(last, -1, -1):
                stack.append((node.children[index], child_fill, index == last))

    @staticmethod
    def _format_label(node: PathNode) -> str:
        if node.kind == NodeKind.VALUE:
            return f"{node.name}: {node.value}"
        return node.name

    def get_tree_representation(self, style: Optional[AbstractStyle] = None) -> str:
        """Get a complete string representation of the tree.

        Returns:
            The lines of stream_tree_representation joined by newlines.
        """
        return "\n".join(self.stream_tree_representation(style))

    def print_tree(self, file: Optional[TextIO] = None, style: Optional[AbstractStyle] = None) -> None:
        """Print the indented tree representation.

        Args:
            file: Stream to write to. Defaults to sys.stdout.
            style: An anytree render style. Defaults to plain indentation.
        """
        out = file if file is not None else sys.stdout
        for line in self.stream_tree_representation(style):
            print(line, file=out)

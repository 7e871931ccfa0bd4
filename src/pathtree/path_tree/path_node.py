"""Node representation for path segments in the tree."""

from typing import Any, Dict, Optional

from anytree import Node

from pathtree.types import NodeKind

# Marks a node that holds no value, so that None remains a storable value
_ABSENT = object()


class PathNode(Node):  # type: ignore
    """Node class representing one path segment in a path tree.

    Extends anytree.Node with an optional value and a segment-to-child index. A node
    with a value plays the role of a "file"; a node without one exists only as the
    ancestor of deeper paths and plays the role of a "directory". A valued node may
    still have children.

    The child index is kept in sync by anytree's attach/detach hooks, so children
    added through any anytree API are indexed too. Sibling segments are unique.

    Attributes:
        name (str): The segment this node represents (not the full path).
        parent (Optional[PathNode]): The parent node in the tree.
        children (tuple[PathNode]): The child nodes in insertion order (inherited from
            anytree.Node).

    Example:
        >>> root = PathNode("root")
        >>> home = PathNode("home", parent=root)
        >>> answer = PathNode("answer.txt", parent=home, value=42)
        >>> answer.value
        42
        >>> home.has_value
        False
        >>> root.get_child("home") is home
        True
    """

    def __init__(self, name: str, parent: Optional["PathNode"] = None, value: Any = _ABSENT, **kwargs: Any) -> None:
        """Initialize a PathNode.

        Args:
            name: The path segment this node represents.
            parent: The parent node. Defaults to None.
            value: The node's payload. Omit it to create a structural node.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        # Must exist before anytree attaches any children passed through kwargs
        self._child_index: Dict[str, "PathNode"] = {}
        self._value = value
        super().__init__(name, parent, **kwargs)

    @property
    def segment(self) -> str:
        """The path segment this node represents."""
        return self.name

    @property
    def has_value(self) -> bool:
        """True if a value was explicitly stored on this node."""
        return self._value is not _ABSENT

    @property
    def value(self) -> Optional[Any]:
        """The stored value, or None for a structural node.

        Use has_value to tell a stored None apart from no value at all.
        """
        return None if self._value is _ABSENT else self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    @property
    def kind(self) -> NodeKind:
        """Classify the node as root, value-bearing or structural."""
        if self.is_root:
            return NodeKind.ROOT
        return NodeKind.VALUE if self.has_value else NodeKind.STRUCTURAL

    def get_child(self, segment: str) -> Optional["PathNode"]:
        """Return the child for a segment, or None if there is no such child."""
        return self._child_index.get(segment)

    def copy_detached(self, value: Any = _ABSENT) -> "PathNode":
        """Return a parentless, childless node with this node's segment.

        Args:
            value: Value for the copy. Omit it to create a structural copy.
        """
        return PathNode(self.name, value=value)

    def _pre_attach(self, parent: "PathNode") -> None:
        if parent.get_child(self.name) is not None:
            raise ValueError(f"Duplicate segment {self.name!r} under {parent.name!r}")

    def _post_attach(self, parent: "PathNode") -> None:
        parent._child_index[self.name] = self

    def _post_detach(self, parent: "PathNode") -> None:
        parent._child_index.pop(self.name, None)

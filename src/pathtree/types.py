from enum import Enum
from typing import Any, Callable, Optional, Tuple

# Sequence of '/'-delimited components of a path, root excluded
Segments = Tuple[str, ...]

# Callbacks receive the full path and the node's value (None for structural nodes)
VisitFunction = Callable[[str, Optional[Any]], None]
PredicateFunction = Callable[[str, Optional[Any]], bool]


class NodeKind(Enum):
    """Enumeration of node kinds found in a path tree.

    This enum is used to differentiate between nodes that carry a value and nodes that
    exist only because they are ancestors of an inserted path.

    Attributes:
        ROOT: The synthetic root node
        VALUE: A node explicitly inserted with a value (a "file")
        STRUCTURAL: A valueless ancestor created implicitly (a "directory")
    """

    ROOT = "root"
    VALUE = "value"
    STRUCTURAL = "structural"

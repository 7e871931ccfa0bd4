class PathTreeError(Exception):
    """
    Base class for all errors raised by pathtree.

    Every failing call leaves the tree exactly as it was before the call, so callers
    can catch this exception (or one of its subclasses) and keep using the tree.

    Example:
        >>> issubclass(InvalidPathError, PathTreeError)
        True
    """

    pass


class InvalidPathError(PathTreeError, ValueError):
    """
    Exception raised when a path string cannot be split into valid segments.

    A path is invalid when it is empty or when any of its '/'-delimited segments is
    empty, which covers leading, trailing and doubled separators.

    Attributes:
        path (str): The rejected path string.
        reason (str): Short description of what is wrong with the path.

    Example:
        >>> error = InvalidPathError("a//b", "empty segment at position 1")
        >>> str(error)
        "Invalid path 'a//b': empty segment at position 1"
        >>> isinstance(error, ValueError)
        True
    """

    def __init__(self, path: str, reason: str = "malformed path") -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path (str): The rejected path string.
            reason (str, optional): What is wrong with the path. Defaults to "malformed path".
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class PathNotFoundError(PathTreeError, KeyError):
    """
    Exception raised when no value exists at a requested path.

    This covers both paths that are missing from the tree entirely and paths that only
    exist as structural nodes (ancestors created implicitly, holding no value).

    Attributes:
        path (str): The path that was looked up.

    Example:
        >>> error = PathNotFoundError("home/users")
        >>> str(error)
        'No value at path: home/users'
        >>> isinstance(error, KeyError)
        True
    """

    def __init__(self, path: str, message: str = "No value at path") -> None:
        """
        Initialize the exception with the path that was looked up.

        Args:
            path (str): The path that was looked up.
            message (str, optional): Base error message. Defaults to "No value at path".
        """
        self.path = path
        self.message = f"{message}: {path}"
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError.__str__ would return the repr of the message.
        return self.message


class PathExistsError(PathTreeError):
    """
    Exception raised when inserting over an existing value is refused.

    Only raised by trees configured with OverwriteAction.RAISE.

    Attributes:
        path (str): The path that already holds a value.

    Example:
        >>> error = PathExistsError("home/answer.txt")
        >>> str(error)
        'Path already holds a value: home/answer.txt'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the occupied path.

        Args:
            path (str): The path that already holds a value.
        """
        self.path = path
        super().__init__(f"Path already holds a value: {path}")

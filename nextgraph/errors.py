"""Exceptions raised by graph operations."""

from __future__ import annotations

__all__ = [
    "GraphError",
    "NodeNotFound",
    "EdgeCreationError",
    "EdgeNotFoundError",
    "GraphContainsCycle",
]


class GraphError(Exception):
    """Base class for all graph errors.

    Two errors compare equal when they are of the same kind and carry the
    same context values.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        inner = ", ".join(repr(arg) for arg in self.args)
        return f"{type(self).__name__}({inner})"


class NodeNotFound(GraphError):
    """A node index does not exist or has been removed."""

    def __init__(self, index: int) -> None:
        super().__init__(index)
        self.index = index

    def __str__(self) -> str:
        return (
            f"Node with index {self.index} not found; "
            "it may be out of bounds or have been removed."
        )


class EdgeCreationError(GraphError):
    """An edge between two nodes could not be created."""

    def __init__(self, source: int, target: int) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return (
            f"Edge from {self.source} to {self.target} could not be created; "
            "a node may not exist or the edge already exists."
        )


class EdgeNotFoundError(GraphError):
    """An edge between two nodes does not exist."""

    def __init__(self, source: int, target: int) -> None:
        super().__init__(source, target)
        self.source = source
        self.target = target

    def __str__(self) -> str:
        return f"Edge from {self.source} to {self.target} not found."


class GraphContainsCycle(GraphError):
    """The operation failed because the graph contains a cycle."""

    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "Operation failed because the graph contains a cycle."
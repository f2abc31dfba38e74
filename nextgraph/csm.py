"""Frozen graph in compressed sparse row (CSR) form."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .algorithms import GraphAlgorithms
from .errors import NodeNotFound
from .frontier import FrontierAlgorithms

if TYPE_CHECKING:
    from .dynamic import DynamicGraph

__all__ = ["CsrAdjacency", "CsmGraph"]

N = TypeVar("N")
W = TypeVar("W")

# Adjacency lists at least this long are searched by bisection.
BINARY_SEARCH_THRESHOLD = 64


@dataclass
class CsrAdjacency:
    """Adjacency lists stored as parallel flat arrays.

    The neighbours of node ``i`` are ``targets[offsets[i]:offsets[i + 1]]``,
    with matching entries in ``weights``. ``offsets`` always holds one more
    entry than there are nodes.
    """

    offsets: list[int] = field(default_factory=lambda: [0])
    targets: list[int] = field(default_factory=list)
    weights: list[Any] = field(default_factory=list)

    def bounds(self, index: int) -> tuple[int, int]:
        """Return the slice bounds of node ``index`` in the flat arrays."""
        return self.offsets[index], self.offsets[index + 1]


class CsmGraph(GraphAlgorithms, FrontierAlgorithms, Generic[N, W]):
    """An immutable, compact graph optimised for traversal and analysis.

    Node indices are dense (``0 .. number_nodes() - 1``) and every adjacency
    list is sorted by target index.
    """

    def __init__(self) -> None:
        self._nodes: list[N] = []
        self._forward = CsrAdjacency()
        self._backward = CsrAdjacency()
        self._root_index: int | None = None

    @classmethod
    def with_capacity(cls, num_nodes: int) -> CsmGraph[N, W]:
        """Return an empty graph; ``num_nodes`` is only a sizing hint."""
        return cls()

    @classmethod
    def _from_csr(
        cls,
        nodes: list[N],
        forward: CsrAdjacency,
        backward: CsrAdjacency,
        root_index: int | None,
    ) -> CsmGraph[N, W]:
        graph = cls()
        graph._nodes = nodes
        graph._forward = forward
        graph._backward = backward
        graph._root_index = root_index
        return graph

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.number_nodes()}, "
            f"edges={self.number_edges()}, root={self._root_index})"
        )

    # --- inspection ---

    def is_frozen(self) -> bool:
        """Return True: a CSR graph is always frozen."""
        return True

    def contains_node(self, index: int) -> bool:
        """Return whether a node exists at ``index``."""
        return 0 <= index < len(self._nodes)

    def get_node(self, index: int) -> N | None:
        """Return the payload of node ``index``, or None if it does not exist."""
        if not self.contains_node(index):
            return None
        return self._nodes[index]

    def number_nodes(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    def contains_edge(self, a: int, b: int) -> bool:
        """Return whether a directed edge leads from ``a`` to ``b``."""
        if not self.contains_node(a):
            return False
        start, end = self._forward.bounds(a)
        targets = self._forward.targets
        if end - start < BINARY_SEARCH_THRESHOLD:
            return b in targets[start:end]
        pos = bisect_left(targets, b, start, end)
        return pos < end and targets[pos] == b

    def number_edges(self) -> int:
        """Return the number of edges."""
        return len(self._forward.targets)

    def get_edges(self, source: int) -> list[tuple[int, W]] | None:
        """Return ``(target, weight)`` pairs leaving ``source``, or None if it does not exist."""
        if not self.contains_node(source):
            return None
        start, end = self._forward.bounds(source)
        return list(
            zip(self._forward.targets[start:end], self._forward.weights[start:end])
        )

    def contains_root_node(self) -> bool:
        """Return whether a root node is designated."""
        return self._root_index is not None

    def get_root_node(self) -> N | None:
        """Return the payload of the root node, or None."""
        if self._root_index is None:
            return None
        return self.get_node(self._root_index)

    def get_root_index(self) -> int | None:
        """Return the index of the root node, or None."""
        return self._root_index

    # --- traversal ---

    def outbound_edges(self, a: int) -> Iterator[int]:
        """Return an iterator over the successors of node ``a``.

        Raises NodeNotFound if ``a`` does not exist.
        """
        if not self.contains_node(a):
            raise NodeNotFound(a)
        start, end = self._forward.bounds(a)
        return iter(self._forward.targets[start:end])

    def inbound_edges(self, a: int) -> Iterator[int]:
        """Return an iterator over the predecessors of node ``a``.

        Raises NodeNotFound if ``a`` does not exist.
        """
        if not self.contains_node(a):
            raise NodeNotFound(a)
        start, end = self._backward.bounds(a)
        return iter(self._backward.targets[start:end])

    # --- lifecycle ---

    def unfreeze(self) -> DynamicGraph[N, W]:
        """Return a mutable DynamicGraph holding the same nodes, edges and root."""
        from .dynamic import DynamicGraph

        nodes: list[N | None] = list(self._nodes)
        edges = [
            list(
                zip(
                    self._forward.targets[start:end],
                    self._forward.weights[start:end],
                )
            )
            for start, end in map(self._forward.bounds, range(len(self._nodes)))
        ]
        return DynamicGraph.from_parts(nodes, edges, self._root_index)
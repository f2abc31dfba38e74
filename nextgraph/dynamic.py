"""Mutable graph built from adjacency lists with stable node indices."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .errors import EdgeCreationError, EdgeNotFoundError, NodeNotFound

if TYPE_CHECKING:
    from .csm import CsmGraph

__all__ = ["DynamicGraph"]

N = TypeVar("N")
W = TypeVar("W")


class DynamicGraph(Generic[N, W]):
    """A directed graph that can be freely mutated.

    Removed nodes are tombstoned (their slot becomes ``None``) so that the
    indices of all other nodes stay stable. Parallel edges are allowed.
    """

    def __init__(self) -> None:
        self._num_edges_per_node: int | None = None
        self._nodes: list[N | None] = []
        self._edges: list[list[tuple[int, W]]] = []
        self._root_index: int | None = None

    @classmethod
    def with_capacity(
        cls, num_nodes: int, num_edges_per_node: int | None = None
    ) -> DynamicGraph[N, W]:
        """Return an empty graph; both arguments are only sizing hints."""
        graph = cls()
        graph._num_edges_per_node = num_edges_per_node
        return graph

    @classmethod
    def from_parts(
        cls,
        nodes: list[N | None],
        edges: list[list[tuple[int, W]]],
        root_index: int | None,
    ) -> DynamicGraph[N, W]:
        """Build a graph directly from node slots, adjacency lists and a root index.

        Raises ValueError if ``nodes`` and ``edges`` differ in length.
        """
        if len(nodes) != len(edges):
            raise ValueError(
                "The number of node payloads must equal the number of adjacency lists."
            )
        graph = cls()
        graph._nodes = nodes
        graph._edges = edges
        graph._root_index = root_index
        return graph

    def to_parts(
        self,
    ) -> tuple[list[N | None], list[list[tuple[int, W]]], int | None]:
        """Return the node slots, adjacency lists and root index."""
        return self._nodes, self._edges, self._root_index

    def root_index(self) -> int | None:
        """Return the stored root index, whether or not its node still exists."""
        return self._root_index

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.number_nodes()}, "
            f"edges={self.number_edges()}, root={self._root_index})"
        )

    # --- inspection ---

    def is_frozen(self) -> bool:
        """Return False: a dynamic graph is never frozen."""
        return False

    def contains_node(self, index: int) -> bool:
        """Return whether a live (non-removed) node exists at ``index``."""
        return 0 <= index < len(self._nodes) and self._nodes[index] is not None

    def get_node(self, index: int) -> N | None:
        """Return the payload of node ``index``, or None if absent or removed."""
        if not 0 <= index < len(self._nodes):
            return None
        return self._nodes[index]

    def number_nodes(self) -> int:
        """Return the number of live nodes."""
        return sum(node is not None for node in self._nodes)

    def contains_edge(self, a: int, b: int) -> bool:
        """Return whether an edge leads from ``a`` to the live node ``b``."""
        if not 0 <= a < len(self._edges):
            return False
        return any(
            target == b and self.contains_node(target) for target, _ in self._edges[a]
        )

    def number_edges(self) -> int:
        """Return the number of stored edges, including those to removed nodes."""
        return sum(len(edge_list) for edge_list in self._edges)

    def get_edges(self, source: int) -> list[tuple[int, W]] | None:
        """Return ``(target, weight)`` pairs leaving ``source`` to live nodes.

        Returns None if ``source`` does not exist.
        """
        if not self.contains_node(source):
            return None
        return [
            (target, weight)
            for target, weight in self._edges[source]
            if self.contains_node(target)
        ]

    def contains_root_node(self) -> bool:
        """Return whether a live root node is designated."""
        return self._root_index is not None and self.contains_node(self._root_index)

    def get_root_node(self) -> N | None:
        """Return the payload of the root node, or None."""
        if self._root_index is None:
            return None
        return self.get_node(self._root_index)

    def get_root_index(self) -> int | None:
        """Return the index of the root node if it is still live, else None."""
        return self._root_index if self.contains_root_node() else None

    # --- mutation ---

    def add_node(self, node: N) -> int:
        """Add a node and return its stable index."""
        index = len(self._nodes)
        self._nodes.append(node)
        self._edges.append([])
        return index

    def update_node(self, index: int, node: N) -> None:
        """Replace the payload of a live node.

        Raises NodeNotFound if the node does not exist or was removed.
        """
        if not self.contains_node(index):
            raise NodeNotFound(index)
        self._nodes[index] = node

    def remove_node(self, index: int) -> None:
        """Tombstone a node and drop its outgoing edges.

        Incoming edges are kept until the graph is frozen. Clears the root if
        it pointed at this node. Raises NodeNotFound if the node does not
        exist or was already removed.
        """
        if not self.contains_node(index):
            raise NodeNotFound(index)
        self._nodes[index] = None
        self._edges[index].clear()
        if self._root_index == index:
            self._root_index = None

    def add_edge(self, a: int, b: int, weight: W) -> None:
        """Add a directed edge from ``a`` to ``b``.

        Raises EdgeCreationError if either node does not exist.
        """
        if not self.contains_node(a) or not self.contains_node(b):
            raise EdgeCreationError(a, b)
        self._edges[a].append((b, weight))

    def remove_edge(self, a: int, b: int) -> None:
        """Remove the first edge from ``a`` to ``b``; the last edge of ``a`` takes its place.

        Raises NodeNotFound if ``a`` does not exist and EdgeNotFoundError if
        there is no such edge.
        """
        if not self.contains_node(a):
            raise NodeNotFound(a)
        edge_list = self._edges[a]
        pos = next(
            (i for i, (target, _) in enumerate(edge_list) if target == b), None
        )
        if pos is None:
            raise EdgeNotFoundError(a, b)
        last = edge_list.pop()
        if pos < len(edge_list):
            edge_list[pos] = last

    def add_root_node(self, node: N) -> int:
        """Add a node, make it the root and return its index."""
        index = self.add_node(node)
        self._root_index = index
        return index

    def clear(self) -> None:
        """Remove all nodes, edges and the root."""
        self._nodes.clear()
        self._edges.clear()
        self._root_index = None

    # --- lifecycle ---

    def freeze(self) -> CsmGraph[N, W]:
        """Return a compact, immutable CsmGraph with removed nodes dropped."""
        from .freezing import freeze_graph

        return freeze_graph(self._nodes, self._edges, self._root_index)
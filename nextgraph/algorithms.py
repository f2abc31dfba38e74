"""Read-only analytical algorithms over a directed graph."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator

__all__ = ["NodeState", "GraphAlgorithms"]


class NodeState(enum.Enum):
    """State of a node during a depth-first traversal."""

    UNVISITED = enum.auto()
    VISITING_IN_PROGRESS = enum.auto()
    VISITED = enum.auto()


class GraphAlgorithms(ABC):
    """Cycle detection, topological sorting and shortest paths.

    Subclasses provide node counting, node lookup and successor iteration;
    nodes are addressed by the indices ``0 .. number_nodes() - 1``.
    """

    @abstractmethod
    def number_nodes(self) -> int:
        """Return the number of nodes."""

    @abstractmethod
    def contains_node(self, index: int) -> bool:
        """Return whether a node exists at ``index``."""

    @abstractmethod
    def outbound_edges(self, a: int) -> Iterable[int]:
        """Return the successors of node ``a``."""

    def _successors(self, u: int) -> Iterator[int]:
        return iter(self.outbound_edges(u))

    def find_cycle(self) -> list[int] | None:
        """Return one cycle as a closed path such as ``[v, ..., u, v]``, or None for a DAG."""
        num_nodes = self.number_nodes()
        if num_nodes == 0:
            return None

        states = [NodeState.UNVISITED] * num_nodes
        predecessors: list[int | None] = [None] * num_nodes

        for root in range(num_nodes):
            if states[root] is not NodeState.UNVISITED:
                continue
            states[root] = NodeState.VISITING_IN_PROGRESS
            stack: list[tuple[int, Iterator[int]]] = [(root, self._successors(root))]

            while stack:
                u, neighbors = stack[-1]
                v = next(neighbors, None)
                if v is None:
                    states[u] = NodeState.VISITED
                    stack.pop()
                    continue

                if states[v] is NodeState.VISITING_IN_PROGRESS:
                    path = [u]
                    current = u
                    while (predecessor := predecessors[current]) is not None:
                        path.append(predecessor)
                        if predecessor == v:
                            break
                        current = predecessor
                    path.reverse()
                    path.append(v)
                    return path

                if states[v] is NodeState.UNVISITED:
                    predecessors[v] = u
                    states[v] = NodeState.VISITING_IN_PROGRESS
                    stack.append((v, self._successors(v)))

        return None

    def has_cycle(self) -> bool:
        """Return whether the graph contains a directed cycle."""
        return self.topological_sort() is None

    def topological_sort(self) -> list[int] | None:
        """Return the nodes in topological order (Kahn's algorithm), or None on a cycle."""
        num_nodes = self.number_nodes()
        if num_nodes == 0:
            return []

        in_degrees = [0] * num_nodes
        for node in range(num_nodes):
            for neighbor in self._successors(node):
                in_degrees[neighbor] += 1

        queue = deque(node for node, degree in enumerate(in_degrees) if degree == 0)
        sorted_list: list[int] = []
        while queue:
            u = queue.popleft()
            sorted_list.append(u)
            for v in self._successors(u):
                in_degrees[v] -= 1
                if in_degrees[v] == 0:
                    queue.append(v)

        return sorted_list if len(sorted_list) == num_nodes else None

    def is_reachable(self, start_index: int, stop_index: int) -> bool:
        """Return whether a path leads from ``start_index`` to ``stop_index``."""
        return self.shortest_path_len(start_index, stop_index) is not None

    def shortest_path_len(self, start_index: int, stop_index: int) -> int | None:
        """Return the number of nodes on the shortest path, or None if there is none."""
        if not self.contains_node(start_index) or not self.contains_node(stop_index):
            return None
        if start_index == stop_index:
            return 1

        visited = [False] * self.number_nodes()
        visited[start_index] = True
        queue = deque([(start_index, 1)])

        while queue:
            current, length = queue.popleft()
            for neighbor in self._successors(current):
                if neighbor == stop_index:
                    return length + 1
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append((neighbor, length + 1))
        return None

    def shortest_path(self, start_index: int, stop_index: int) -> list[int] | None:
        """Return the nodes of a shortest path, or None if there is none."""
        if not self.contains_node(start_index) or not self.contains_node(stop_index):
            return None
        if start_index == stop_index:
            return [start_index]

        num_nodes = self.number_nodes()
        predecessors: list[int | None] = [None] * num_nodes
        visited = [False] * num_nodes
        visited[start_index] = True
        queue = deque([start_index])

        found = False
        while queue and not found:
            current = queue.popleft()
            for neighbor in self._successors(current):
                if visited[neighbor]:
                    continue
                visited[neighbor] = True
                predecessors[neighbor] = current
                queue.append(neighbor)
                if neighbor == stop_index:
                    found = True
                    break

        if not found:
            return None

        path: list[int] = []
        node: int | None = stop_index
        while node is not None:
            path.append(node)
            node = predecessors[node]
        path.reverse()
        return path
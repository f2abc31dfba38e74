"""Level-synchronous (frontier-at-a-time) graph algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

__all__ = ["FrontierAlgorithms"]


class FrontierAlgorithms(ABC):
    """Topological sorting and shortest paths that expand a whole frontier per step.

    Each step processes every node of the current frontier before moving on,
    which yields deterministic, level-ordered results. Subclasses provide node
    counting, node lookup and successor iteration; nodes are addressed by the
    indices ``0 .. number_nodes() - 1``.
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

    def topological_sort_par(self) -> list[int] | None:
        """Return a topological order built level by level, or None on a cycle.

        Nodes within one level are sorted, so the result is deterministic.
        """
        num_nodes = self.number_nodes()
        in_degrees = [0] * num_nodes
        for node in range(num_nodes):
            for neighbor in self.outbound_edges(node):
                in_degrees[neighbor] += 1

        order: list[int] = []
        frontier = [node for node, degree in enumerate(in_degrees) if degree == 0]
        while frontier:
            frontier.sort()
            order.extend(frontier)
            released: list[int] = []
            for u in frontier:
                for v in self.outbound_edges(u):
                    in_degrees[v] -= 1
                    if not in_degrees[v]:
                        released.append(v)
            frontier = released

        return order if len(order) == num_nodes else None

    def is_reachable_par(self, start_index: int, stop_index: int) -> bool:
        """Return whether a path leads from ``start_index`` to ``stop_index``."""
        return self._level_path(start_index, stop_index) is not None

    def shortest_path_len_par(self, start_index: int, stop_index: int) -> int | None:
        """Return the number of nodes on the shortest path, or None if there is none."""
        path = self._level_path(start_index, stop_index)
        return None if path is None else len(path)

    def shortest_path_par(self, start_index: int, stop_index: int) -> list[int] | None:
        """Return the nodes of a shortest path, or None if there is none."""
        return self._level_path(start_index, stop_index)

    def _levels(self, start: int) -> Iterator[tuple[list[int], dict[int, int]]]:
        """Yield each newly reached level together with the predecessor map so far."""
        predecessors = {start: start}
        frontier = [start]
        while frontier:
            reached: list[int] = []
            for u in frontier:
                for v in self.outbound_edges(u):
                    if v not in predecessors:
                        predecessors[v] = u
                        reached.append(v)
            if reached:
                yield reached, predecessors
            frontier = reached

    def _level_path(self, start: int, stop: int) -> list[int] | None:
        """Return a shortest path found by level expansion, or None."""
        if not (self.contains_node(start) and self.contains_node(stop)):
            return None
        if start == stop:
            return [start]
        for level, predecessors in self._levels(start):
            if stop in level:
                path = [stop]
                while path[-1] != start:
                    path.append(predecessors[path[-1]])
                path.reverse()
                return path
        return None
import pytest

from nextgraph.csm import CsmGraph
from nextgraph.dynamic import DynamicGraph
from nextgraph.frontier import FrontierAlgorithms


def _frozen(num_nodes, edges=()):
    """Build a frozen graph with the given number of nodes and (source, target) edges."""
    builder = DynamicGraph()
    for i in range(num_nodes):
        builder.add_node(i)
    for source, target in edges:
        builder.add_edge(source, target, 0)
    return builder.freeze()


def _test_dag():
    # 0 -> 1 -> 3, 0 -> 2 -> 3
    return _frozen(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


def _cyclic_graph():
    return _frozen(4, [(0, 1), (0, 2), (1, 3), (2, 3), (3, 0)])


def _disconnected_graph():
    return _frozen(3, [(0, 1)])


# --- topological_sort_par ---


def test_topo_par_on_dag():
    graph = _test_dag()
    assert issubclass(CsmGraph, FrontierAlgorithms)
    assert graph.topological_sort_par() == [0, 1, 2, 3]


def test_topo_par_on_cyclic_graph():
    assert _cyclic_graph().topological_sort_par() is None


def test_topo_par_on_disconnected_graph():
    assert _disconnected_graph().topological_sort_par() == [0, 2, 1]


def test_topo_par_on_empty_graph():
    assert _frozen(0).topological_sort_par() == []


def test_topo_par_on_single_node_graph():
    assert _frozen(1).topological_sort_par() == [0]


def test_topo_par_self_loop_is_cycle():
    assert _frozen(2, [(0, 1), (1, 1)]).topological_sort_par() is None


def test_topo_par_sorts_each_level():
    graph = _frozen(5, [(4, 3), (4, 1), (3, 0), (1, 2)])
    assert graph.topological_sort_par() == [4, 1, 3, 0, 2]


# --- reachability and paths ---


@pytest.mark.parametrize(
    "start, stop, expected",
    [
        (0, 3, True),
        (0, 1, True),
        (3, 0, False),
        (1, 2, False),
        (1, 1, True),
        (0, 99, False),
        (99, 0, False),
    ],
)
def test_is_reachable_par(start, stop, expected):
    assert _test_dag().is_reachable_par(start, stop) is expected


@pytest.mark.parametrize(
    "start, stop, expected",
    [
        (0, 3, 3),
        (0, 1, 2),
        (3, 0, None),
        (2, 2, 1),
        (0, 99, None),
        (99, 0, None),
    ],
)
def test_shortest_path_len_par(start, stop, expected):
    assert _test_dag().shortest_path_len_par(start, stop) == expected


def test_shortest_path_par():
    graph = _test_dag()
    path = graph.shortest_path_par(0, 3)
    assert path in ([0, 1, 3], [0, 2, 3])
    assert graph.shortest_path_par(3, 0) is None
    assert graph.shortest_path_par(1, 1) == [1]
    assert graph.shortest_path_par(0, 99) is None
    assert graph.shortest_path_par(99, 0) is None


def test_pathfinding_on_disconnected_graph():
    graph = _disconnected_graph()
    assert graph.shortest_path_par(0, 1) == [0, 1]
    assert graph.shortest_path_par(0, 2) is None
    assert graph.is_reachable_par(1, 2) is False


def test_pathfinding_on_empty_graph():
    graph = _frozen(0)
    assert graph.shortest_path_par(0, 0) is None
    assert graph.shortest_path_len_par(0, 0) is None
    assert graph.is_reachable_par(0, 0) is False


def test_shortest_path_par_prefers_fewer_hops():
    # Long route 0->1->2->3->4 and shortcut 0->5->4.
    graph = _frozen(6, [(0, 1), (1, 2), (2, 3), (3, 4), (0, 5), (5, 4)])
    assert graph.shortest_path_par(0, 4) == [0, 5, 4]
    assert graph.shortest_path_len_par(0, 4) == 3


def test_shortest_path_par_through_cycle():
    graph = _cyclic_graph()
    assert graph.shortest_path_par(3, 2) == [3, 0, 2]
    assert graph.shortest_path_len_par(3, 2) == 3


def test_path_length_matches_path():
    graph = _frozen(7, [(0, 1), (1, 2), (2, 6), (0, 3), (3, 4), (4, 5), (5, 6)])
    path = graph.shortest_path_par(0, 6)
    assert path == [0, 1, 2, 6]
    assert graph.shortest_path_len_par(0, 6) == len(path)
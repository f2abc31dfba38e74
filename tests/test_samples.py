from nextgraph.samples import create_csm_graph


def test_sample_is_frozen_with_expected_size():
    graph = create_csm_graph()
    assert graph.is_frozen()
    assert graph.number_nodes() == 5
    assert graph.number_edges() == 5


def test_sample_node_payloads():
    graph = create_csm_graph()
    assert [graph.get_node(i) for i in range(5)] == ["A", "B", "C", "D", "E"]


def test_sample_edges_and_weights():
    graph = create_csm_graph()
    assert graph.get_edges(0) == [(1, 10), (2, 20)]
    assert graph.get_edges(3) == [(4, 50)]
    assert graph.get_edges(4) == []
    assert graph.contains_edge(1, 3)
    assert graph.contains_edge(2, 3)
    assert not graph.contains_edge(3, 1)


def test_sample_has_no_root_and_no_cycle():
    graph = create_csm_graph()
    assert not graph.contains_root_node()
    assert graph.get_root_index() is None
    assert not graph.has_cycle()
    assert graph.find_cycle() is None


def test_sample_calls_return_independent_graphs():
    first = create_csm_graph()
    second = create_csm_graph()
    assert first is not second
    assert first.get_edges(0) == second.get_edges(0)
    assert sorted(first.inbound_edges(3)) == [1, 2]
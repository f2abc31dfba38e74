"""Small ready-made graphs for experiments and tests."""

from __future__ import annotations

from .csm import CsmGraph
from .dynamic import DynamicGraph

__all__ = ["create_csm_graph"]


def create_csm_graph() -> CsmGraph[str, int]:
    """Return a frozen five-node DAG: A->B, A->C, B->D, C->D, D->E."""
    graph: DynamicGraph[str, int] = DynamicGraph()
    n0 = graph.add_node("A")
    n1 = graph.add_node("B")
    n2 = graph.add_node("C")
    n3 = graph.add_node("D")
    n4 = graph.add_node("E")

    graph.add_edge(n0, n1, 10)
    graph.add_edge(n0, n2, 20)
    graph.add_edge(n1, n3, 30)
    graph.add_edge(n2, n3, 40)
    graph.add_edge(n3, n4, 50)

    return graph.freeze()
# nextgraph

A directed graph library with two forms of graph:

- `DynamicGraph` (`nextgraph.dynamic`) is a mutable graph. You can add,
  update and remove nodes and edges. Parallel edges are allowed. When you
  remove a node, its slot is marked as removed. The indices of the other
  nodes do not change.
- `CsmGraph` (`nextgraph.csm`) is a frozen, read-only graph stored in
  compressed sparse rows. Its node indices have no gaps, and every adjacency
  list is sorted by target index. It runs the analysis algorithms.

`DynamicGraph.freeze()` turns a dynamic graph into a `CsmGraph`. It drops
removed nodes and gives the remaining nodes new indices in order. It
discards every edge that touches a removed node. The root is kept only if
its node is still present. `CsmGraph.unfreeze()` turns a frozen graph back
into a `DynamicGraph`.

## Installation

```
pip install .
```

## Example

```python
from nextgraph.dynamic import DynamicGraph
from nextgraph.errors import NodeNotFound

graph = DynamicGraph()
a = graph.add_node("A")
b = graph.add_node("B")
c = graph.add_node("C")
graph.add_edge(a, b, 10)
graph.add_edge(b, c, 20)

frozen = graph.freeze()
frozen.topological_sort()       # [0, 1, 2]
frozen.shortest_path(0, 2)      # [0, 1, 2]
frozen.shortest_path_len(0, 2)  # 3 (counts the nodes on the path)
frozen.find_cycle()             # None
list(frozen.outbound_edges(0))  # [1]
list(frozen.inbound_edges(2))   # [1]
frozen.get_edges(0)             # [(1, 10)]

try:
    frozen.outbound_edges(99)
except NodeNotFound as exc:
    print(exc)

editable = frozen.unfreeze()
editable.add_edge(2, 0, 30)
editable.freeze().find_cycle()  # [0, 1, 2, 0]
```

`nextgraph.samples.create_csm_graph()` returns a small frozen graph you can
try things on. It is a five-node DAG with the edges A->B, A->C, B->D, C->D
and D->E.

## DynamicGraph

- Construction:
  - `DynamicGraph()`
  - `DynamicGraph.with_capacity(num_nodes, num_edges_per_node)`. The
    arguments are only sizing hints.
  - `DynamicGraph.from_parts(nodes, edges, root_index)`. `nodes` is a list
    of payloads in which `None` marks a removed node. `edges` is a list of
    `(target, weight)` lists. A `ValueError` is raised if the two lists
    differ in length.
- `to_parts()` returns `(nodes, edges, root_index)`.
- Mutation:
  - `add_node`, `add_root_node`, `update_node`, `remove_node`, `add_edge`,
    `remove_edge` and `clear`.
  - `remove_edge` removes the first matching edge. The last edge of that
    node takes its place in the list.
- Inspection:
  - `contains_node`, `get_node`, `number_nodes`, `contains_edge`,
    `number_edges`, `get_edges`, `contains_root_node`, `get_root_node`,
    `get_root_index`, `root_index` and `is_frozen`.
  - `number_edges()` also counts edges that still point at removed nodes.
    Those edges are only dropped by `freeze()`.

## CsmGraph

- Inspection: the same methods as `DynamicGraph`.
- `outbound_edges(a)` returns an iterator over the successors of `a`.
- `inbound_edges(a)` returns an iterator over the predecessors of `a`.
- `contains_edge` scans short adjacency lists. It bisects lists of 64
  entries or more.

Analysis (from `nextgraph.algorithms.GraphAlgorithms`):

- `find_cycle()` returns one cycle as a closed path such as `[v, ..., v]`,
  or `None`. A self-loop on `n` gives `[n, n]`.
- `has_cycle()`
- `topological_sort()` uses Kahn's algorithm. It returns `None` when the
  graph has a cycle.
- `is_reachable`, `shortest_path_len` and `shortest_path` use breadth-first
  search. They ignore edge weights. Invalid indices give `None` or `False`.

Level-by-level versions (from `nextgraph.frontier.FrontierAlgorithms`):

- `topological_sort_par()`, `is_reachable_par()`, `shortest_path_len_par()`
  and `shortest_path_par()` expand one whole frontier per step.
- `topological_sort_par()` sorts each level by node index, so its result is
  deterministic.

## Building frozen graphs directly

`nextgraph.freezing` holds the conversion helpers:

- `freeze_graph(nodes, edges, root_index)`
- `calculate_offsets(degrees)`, which returns prefix sums starting at 0.
- `sort_adjacency_list(targets, weights)`, which uses a comparison sort for
  short lists and radix sort for lists of 128 entries or more.
- `radix_sort_adjacencies(targets, weights)`

## Errors

All errors derive from `nextgraph.errors.GraphError`. Two errors compare
equal when they are of the same kind and carry the same values.

- `NodeNotFound(index)`
- `EdgeCreationError(source, target)`
- `EdgeNotFoundError(source, target)`
- `GraphContainsCycle()` is defined for callers. No operation in the package
  raises it. The algorithms return `None` on a cycle instead.

## What it does not do

- The package has no command-line interface.
- It has no storage or file format. Graphs live in memory. `to_parts()` and
  `from_parts()` are the way to move their data in and out.
- The `*_par` methods run on a single thread. They process the graph level
  by level, but not concurrently.
- Shortest paths count edges and do not take weights into account.

## Running the tests

```
pip install .[test]
pytest
```
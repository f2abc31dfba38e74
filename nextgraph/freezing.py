"""Conversion of mutable adjacency lists into a frozen CSR graph."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate
from operator import itemgetter
from typing import Any, TypeVar

from .csm import CsmGraph, CsrAdjacency

__all__ = [
    "freeze_graph",
    "calculate_offsets",
    "sort_adjacency_list",
    "radix_sort_adjacencies",
]

N = TypeVar("N")
W = TypeVar("W")

# Adjacency lists at least this long are sorted with radix sort.
RADIX_SORT_THRESHOLD = 128

_RADIX_BITS = 8
_RADIX_MASK = (1 << _RADIX_BITS) - 1


def freeze_graph(
    nodes: Sequence[N | None],
    edges: Sequence[Sequence[tuple[int, W]]],
    root_index: int | None,
) -> CsmGraph[N, W]:
    """Build a CsmGraph from node slots, adjacency lists and a root index.

    ``None`` entries in ``nodes`` are removed nodes: they are dropped, the
    remaining nodes are re-indexed in order, and every edge touching a
    removed node is discarded. Adjacency lists in the result are sorted by
    target index. The root survives only if its node does.
    """
    if len(nodes) != len(edges):
        raise ValueError(
            "The number of node payloads must equal the number of adjacency lists."
        )

    remapping: list[int | None] = [None] * len(nodes)
    compacted: list[N] = []
    new_root: int | None = None
    for old_index, node in enumerate(nodes):
        if node is None:
            continue
        remapping[old_index] = len(compacted)
        if root_index == old_index:
            new_root = len(compacted)
        compacted.append(node)

    if not compacted:
        return CsmGraph()

    forward_lists: list[list[tuple[int, W]]] = [[] for _ in compacted]
    backward_lists: list[list[tuple[int, W]]] = [[] for _ in compacted]
    for old_source, edge_list in enumerate(edges):
        source = remapping[old_source]
        if source is None:
            continue
        for old_target, weight in edge_list:
            target = remapping[old_target]
            if target is None:
                continue
            forward_lists[source].append((target, weight))
            backward_lists[target].append((source, weight))

    return CsmGraph._from_csr(
        compacted,
        _build_csr(forward_lists),
        _build_csr(backward_lists),
        new_root,
    )


def _build_csr(adjacency: list[list[tuple[int, Any]]]) -> CsrAdjacency:
    offsets = calculate_offsets([len(entries) for entries in adjacency])
    targets: list[int] = []
    weights: list[Any] = []
    for entries in adjacency:
        sorted_targets, sorted_weights = sort_adjacency_list(
            [target for target, _ in entries],
            [weight for _, weight in entries],
        )
        targets.extend(sorted_targets)
        weights.extend(sorted_weights)
    return CsrAdjacency(offsets=offsets, targets=targets, weights=weights)


def calculate_offsets(degrees: Sequence[int]) -> list[int]:
    """Return the prefix sums of ``degrees``, starting with 0."""
    return list(accumulate(degrees, initial=0))


def sort_adjacency_list(
    targets: Sequence[int], weights: Sequence[W]
) -> tuple[list[int], list[W]]:
    """Return ``targets`` sorted ascending, with ``weights`` reordered to match.

    Short lists use a comparison sort; long lists use radix sort.
    """
    if len(targets) != len(weights):
        raise ValueError("targets and weights must have the same length")
    if len(targets) >= RADIX_SORT_THRESHOLD:
        return radix_sort_adjacencies(targets, weights)
    pairs = sorted(zip(targets, weights), key=itemgetter(0))
    return [t for t, _ in pairs], [w for _, w in pairs]


def radix_sort_adjacencies(
    targets: Sequence[int], weights: Sequence[W]
) -> tuple[list[int], list[W]]:
    """Sort non-negative ``targets`` with a stable byte-wise LSD radix sort.

    ``weights`` is reordered in lockstep. Returns new lists.
    """
    if len(targets) != len(weights):
        raise ValueError("targets and weights must have the same length")
    if len(targets) < 2:
        return list(targets), list(weights)
    if min(targets) < 0:
        raise ValueError("radix sort requires non-negative targets")

    passes = max(1, -(-max(targets).bit_length() // _RADIX_BITS))
    pairs = list(zip(targets, weights))
    for digit in range(passes):
        shift = digit * _RADIX_BITS
        buckets: list[list[tuple[int, W]]] = [[] for _ in range(_RADIX_MASK + 1)]
        for pair in pairs:
            buckets[(pair[0] >> shift) & _RADIX_MASK].append(pair)
        pairs = [pair for bucket in buckets for pair in bucket]
    return [t for t, _ in pairs], [w for _, w in pairs]
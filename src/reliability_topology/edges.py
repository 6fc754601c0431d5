"""Edge catalog construction.

Turns per-pair cost and reliability arrays into the list of candidate edges,
ordered by decreasing reliability.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reliability_topology.types import Edge, InputData

if TYPE_CHECKING:
    from collections.abc import Iterator


def edge_count(n: int) -> int:
    """Number of unordered node pairs, n(n-1)/2."""
    return n * (n - 1) // 2 if n > 1 else 0


def candidate_pairs(n: int) -> Iterator[tuple[int, int]]:
    """Yield every unordered node pair (a, b), a < b, in canonical order.

    The i-th pair yielded is the pair costs[i] and reliabilities[i] refer to.
    """
    for a in range(n):
        for b in range(a + 1, n):
            yield a, b


def build_edges(data: InputData) -> tuple[Edge, ...]:
    """Build the edge catalog for a fully-connected candidate network.

    Every node pair gets one Edge. The catalog is sorted by decreasing
    reliability; the sort is stable, so equal reliabilities keep canonical
    pair order.

    Args:
        data: Validated input data.

    Returns:
        Exactly n(n-1)/2 edges.
    """
    edges = [
        Edge(node_a=a, node_b=b, reliability=data.reliabilities[i], cost=data.costs[i])
        for i, (a, b) in enumerate(candidate_pairs(data.n_nodes))
    ]
    edges.sort(key=lambda e: e.reliability, reverse=True)
    return tuple(edges)

"""Lazy enumeration of edge subsets.

Every subset of the edge catalog is a candidate network. Subsets are produced
one at a time by an explicit include/exclude branching over the catalog: at
each edge the branch that includes it is explored before the branch that
leaves it out, so the first subset is the whole catalog and the last is empty.
Edges inside a subset always keep catalog order.
"""

from __future__ import annotations

import itertools
import math
from typing import TYPE_CHECKING

from reliability_topology.types import EnumerationMode

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from reliability_topology.types import Edge


def iter_combinations(
    edges: Sequence[Edge],
    n_nodes: int,
    mode: EnumerationMode = EnumerationMode.PRUNED,
    prefix: Sequence[bool] = (),
) -> Iterator[tuple[Edge, ...]]:
    """Yield edge subsets lazily, one per step.

    Each call starts a fresh enumeration.

    Args:
        edges: Edge catalog.
        n_nodes: Number of nodes the subsets must connect.
        mode: EXHAUSTIVE yields all 2^E subsets. PRUNED skips branches that
            can no longer reach n_nodes - 1 edges; every subset with at least
            n_nodes - 1 edges is still yielded exactly once. SPANNING yields
            only subsets of exactly n_nodes - 1 edges.
        prefix: Fixed include (True) / exclude (False) decisions for the
            leading edges. Only subsets consistent with them are yielded.
    """
    edges = tuple(edges)
    total = len(edges)
    if len(prefix) > total:
        msg = f"prefix has {len(prefix)} decisions for {total} edges"
        raise ValueError(msg)

    mode = EnumerationMode(mode)
    need = max(n_nodes - 1, 0)
    start = tuple(e for e, take in zip(edges, prefix) if take)

    stack: list[tuple[int, tuple[Edge, ...]]] = [(len(prefix), start)]
    while stack:
        index, active = stack.pop()
        remaining = total - index

        if mode != EnumerationMode.EXHAUSTIVE:
            if len(active) + remaining < need:
                continue
            if len(active) + remaining == need:
                # Only the all-remaining branch survives
                yield active + edges[index:]
                continue
        if mode == EnumerationMode.SPANNING:
            if len(active) > need:
                continue
            if len(active) == need:
                yield active
                continue

        if index == total:
            yield active
            continue

        # LIFO: push exclude first so include is explored first
        stack.append((index + 1, active))
        stack.append((index + 1, (*active, edges[index])))


def iter_bitmask_combinations(edges: Sequence[Edge]) -> Iterator[tuple[Edge, ...]]:
    """Yield all 2^E subsets by counting a bitmask down from 2^E - 1.

    Edge i is included when bit E-1-i is set, which reproduces the order of
    iter_combinations in EXHAUSTIVE mode without pruning support.
    """
    edges = tuple(edges)
    total = len(edges)
    for mask in range((1 << total) - 1, -1, -1):
        yield tuple(e for i, e in enumerate(edges) if mask >> (total - 1 - i) & 1)


def total_combinations(
    n_edges: int,
    n_nodes: int | None = None,
    mode: EnumerationMode = EnumerationMode.EXHAUSTIVE,
) -> int:
    """Size of the search space for a catalog of n_edges edges.

    2^E for EXHAUSTIVE and PRUNED (pruning only skips work, the search space
    is unchanged). C(E, n_nodes - 1) for SPANNING.
    """
    if EnumerationMode(mode) == EnumerationMode.SPANNING:
        if n_nodes is None:
            msg = "n_nodes is required for SPANNING mode"
            raise ValueError(msg)
        return math.comb(n_edges, max(n_nodes - 1, 0))
    return 2**n_edges


def partition_prefixes(n_edges: int, depth: int) -> list[tuple[bool, ...]]:
    """Split the search space on the leading include/exclude decisions.

    Returns 2^min(depth, n_edges) prefixes in enumeration order. The subsets
    consistent with different prefixes are disjoint and together cover every
    subset.
    """
    d = max(0, min(depth, n_edges))
    return list(itertools.product((True, False), repeat=d))

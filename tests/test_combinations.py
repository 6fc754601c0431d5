"""Tests for edge subset enumeration."""

from __future__ import annotations

import math

import pytest

from reliability_topology.combinations import (
    iter_bitmask_combinations,
    iter_combinations,
    partition_prefixes,
    total_combinations,
)
from reliability_topology.edges import build_edges
from reliability_topology.inputs import synthetic_input_data
from reliability_topology.types import Edge, EnumerationMode, InputData


def _catalog(n: int) -> tuple[Edge, ...]:
    return build_edges(synthetic_input_data(n))


def _keys(combinations: object) -> list[tuple[tuple[int, int], ...]]:
    return [tuple(e.nodes() for e in combo) for combo in combinations]  # type: ignore[attr-defined]


@pytest.fixture
def triangle() -> tuple[Edge, ...]:
    return build_edges(InputData(n_nodes=3, costs=(1, 2, 3), reliabilities=(0.9, 0.8, 0.7)))


class TestExhaustive:
    """Test full 2^E enumeration."""

    def test_triangle_order(self, triangle: tuple[Edge, ...]) -> None:
        """Include branch first: full catalog first, empty subset last."""
        combos = list(iter_combinations(triangle, 3, EnumerationMode.EXHAUSTIVE))
        a, b, c = triangle
        assert combos == [
            (a, b, c),
            (a, b),
            (a, c),
            (a,),
            (b, c),
            (b,),
            (c,),
            (),
        ]

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_yields_two_to_the_e_distinct(self, n: int) -> None:
        edges = _catalog(n)
        keys = _keys(iter_combinations(edges, n, EnumerationMode.EXHAUSTIVE))
        assert len(keys) == 2 ** len(edges)
        assert len(set(keys)) == len(keys)

    def test_subsets_keep_catalog_order(self) -> None:
        edges = _catalog(4)
        position = {e: i for i, e in enumerate(edges)}
        for combo in iter_combinations(edges, 4, EnumerationMode.EXHAUSTIVE):
            indices = [position[e] for e in combo]
            assert indices == sorted(indices)

    def test_empty_catalog_yields_empty_subset(self) -> None:
        assert list(iter_combinations((), 1, EnumerationMode.EXHAUSTIVE)) == [()]

    def test_restartable(self, triangle: tuple[Edge, ...]) -> None:
        first = list(iter_combinations(triangle, 3))
        second = list(iter_combinations(triangle, 3))
        assert first == second

    def test_lazy(self) -> None:
        """Drawing one subset from a large catalog is immediate."""
        edges = _catalog(10)  # 45 edges
        gen = iter_combinations(edges, 10, EnumerationMode.EXHAUSTIVE)
        assert next(gen) == edges


class TestPruned:
    """Test minimum-size pruning."""

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_keeps_every_subset_large_enough(self, n: int) -> None:
        edges = _catalog(n)
        full = _keys(iter_combinations(edges, n, EnumerationMode.EXHAUSTIVE))
        pruned = _keys(iter_combinations(edges, n, EnumerationMode.PRUNED))
        assert pruned == [k for k in full if len(k) >= n - 1]

    def test_triangle_drops_small_subsets(self, triangle: tuple[Edge, ...]) -> None:
        combos = list(iter_combinations(triangle, 3, EnumerationMode.PRUNED))
        assert len(combos) == 4
        assert all(len(c) >= 2 for c in combos)

    def test_keeps_oversized_subsets(self) -> None:
        edges = _catalog(4)
        sizes = {len(c) for c in iter_combinations(edges, 4, EnumerationMode.PRUNED)}
        assert sizes == {3, 4, 5, 6}

    def test_default_mode_is_pruned(self, triangle: tuple[Edge, ...]) -> None:
        assert list(iter_combinations(triangle, 3)) == list(
            iter_combinations(triangle, 3, EnumerationMode.PRUNED)
        )


class TestSpanning:
    """Test exact n-1 edge enumeration."""

    @pytest.mark.parametrize("n", [3, 4, 5])
    def test_only_n_minus_one_edges(self, n: int) -> None:
        edges = _catalog(n)
        full = _keys(iter_combinations(edges, n, EnumerationMode.EXHAUSTIVE))
        spanning = _keys(iter_combinations(edges, n, EnumerationMode.SPANNING))
        assert spanning == [k for k in full if len(k) == n - 1]
        assert len(spanning) == math.comb(len(edges), n - 1)


class TestBitmask:
    """Test the bitmask enumeration."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4])
    def test_matches_exhaustive_order(self, n: int) -> None:
        edges = _catalog(n)
        assert list(iter_bitmask_combinations(edges)) == list(
            iter_combinations(edges, n, EnumerationMode.EXHAUSTIVE)
        )


class TestPrefixes:
    """Test partitioning of the search space."""

    def test_depth_one(self) -> None:
        assert partition_prefixes(3, 1) == [(True,), (False,)]

    def test_depth_two_in_enumeration_order(self) -> None:
        assert partition_prefixes(3, 2) == [
            (True, True),
            (True, False),
            (False, True),
            (False, False),
        ]

    def test_depth_capped_by_edges(self) -> None:
        assert len(partition_prefixes(2, 5)) == 4

    def test_depth_zero_single_partition(self) -> None:
        assert partition_prefixes(3, 0) == [()]

    @pytest.mark.parametrize("mode", list(EnumerationMode))
    def test_partitions_concatenate_to_full_sequence(self, mode: EnumerationMode) -> None:
        edges = _catalog(4)
        expected = list(iter_combinations(edges, 4, mode))
        joined = [
            combo
            for prefix in partition_prefixes(len(edges), 2)
            for combo in iter_combinations(edges, 4, mode, prefix)
        ]
        assert joined == expected

    def test_prefix_fixes_leading_edges(self, triangle: tuple[Edge, ...]) -> None:
        a = triangle[0]
        combos = list(iter_combinations(triangle, 3, EnumerationMode.EXHAUSTIVE, (False,)))
        assert len(combos) == 4
        assert all(a not in c for c in combos)

    def test_prefix_too_long_raises(self, triangle: tuple[Edge, ...]) -> None:
        with pytest.raises(ValueError, match="prefix"):
            list(iter_combinations(triangle, 3, EnumerationMode.EXHAUSTIVE, (True,) * 4))


class TestTotalCombinations:
    """Test search space sizes."""

    def test_exhaustive(self) -> None:
        assert total_combinations(3) == 8

    def test_pruned_same_as_exhaustive(self) -> None:
        assert total_combinations(6, 4, EnumerationMode.PRUNED) == 64

    def test_spanning(self) -> None:
        assert total_combinations(6, 4, EnumerationMode.SPANNING) == 20

    def test_spanning_requires_nodes(self) -> None:
        with pytest.raises(ValueError, match="n_nodes"):
            total_combinations(6, mode=EnumerationMode.SPANNING)

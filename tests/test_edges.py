"""Tests for edge catalog construction."""

from __future__ import annotations

import pytest

from reliability_topology.edges import build_edges, candidate_pairs, edge_count
from reliability_topology.inputs import synthetic_input_data
from reliability_topology.types import InputData


class TestCandidatePairs:
    """Test canonical pair order."""

    def test_four_nodes(self) -> None:
        assert list(candidate_pairs(4)) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]

    def test_single_node_empty(self) -> None:
        assert list(candidate_pairs(1)) == []

    @pytest.mark.parametrize("n", [1, 2, 3, 5, 8])
    def test_count_matches_edge_count(self, n: int) -> None:
        assert len(list(candidate_pairs(n))) == edge_count(n) == n * (n - 1) // 2


class TestBuildEdges:
    """Test catalog contents and ordering."""

    def test_three_node_scenario(self) -> None:
        data = InputData(n_nodes=3, costs=(1, 2, 3), reliabilities=(0.9, 0.8, 0.7))
        edges = build_edges(data)
        assert [(e.node_a, e.node_b, e.reliability, e.cost) for e in edges] == [
            (0, 1, 0.9, 1.0),
            (0, 2, 0.8, 2.0),
            (1, 2, 0.7, 3.0),
        ]

    def test_sorted_by_decreasing_reliability(self) -> None:
        data = InputData(
            n_nodes=4,
            costs=(1, 2, 3, 4, 5, 6),
            reliabilities=(0.5, 0.95, 0.7, 0.99, 0.6, 0.8),
        )
        edges = build_edges(data)
        rels = [e.reliability for e in edges]
        assert rels == sorted(rels, reverse=True)
        assert edges[0].nodes() == (1, 2)
        assert edges[0].cost == 4.0

    def test_values_follow_their_pair(self) -> None:
        """Sorting moves whole edges; costs stay attached to their pair."""
        data = InputData(n_nodes=3, costs=(10, 20, 30), reliabilities=(0.1, 0.3, 0.2))
        by_pair = {e.nodes(): (e.cost, e.reliability) for e in build_edges(data)}
        assert by_pair == {(0, 1): (10.0, 0.1), (0, 2): (20.0, 0.3), (1, 2): (30.0, 0.2)}

    def test_ties_keep_canonical_order(self) -> None:
        data = InputData(n_nodes=3, costs=(1, 2, 3), reliabilities=(0.9, 0.9, 0.9))
        assert [e.nodes() for e in build_edges(data)] == [(0, 1), (0, 2), (1, 2)]

    def test_single_node_catalog_empty(self) -> None:
        assert build_edges(InputData(n_nodes=1, costs=(), reliabilities=())) == ()

    @pytest.mark.parametrize("n", [2, 4, 6])
    def test_catalog_size(self, n: int) -> None:
        edges = build_edges(synthetic_input_data(n))
        assert len(edges) == n * (n - 1) // 2
        assert len({e.nodes() for e in edges}) == len(edges)

"""Reliability Topology: most reliable network topology under cost and reliability constraints.

Given a fully-connected candidate network where every link has a cost and an
operational probability, searches the subsets of links for the connected
topology with the highest reliability (product of link reliabilities),
optionally within a cost budget or stopping at the first topology that
reaches a reliability goal. The search is exhaustive, so it suits small
networks (a handful of nodes).

Quick start::

    from reliability_topology import InputData, Requirements, maximize_reliability

    data = InputData(n_nodes=3, costs=(1, 2, 3), reliabilities=(0.9, 0.8, 0.7))
    output = maximize_reliability(data, Requirements(cost_constraint=5))
    print(output.reliability, output.combination)
"""

from reliability_topology.combinations import (
    iter_bitmask_combinations,
    iter_combinations,
    partition_prefixes,
    total_combinations,
)
from reliability_topology.edges import build_edges, candidate_pairs, edge_count
from reliability_topology.graphs import Graph, is_valid_combination, touches_all_nodes
from reliability_topology.inputs import (
    format_input_text,
    parse_input_text,
    read_input_data,
    synthetic_input_data,
    write_input_data,
)
from reliability_topology.optimizer import maximize_reliability, search
from reliability_topology.parallel import merge_results, parallel_search
from reliability_topology.report import format_matrix, format_output
from reliability_topology.scoring import combination_cost, combination_reliability
from reliability_topology.types import (
    INFEASIBLE,
    Edge,
    EnumerationMode,
    InputData,
    InvalidInputError,
    Output,
    Requirements,
    SearchConfig,
    SearchResult,
)

__all__ = [
    # Core
    "maximize_reliability",
    "search",
    # Edge catalog
    "build_edges",
    "candidate_pairs",
    "edge_count",
    # Enumeration
    "iter_combinations",
    "iter_bitmask_combinations",
    "total_combinations",
    "partition_prefixes",
    # Validity and scoring
    "Graph",
    "is_valid_combination",
    "touches_all_nodes",
    "combination_cost",
    "combination_reliability",
    # Parallel
    "parallel_search",
    "merge_results",
    # Input and reporting
    "parse_input_text",
    "read_input_data",
    "format_input_text",
    "write_input_data",
    "synthetic_input_data",
    "format_matrix",
    "format_output",
    # Types
    "INFEASIBLE",
    "Edge",
    "EnumerationMode",
    "InputData",
    "InvalidInputError",
    "Output",
    "Requirements",
    "SearchConfig",
    "SearchResult",
]

__version__ = "0.1.0"

"""Reliability-maximizing search over edge combinations.

For a fully-connected candidate network the optimizer examines edge subsets
one at a time, keeps the feasible ones that respect the cost budget and
returns the most reliable. With a reliability goal the search stops at the
first feasible combination that reaches it instead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from reliability_topology.combinations import iter_combinations, total_combinations
from reliability_topology.edges import build_edges
from reliability_topology.graphs import is_valid_combination
from reliability_topology.scoring import combination_cost, combination_reliability
from reliability_topology.types import (
    INFEASIBLE,
    Output,
    Requirements,
    SearchConfig,
    SearchResult,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from reliability_topology.types import Edge, InputData

logger = logging.getLogger(__name__)

STOP_CHECK_INTERVAL = 1024


class StopFlag(Protocol):
    """Anything with an Event-like is_set, local or shared across processes."""

    def is_set(self) -> bool: ...


def search(
    n_nodes: int,
    requirements: Requirements,
    combinations: Iterable[tuple[Edge, ...]],
    stop: StopFlag | None = None,
    check_every: int = STOP_CHECK_INTERVAL,
) -> SearchResult:
    """Fold a stream of combinations into the best feasible one.

    Combinations that are not valid topologies, or that exceed the cost
    budget, are skipped. A combination reaching the reliability goal ends the
    search immediately. Otherwise a combination replaces the current best
    only when strictly more reliable, so ties keep the earliest.

    Args:
        n_nodes: Number of nodes every combination must connect.
        requirements: Reliability goal and cost budget.
        combinations: Candidate subsets in enumeration order.
        stop: Optional flag polled every check_every combinations, starting
            before the first. Once set, the search returns what it has with
            stopped=True.
        check_every: Polling interval for stop.

    Returns:
        SearchResult with reliability INFEASIBLE when nothing qualified.
    """
    best = SearchResult()
    examined = 0

    for combination in combinations:
        if stop is not None and examined % check_every == 0 and stop.is_set():
            logger.debug("Search stopped after %d combinations", examined)
            return SearchResult(
                reliability=best.reliability,
                cost=best.cost,
                combination=best.combination,
                examined=examined,
                stopped=True,
            )
        examined += 1

        if not is_valid_combination(n_nodes, combination):
            continue

        cost = combination_cost(combination)
        if requirements.has_budget and cost > requirements.cost_constraint:
            continue

        reliability = combination_reliability(combination)
        if requirements.has_goal and reliability >= requirements.reliability_goal:
            logger.debug(
                "Goal %.6g met by %d edges (reliability=%.6g, cost=%g) after %d combinations",
                requirements.reliability_goal,
                len(combination),
                reliability,
                cost,
                examined,
            )
            return SearchResult(
                reliability=reliability,
                cost=cost,
                combination=tuple(combination),
                examined=examined,
                goal_met=True,
            )

        if reliability > best.reliability:
            logger.debug("New optimum: reliability=%.6g cost=%g", reliability, cost)
            best = SearchResult(
                reliability=reliability,
                cost=cost,
                combination=tuple(combination),
            )

    return SearchResult(
        reliability=best.reliability,
        cost=best.cost,
        combination=best.combination,
        examined=examined,
    )


def maximize_reliability(
    data: InputData,
    requirements: Requirements | None = None,
    config: SearchConfig | None = None,
) -> Output:
    """Find the most reliable network topology under the given requirements.

    Args:
        data: Node count with per-pair costs and reliabilities.
        requirements: Optional reliability goal and cost budget. Defaults to
            unconstrained.
        config: Enumeration mode and parallelism. Defaults to a pruned,
            single-process search.

    Returns:
        Output holding the winning combination, or reliability INFEASIBLE
        when no combination satisfies the requirements.
    """
    requirements = requirements or Requirements()
    config = config or SearchConfig()

    edges = build_edges(data)
    n = data.n_nodes
    count = total_combinations(len(edges), n, config.mode)
    logger.info(
        "Searching %d combinations of %d edges for %d nodes (mode=%s, goal=%g, budget=%g)",
        count,
        len(edges),
        n,
        config.mode,
        requirements.reliability_goal,
        requirements.cost_constraint,
    )

    if config.workers > 1:
        from reliability_topology.parallel import parallel_search

        result = parallel_search(edges, n, requirements, config)
    else:
        result = search(n, requirements, iter_combinations(edges, n, config.mode))

    if result.reliability == INFEASIBLE:
        logger.info("No feasible combination after %d examined", result.examined)
    else:
        logger.info(
            "Best combination: %d edges, reliability=%.6g, cost=%g (%d examined)",
            len(result.combination),
            result.reliability,
            result.cost,
            result.examined,
        )

    return Output(
        reliability=result.reliability,
        cost=result.cost,
        combination=result.combination,
        combination_count=count,
        edges=edges,
        examined=result.examined,
    )

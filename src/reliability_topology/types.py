"""Core types for reliability-maximizing topology search.

Enums, frozen dataclasses, configuration objects and the input error used
across the library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

INFEASIBLE = -1.0
"""Reliability reported when no combination satisfies the requirements."""


class InvalidInputError(ValueError):
    """Input data is malformed or inconsistent with its node count."""


class EnumerationMode(StrEnum):
    """Which edge subsets the enumerator produces."""

    EXHAUSTIVE = "exhaustive"
    PRUNED = "pruned"
    SPANNING = "spanning"


@dataclass(frozen=True)
class Edge:
    """Candidate link between two nodes.

    reliability is the probability the link is operational, cost is the
    price of building it.
    """

    node_a: int
    node_b: int
    reliability: float
    cost: float

    def __post_init__(self) -> None:
        if self.node_a == self.node_b:
            msg = f"Self-loops not allowed: {self.node_a}"
            raise ValueError(msg)

    def nodes(self) -> tuple[int, int]:
        """Return the endpoint pair."""
        return (self.node_a, self.node_b)


@dataclass(frozen=True)
class InputData:
    """Per-pair costs and reliabilities for a fully-connected candidate network.

    costs[i] and reliabilities[i] belong to the i-th node pair in canonical
    order: (0, 1), (0, 2), ..., (0, n-1), (1, 2), ...

    Args:
        n_nodes: Number of nodes, >= 1.
        costs: n(n-1)/2 positive link costs.
        reliabilities: n(n-1)/2 link reliabilities in (0, 1].
    """

    n_nodes: int
    costs: tuple[float, ...]
    reliabilities: tuple[float, ...]

    def __post_init__(self) -> None:
        # Accept any sequence, store tuples
        object.__setattr__(self, "costs", tuple(float(c) for c in self.costs))
        object.__setattr__(self, "reliabilities", tuple(float(r) for r in self.reliabilities))

        if self.n_nodes < 1:
            msg = f"n_nodes must be >= 1, got {self.n_nodes}"
            raise InvalidInputError(msg)
        expected = self.n_edges
        if len(self.costs) != expected:
            msg = f"Expected {expected} costs for n_nodes={self.n_nodes}, got {len(self.costs)}"
            raise InvalidInputError(msg)
        if len(self.reliabilities) != expected:
            msg = (
                f"Expected {expected} reliabilities for n_nodes={self.n_nodes}, "
                f"got {len(self.reliabilities)}"
            )
            raise InvalidInputError(msg)
        for i, c in enumerate(self.costs):
            if not c > 0.0:
                msg = f"Cost c_{i}={c} must be positive"
                raise InvalidInputError(msg)
        for i, r in enumerate(self.reliabilities):
            if not 0.0 < r <= 1.0:
                msg = f"Reliability r_{i}={r} outside (0, 1]"
                raise InvalidInputError(msg)

    @property
    def n_edges(self) -> int:
        """Number of candidate edges, n(n-1)/2."""
        return self.n_nodes * (self.n_nodes - 1) // 2


@dataclass(frozen=True)
class Requirements:
    """Optional search constraints.

    A value of 0 (or None) means the constraint is unset.

    Args:
        reliability_goal: Stop at the first feasible combination whose
            reliability reaches this value. A goal no combination can reach
            (e.g. above 1) leaves the search exhaustive.
        cost_constraint: Skip combinations whose total cost exceeds this budget.
    """

    reliability_goal: float = 0.0
    cost_constraint: float = 0.0

    def __post_init__(self) -> None:
        goal = 0.0 if self.reliability_goal is None else float(self.reliability_goal)
        budget = 0.0 if self.cost_constraint is None else float(self.cost_constraint)
        object.__setattr__(self, "reliability_goal", goal)
        object.__setattr__(self, "cost_constraint", budget)

        if goal < 0.0:
            msg = f"reliability_goal must be >= 0, got {goal}"
            raise ValueError(msg)
        if budget < 0.0:
            msg = f"cost_constraint must be >= 0, got {budget}"
            raise ValueError(msg)

    @property
    def has_goal(self) -> bool:
        return self.reliability_goal > 0.0

    @property
    def has_budget(self) -> bool:
        return self.cost_constraint > 0.0


@dataclass
class SearchConfig:
    """Configuration for the combination search.

    Args:
        mode: Subset enumeration mode. PRUNED skips only branches that can
            never reach n-1 edges; SPANNING restricts the search to exactly
            n-1 edges and changes the reported combination count.
        workers: Number of worker processes. 1 searches in-process.
        split_depth: Number of leading edges whose include/exclude branches
            are split into independent partitions for parallel search.
    """

    mode: EnumerationMode = EnumerationMode.PRUNED
    workers: int = 1
    split_depth: int = 1

    def __post_init__(self) -> None:
        self.mode = EnumerationMode(self.mode)
        if self.workers < 1:
            msg = f"workers must be >= 1, got {self.workers}"
            raise ValueError(msg)
        if self.split_depth < 0:
            msg = f"split_depth must be >= 0, got {self.split_depth}"
            raise ValueError(msg)


@dataclass(frozen=True)
class SearchResult:
    """Best combination found over one stream of candidate subsets.

    stopped is set when the stream was abandoned on request before it ran
    out, in which case the result covers only what was examined.
    """

    reliability: float = INFEASIBLE
    cost: float = 0.0
    combination: tuple[Edge, ...] = ()
    examined: int = 0
    goal_met: bool = False
    stopped: bool = False


@dataclass(frozen=True)
class Output:
    """Result of one optimization run.

    combination_count is the number of subsets the search space holds for the
    enumeration mode (2^E unless SPANNING), independent of pruning and early
    exit. examined is how many subsets were actually drawn.
    """

    reliability: float
    cost: float
    combination: tuple[Edge, ...]
    combination_count: int
    edges: tuple[Edge, ...] = ()
    examined: int = 0

    @property
    def is_feasible(self) -> bool:
        """False when no combination satisfied the requirements."""
        return self.reliability != INFEASIBLE

    @property
    def n_selected(self) -> int:
        return len(self.combination)

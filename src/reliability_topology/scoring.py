"""Cost and reliability scores for a combination of edges."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from reliability_topology.types import Edge


def combination_cost(combination: Iterable[Edge]) -> float:
    """Total cost of the selected edges. 0.0 for an empty combination."""
    return math.fsum(edge.cost for edge in combination)


def combination_reliability(combination: Iterable[Edge]) -> float:
    """Product of the selected edges' reliabilities.

    Links fail independently, so the network survives with the product of
    their probabilities. 1.0 for an empty combination.
    """
    return float(math.prod(edge.reliability for edge in combination))

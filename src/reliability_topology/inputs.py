"""Input data source: text format, files and synthetic data.

The text format has three lines::

    N
    c_0 c_1 ... c_{E-1}
    r_0 r_1 ... r_{E-1}

where E = N(N-1)/2 and the i-th cost and reliability belong to the i-th node
pair in canonical order (0-1, 0-2, ..., 1-2, ...).
"""

from __future__ import annotations

import logging
from pathlib import Path

from reliability_topology.edges import edge_count
from reliability_topology.types import InputData, InvalidInputError

logger = logging.getLogger(__name__)


def _parse_values(line: str, name: str) -> list[float]:
    values: list[float] = []
    for i, token in enumerate(line.split()):
        try:
            value = float(token)
        except ValueError:
            msg = f"{name} value at index {i} ('{token}') is not a number"
            raise InvalidInputError(msg) from None
        if not value > 0.0:
            msg = f"{name} value at index {i} ('{token}') must be positive"
            raise InvalidInputError(msg)
        values.append(value)
    return values


def parse_input_text(text: str) -> InputData:
    """Parse the three-line input format.

    Raises:
        InvalidInputError: If a line is missing, a value is not a positive
            number, or the value counts do not match N.
    """
    lines = text.strip().splitlines()
    if not lines or not lines[0].strip():
        msg = "Missing node count N on line 1"
        raise InvalidInputError(msg)
    lines += [""] * (3 - len(lines))

    first = lines[0].strip()
    try:
        n = int(first)
    except ValueError:
        msg = f"Node count N ('{first}') is not an integer"
        raise InvalidInputError(msg) from None
    if n <= 0:
        msg = f"Node count N must be greater than zero, got {n}"
        raise InvalidInputError(msg)

    expected = edge_count(n)
    costs = _parse_values(lines[1], "Cost")
    reliabilities = _parse_values(lines[2], "Reliability")
    if len(costs) != expected:
        msg = f"Expected {expected} costs for N={n}, got {len(costs)}"
        raise InvalidInputError(msg)
    if len(reliabilities) != expected:
        msg = f"Expected {expected} reliabilities for N={n}, got {len(reliabilities)}"
        raise InvalidInputError(msg)

    return InputData(n_nodes=n, costs=tuple(costs), reliabilities=tuple(reliabilities))


def read_input_data(path: str | Path) -> InputData:
    """Read and parse an input file."""
    path = Path(path)
    logger.debug("Reading input data from %s", path)
    return parse_input_text(path.read_text(encoding="utf-8"))


def _format_number(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else repr(float(x))


def format_input_text(data: InputData) -> str:
    """Render input data in the three-line text format."""
    return "\n".join(
        (
            str(data.n_nodes),
            " ".join(_format_number(c) for c in data.costs),
            " ".join(_format_number(r) for r in data.reliabilities),
        )
    )


def write_input_data(path: str | Path, data: InputData) -> None:
    """Write input data to a file in the three-line text format."""
    path = Path(path)
    path.write_text(format_input_text(data) + "\n", encoding="utf-8")
    logger.debug("Wrote input data for %d nodes to %s", data.n_nodes, path)


def synthetic_input_data(n: int) -> InputData:
    """Deterministic test input for n nodes.

    Costs are 1, 2, ..., E. Reliabilities start at 0.901 and continue as
    0.9 + i/10000 for i = 2..E, rounded to four places, so later pairs are
    slightly more reliable and more expensive.
    """
    if n < 1:
        msg = f"n must be >= 1, got {n}"
        raise ValueError(msg)
    e = edge_count(n)
    costs = [float(i) for i in range(1, e + 1)]
    reliabilities = [0.901] + [min(1.0, round(0.9 + i / 10000, 4)) for i in range(2, e + 1)]
    return InputData(n_nodes=n, costs=tuple(costs), reliabilities=tuple(reliabilities[:e]))

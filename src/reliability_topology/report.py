"""Text rendering of optimization results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reliability_topology.graphs import Graph

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reliability_topology.types import Edge, Output


def format_matrix(n: int, combination: Sequence[Edge]) -> str:
    """Render the node adjacency matrix of a combination.

    Selected links are marked X, absent ones o. The matrix is symmetric::

           0 1 2
           - - -
        0| o X X
        1| X o o
        2| X o o
    """
    matrix = Graph.from_edges(n, combination).adjacency_matrix(n)
    width = len(str(max(n - 1, 0)))
    pad = " " * (width + 1)

    lines = [
        pad + "".join(f" {x:>{width}}" for x in range(n)),
        pad + "".join(f" {'-':>{width}}" for _ in range(n)),
    ]
    for y in range(n):
        cells = "".join(f" {'X' if matrix[y][x] else 'o':>{width}}" for x in range(n))
        lines.append(f"{y:>{width}}|{cells}")
    return "\n".join(lines)


def format_edge(edge: Edge) -> str:
    return f"{edge.node_a}-{edge.node_b} (reliability={edge.reliability:g}, cost={edge.cost:g})"


def format_output(output: Output, elapsed: float | None = None) -> str:
    """Summarize an optimization result as plain text.

    Args:
        output: Result of maximize_reliability.
        elapsed: Wall-clock search time in seconds, if measured.
    """
    lines: list[str] = []
    if elapsed is not None:
        lines.append(f"Execution time: {elapsed:.4f}s")
    lines.append(f"Edges: {len(output.edges)}")
    lines.append(f"Combinations: {output.combination_count}")
    lines.append(f"Examined: {output.examined}")

    if not output.is_feasible:
        lines.append("Reliability: no feasible solution")
        return "\n".join(lines)

    lines.append(f"Reliability: {output.reliability:.6g}")
    lines.append(f"Cost: {output.cost:g}")
    lines.append(f"Selected edges ({output.n_selected}):")
    lines.extend(f"  {format_edge(edge)}" for edge in output.combination)
    return "\n".join(lines)

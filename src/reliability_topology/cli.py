"""Command-line interface.

Usage::

    reliability-topology solve input.txt --goal 0.9 --budget 40 --matrix
    reliability-topology generate 5 -o input.txt
    reliability-topology sweep 3 6 --budget 20
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import TYPE_CHECKING

from reliability_topology.inputs import (
    format_input_text,
    read_input_data,
    synthetic_input_data,
    write_input_data,
)
from reliability_topology.optimizer import maximize_reliability
from reliability_topology.report import format_matrix, format_output
from reliability_topology.types import EnumerationMode, Requirements, SearchConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reliability_topology.types import InputData

logger = logging.getLogger(__name__)


def _add_search_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--goal",
        type=float,
        default=0.0,
        help="Reliability goal; stop at the first combination reaching it (default: unset)",
    )
    parser.add_argument(
        "--budget",
        type=float,
        default=0.0,
        help="Cost constraint; skip combinations costing more (default: unset)",
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in EnumerationMode],
        default=EnumerationMode.PRUNED.value,
        help="Subset enumeration mode (default: pruned)",
    )
    parser.add_argument("--workers", type=int, default=1, help="Worker processes (default: 1)")
    parser.add_argument(
        "--split-depth",
        type=int,
        default=1,
        help="Leading edges split into parallel partitions (default: 1)",
    )
    parser.add_argument("--matrix", action="store_true", help="Print the node adjacency matrix")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reliability-topology",
        description="Find the most reliable network topology under cost and reliability constraints.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Optimize the network described in an input file")
    solve.add_argument("input", help="Input file: N, costs line, reliabilities line")
    _add_search_arguments(solve)

    generate = sub.add_parser("generate", help="Write synthetic input data for N nodes")
    generate.add_argument("n", type=int, help="Number of nodes")
    generate.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")

    sweep = sub.add_parser("sweep", help="Optimize synthetic networks for a range of N")
    sweep.add_argument("min_n", type=int, help="Smallest node count")
    sweep.add_argument("max_n", type=int, help="Largest node count (inclusive)")
    _add_search_arguments(sweep)

    return parser


def _run(data: InputData, requirements: Requirements, config: SearchConfig, matrix: bool) -> None:
    start = time.perf_counter()
    output = maximize_reliability(data, requirements, config)
    elapsed = time.perf_counter() - start

    print(format_output(output, elapsed))
    if matrix and output.is_feasible:
        print("Matrix:")
        print(format_matrix(data.n_nodes, output.combination))


def _search_settings(args: argparse.Namespace) -> tuple[Requirements, SearchConfig]:
    requirements = Requirements(reliability_goal=args.goal, cost_constraint=args.budget)
    config = SearchConfig(
        mode=EnumerationMode(args.mode),
        workers=args.workers,
        split_depth=args.split_depth,
    )
    return requirements, config


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        if args.command == "generate":
            data = synthetic_input_data(args.n)
            if args.output is None:
                print(format_input_text(data))
            else:
                write_input_data(args.output, data)
            return 0

        requirements, config = _search_settings(args)

        if args.command == "solve":
            _run(read_input_data(args.input), requirements, config, args.matrix)
            return 0

        if args.min_n > args.max_n:
            msg = f"min_n ({args.min_n}) must not exceed max_n ({args.max_n})"
            raise ValueError(msg)
        for n in range(args.min_n, args.max_n + 1):
            print("-" * 50)
            print(f"N: {n}")
            _run(synthetic_input_data(n), requirements, config, args.matrix)
        return 0
    except (ValueError, OSError) as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

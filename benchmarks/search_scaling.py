"""Benchmark the search across node counts and enumeration modes.

The search space doubles with every candidate edge, so this stops at n=6
(15 edges, 32768 subsets).
"""

from __future__ import annotations

import time

from reliability_topology import (
    EnumerationMode,
    SearchConfig,
    maximize_reliability,
    synthetic_input_data,
)


def benchmark_search(n: int, mode: EnumerationMode, workers: int = 1) -> tuple[float, int]:
    """Time one unconstrained search.

    Returns elapsed milliseconds and the number of subsets examined.
    """
    data = synthetic_input_data(n)
    config = SearchConfig(mode=mode, workers=workers, split_depth=3 if workers > 1 else 1)

    start = time.perf_counter()
    out = maximize_reliability(data, config=config)
    elapsed = time.perf_counter() - start

    return elapsed * 1e3, out.examined


def main() -> None:
    print("Topology Search Benchmarks")
    print("=" * 72)
    print(f"{'n':>3}  {'mode':>10}  {'workers':>7}  {'examined':>10}  {'time (ms)':>12}")
    print("-" * 72)

    for n in range(3, 7):
        for mode in EnumerationMode:
            ms, examined = benchmark_search(n, mode)
            print(f"{n:3d}  {mode.value:>10}  {1:7d}  {examined:10d}  {ms:12.1f}")
        ms, examined = benchmark_search(n, EnumerationMode.PRUNED, workers=4)
        print(f"{n:3d}  {'pruned':>10}  {4:7d}  {examined:10d}  {ms:12.1f}")


if __name__ == "__main__":
    main()

"""Basic usage of the topology optimizer.

Builds a small candidate network, finds the most reliable topology with and
without a cost budget, and prints the chosen links as a matrix.
"""

from reliability_topology import (
    InputData,
    Requirements,
    format_matrix,
    format_output,
    maximize_reliability,
)


def main() -> None:
    # Pairs in canonical order: 0-1, 0-2, 0-3, 1-2, 1-3, 2-3
    data = InputData(
        n_nodes=4,
        costs=(4, 1, 3, 2, 5, 1),
        reliabilities=(0.95, 0.6, 0.85, 0.7, 0.99, 0.8),
    )

    print("Unconstrained")
    print("=" * 50)
    best = maximize_reliability(data)
    print(format_output(best))
    print(format_matrix(data.n_nodes, best.combination))

    for budget in (10.0, 6.0, 3.0):
        print(f"\nBudget {budget:g}")
        print("-" * 50)
        out = maximize_reliability(data, Requirements(cost_constraint=budget))
        print(format_output(out))

    # Stop at the first topology that is good enough
    print("\nGoal 0.6")
    print("-" * 50)
    out = maximize_reliability(data, Requirements(reliability_goal=0.6))
    print(format_output(out))


if __name__ == "__main__":
    main()

"""Trade-off between cost budget and achievable reliability.

Sweeps the cost constraint over a synthetic network and prints the best
reliability reachable at each budget.
"""

from reliability_topology import Requirements, maximize_reliability, synthetic_input_data


def main() -> None:
    data = synthetic_input_data(5)

    print(f"{'budget':>8}  {'reliability':>12}  {'cost':>6}  edges")
    print("-" * 50)
    for budget in range(4, 31, 2):
        out = maximize_reliability(data, Requirements(cost_constraint=budget))
        if not out.is_feasible:
            print(f"{budget:8d}  {'infeasible':>12}")
            continue
        links = " ".join(f"{e.node_a}-{e.node_b}" for e in out.combination)
        print(f"{budget:8d}  {out.reliability:12.6f}  {out.cost:6g}  {links}")


if __name__ == "__main__":
    main()

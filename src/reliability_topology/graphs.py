"""Lightweight graph representation and topology validity checks.

Provides an undirected graph over integer node indices with breadth-first
reachability, used to decide whether a combination of edges forms a feasible
network: at least n-1 links, every node touched, every node reachable from
node 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from reliability_topology.types import Edge


class Graph:
    """Undirected, unweighted graph over integer nodes.

    Edges are undirected pairs; parallel edges collapse into one.
    """

    __slots__ = ("_adjacency", "_nodes")

    def __init__(self) -> None:
        self._nodes: set[int] = set()
        self._adjacency: dict[int, set[int]] = {}

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> Graph:
        """Build a graph with nodes 0..n-1 and the given links."""
        g = cls()
        for node in range(n):
            g.add_node(node)
        for edge in edges:
            g.add_edge(edge.node_a, edge.node_b)
        return g

    @property
    def edges(self) -> set[tuple[int, int]]:
        """All edges as (u, v) pairs where u < v."""
        seen: set[tuple[int, int]] = set()
        for u, neighbors in self._adjacency.items():
            for v in neighbors:
                seen.add((min(u, v), max(u, v)))
        return seen

    @property
    def n_nodes(self) -> int:
        return len(self._nodes)

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def add_node(self, node: int) -> None:
        """Add a node to the graph."""
        self._nodes.add(node)
        if node not in self._adjacency:
            self._adjacency[node] = set()

    def add_edge(self, u: int, v: int) -> None:
        """Add an undirected edge between u and v."""
        if u == v:
            msg = f"Self-loops not allowed: {u}"
            raise ValueError(msg)
        self.add_node(u)
        self.add_node(v)
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)

    def reachable(self, start: int) -> set[int]:
        """Return every node reachable from start, start included.

        Expands a frontier seeded with start until no new node is absorbed.
        """
        if start not in self._adjacency:
            msg = f"Node {start} not in graph"
            raise KeyError(msg)

        connected = {start}
        frontier = [start]
        while frontier and len(connected) < len(self._nodes):
            next_frontier: list[int] = []
            for node in frontier:
                for neighbor in self._adjacency[node]:
                    if neighbor not in connected:
                        connected.add(neighbor)
                        next_frontier.append(neighbor)
            frontier = next_frontier
        return connected

    def is_connected(self, start: int | None = None) -> bool:
        """Check whether every node is reachable from start.

        Args:
            start: Seed node. Defaults to the smallest node.
        """
        if len(self._nodes) <= 1:
            return True
        seed = min(self._nodes) if start is None else start
        return len(self.reachable(seed)) == len(self._nodes)

    def adjacency_matrix(self, n: int | None = None) -> list[list[bool]]:
        """Symmetric n x n adjacency matrix over nodes 0..n-1.

        Args:
            n: Matrix size. Defaults to one past the largest node.
        """
        size = (max(self._nodes) + 1 if self._nodes else 0) if n is None else n
        matrix = [[False] * size for _ in range(size)]
        for u, v in self.edges:
            if u < size and v < size:
                matrix[u][v] = True
                matrix[v][u] = True
        return matrix

    def __repr__(self) -> str:
        return f"Graph(nodes={self.n_nodes}, edges={self.n_edges})"


def touches_all_nodes(n: int, combination: Sequence[Edge]) -> bool:
    """Check that every node 0..n-1 is an endpoint of some edge."""
    touched: set[int] = set()
    for edge in combination:
        touched.add(edge.node_a)
        touched.add(edge.node_b)
    return all(node in touched for node in range(n))


def is_valid_combination(n: int, combination: Sequence[Edge]) -> bool:
    """Check whether a combination of edges is a feasible network topology.

    A combination is feasible when it has at least n-1 edges, touches all n
    nodes and connects every node to node 0. A lone node has no edge to
    touch it, so n = 1 is never feasible.

    Args:
        n: Number of nodes in the network.
        combination: Selected edges.
    """
    if len(combination) < n - 1:
        return False
    if not touches_all_nodes(n, combination):
        return False
    return Graph.from_edges(n, combination).is_connected(start=0)

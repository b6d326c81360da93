"""Random directed graph generator that rejects edges closing a cycle."""

from __future__ import annotations

import argparse

from algokit.randgen import RandomGenerator

MAX_VERTEX = 10
EDGE_COUNT = 4


def _follows_back(edges: list[tuple[int, int]], last: int, visited: set[int], v: int) -> bool:
    """Walk from ``v`` along the most recent out-edges; False if a vertex repeats."""
    while v not in visited:
        visited.add(v)
        for source, target in reversed(edges[: last + 1]):
            if source == v:
                v = target
                break
        else:
            return True
    return False


def generate_dag(
    rng: RandomGenerator | None = None, max_vertex: int = MAX_VERTEX, edge_count: int = EDGE_COUNT
) -> list[tuple[int, int]]:
    """``edge_count`` random edges on vertices ``1 .. max_vertex``, grouped by source.

    A new edge is kept only when following the most recent out-edge from its
    source never returns to a vertex already seen; self-loops are never kept.
    """
    if edge_count < 0:
        raise ValueError("edge_count must be non-negative")
    if max_vertex < 1 or (edge_count > 0 and max_vertex < 2):
        raise ValueError("max_vertex too small")
    if rng is None:
        rng = RandomGenerator()
    edges: list[tuple[int, int]] = []
    while len(edges) < edge_count:
        edge = (rng.rand(max_vertex) + 1, rng.rand(max_vertex) + 1)
        candidate = edges + [edge]
        if _follows_back(candidate, len(edges), set(), edge[0]):
            edges = candidate
    return [edge for v in range(1, max_vertex + 1) for edge in edges if edge[0] == v]


def format_graph(vertex_count: int, edges: list[tuple[int, int]]) -> str:
    """Header ``n m`` followed by one ``x y`` line per edge."""
    lines = [f"{vertex_count} {len(edges)}"]
    lines.extend(f"{x} {y}" for x, y in edges)
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    """Print one random graph."""
    parser = argparse.ArgumentParser(description="Generate a random directed graph.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--vertices", type=int, default=MAX_VERTEX)
    parser.add_argument("--edges", type=int, default=EDGE_COUNT)
    args = parser.parse_args(argv)
    edges = generate_dag(RandomGenerator(args.seed), args.vertices, args.edges)
    print(format_graph(args.vertices, edges), end="")
    return 0
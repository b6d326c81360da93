"""2-SAT solving through strongly connected components."""

from __future__ import annotations

import argparse
import sys

from algokit.graphs import kosaraju_scc


class TwoSat:
    """A 2-SAT instance over ``n`` boolean variables."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(2 * n)]

    def _literal(self, var: int, negate: bool) -> int:
        if not 0 <= var < self.n:
            raise IndexError(f"variable {var} out of range")
        return 2 * var ^ int(negate)

    def add_disjunction(self, a: int, negate_a: bool, b: int, negate_b: bool) -> None:
        """Require ``(a xor negate_a) or (b xor negate_b)``."""
        lit_a = self._literal(a, negate_a)
        lit_b = self._literal(b, negate_b)
        self._adj[lit_a ^ 1].append(lit_b)
        self._adj[lit_b ^ 1].append(lit_a)

    def solve(self) -> list[bool] | None:
        """A satisfying assignment, or ``None`` when there is none."""
        comp = kosaraju_scc(2 * self.n, self._adj)
        assignment: list[bool] = []
        for i in range(self.n):
            if comp[2 * i] == comp[2 * i + 1]:
                return None
            assignment.append(comp[2 * i] > comp[2 * i + 1])
        return assignment


def main(argv: list[str] | None = None) -> int:
    """Read ``clauses variables`` then signed 1-based literal pairs; print a solution or -1."""
    parser = argparse.ArgumentParser(description="Solve a 2-SAT instance.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tokens = iter(args.input.read().split())
    clauses, variables = int(next(tokens)), int(next(tokens))
    sat = TwoSat(variables)
    for _ in range(clauses):
        a, b = int(next(tokens)), int(next(tokens))
        sat.add_disjunction(abs(a) - 1, a < 0, abs(b) - 1, b < 0)
    result = sat.solve()
    if result is None:
        print(-1)
    else:
        print(" ".join(str(int(value)) for value in result))
    return 0
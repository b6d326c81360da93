"""Lowest common ancestors and ancestor tables on rooted trees."""

from __future__ import annotations

from collections.abc import Sequence


class LCA:
    """Binary-lifting LCA over an undirected tree rooted at ``root``."""

    def __init__(self, n: int, adj: Sequence[Sequence[int]], root: int = 0) -> None:
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        levels = max(1, n.bit_length())
        self._levels = levels
        tin = [-1] * n
        tout = [-1] * n
        depth = [0] * n
        up = [[root] * n for _ in range(levels)]
        timer = 0
        tin[root] = timer
        timer += 1
        work = [(root, iter(adj[root]))]
        while work:
            v, neighbours = work[-1]
            for u in neighbours:
                if tin[u] == -1:
                    tin[u] = timer
                    timer += 1
                    depth[u] = depth[v] + 1
                    up[0][u] = v
                    for k in range(1, levels):
                        up[k][u] = up[k - 1][up[k - 1][u]]
                    work.append((u, iter(adj[u])))
                    break
            else:
                tout[v] = timer
                timer += 1
                work.pop()
        self._tin = tin
        self._tout = tout
        self._depth = depth
        self._up = up

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._tin) or self._tin[u] == -1:
            raise ValueError(f"node {u} is not in the tree")

    def is_ancestor(self, u: int, v: int) -> bool:
        """True when ``u`` is ``v`` or lies on the path from ``v`` to the root."""
        self._check(u)
        self._check(v)
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for k in range(self._levels - 1, -1, -1):
            if not self.is_ancestor(self._up[k][u], v):
                u = self._up[k][u]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges between ``u`` and ``v``."""
        return self._depth[u] + self._depth[v] - 2 * self._depth[self.lca(u, v)]


class AncestorTable:
    """k-th ancestors and minimum cost on the path to the root (node 0)."""

    def __init__(self, adj: Sequence[Sequence[int]], costs: Sequence[int]) -> None:
        n = len(adj)
        if n == 0:
            raise ValueError("tree must have at least one node")
        if len(costs) != n:
            raise ValueError("costs must have one entry per node")
        levels = n.bit_length() + 1
        self._levels = levels
        parent = [0] * n
        seen = [False] * n
        seen[0] = True
        stack = [0]
        while stack:
            v = stack.pop()
            for u in adj[v]:
                if not seen[u]:
                    seen[u] = True
                    parent[u] = v
                    stack.append(u)
        up = [parent]
        best = [list(costs)]
        for _ in range(1, levels):
            prev_up, prev_best = up[-1], best[-1]
            up.append([prev_up[prev_up[u]] for u in range(n)])
            best.append([min(prev_best[u], prev_best[prev_up[u]]) for u in range(n)])
        self._up = up
        self._best = best

    def kth_ancestor(self, node: int, k: int) -> int:
        """The ancestor ``k`` steps above ``node``; the root once ``k`` passes it."""
        if k < 0:
            raise ValueError("k must be non-negative")
        if k >= 1 << self._levels:
            return 0
        for i in range(self._levels):
            if k >> i & 1:
                node = self._up[i][node]
        return node

    def min_cost(self, node: int) -> int:
        """Smallest cost on the path from ``node`` up to the root, both included."""
        return self._best[-1][node]
"""Disjoint-set union with union by size."""

from __future__ import annotations


class DisjointSet:
    """Partition of ``0 .. n`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._roots = set(range(n + 1))

    def _check(self, u: int) -> None:
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")

    def find(self, u: int) -> int:
        """Representative of the set holding ``u``."""
        self._check(u)
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Join the sets of ``u`` and ``v``; False if they were already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._size[u] < self._size[v]:
            u, v = v, u
        self._size[u] += self._size[v]
        self._roots.discard(v)
        self._parent[v] = u
        return True

    def size(self, u: int) -> int:
        """Number of elements in the set holding ``u``."""
        return self._size[self.find(u)]

    def roots(self) -> set[int]:
        """Representatives of every set."""
        return set(self._roots)
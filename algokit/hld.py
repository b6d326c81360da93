"""Heavy-light decomposition with path-maximum queries."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.segment_tree import SegmentTree


class HeavyLightDecomposition:
    """Point updates and path maxima on a tree rooted at node 0.

    Path maxima start from 0, so a path of negative values reports 0.
    """

    def __init__(self, adj: Sequence[Sequence[int]], values: Sequence[int]) -> None:
        n = len(adj)
        if n == 0:
            raise ValueError("tree must have at least one node")
        if len(values) != n:
            raise ValueError("values must have one entry per node")
        parent = [-1] * n
        depth = [0] * n
        order: list[int] = []
        seen = [False] * n
        seen[0] = True
        stack = [0]
        while stack:
            v = stack.pop()
            order.append(v)
            for c in adj[v]:
                if not seen[c]:
                    seen[c] = True
                    parent[c] = v
                    depth[c] = depth[v] + 1
                    stack.append(c)

        size = [1] * n
        for v in reversed(order):
            if parent[v] != -1:
                size[parent[v]] += size[v]
        heavy = [-1] * n
        for v in order:
            best = 0
            for c in adj[v]:
                if c != parent[v] and size[c] > best:
                    best = size[c]
                    heavy[v] = c

        head = [0] * n
        pos = [0] * n
        current = 0
        chains = [0]
        while chains:
            h = chains.pop()
            v = h
            while v != -1:
                head[v] = h
                pos[v] = current
                current += 1
                for c in reversed(adj[v]):
                    if c != parent[v] and c != heavy[v]:
                        chains.append(c)
                v = heavy[v]

        self._parent = parent
        self._depth = depth
        self._head = head
        self._pos = pos
        self.values = list(values)
        ordered = [0] * n
        for v in range(n):
            ordered[pos[v]] = values[v]
        self._tree = SegmentTree(ordered, max, 0)

    def lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        head, depth, parent = self._head, self._depth, self._parent
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u, v = v, u
            v = parent[head[v]]
        return u if depth[u] < depth[v] else v

    def query_path(self, u: int, v: int) -> int:
        """Maximum value on the path between ``u`` and ``v`` (at least 0)."""
        head, depth, parent, pos = self._head, self._depth, self._parent, self._pos
        result = 0
        while head[u] != head[v]:
            if depth[head[u]] > depth[head[v]]:
                u, v = v, u
            result = max(result, self._tree.query(pos[head[v]], pos[v]))
            v = parent[head[v]]
        if depth[u] > depth[v]:
            u, v = v, u
        return max(result, self._tree.query(pos[u], pos[v]))

    def update(self, node: int, value: int) -> None:
        """Set the value of ``node``."""
        self.values[node] = value
        self._tree.update(self._pos[node], value)


def main(argv: list[str] | None = None) -> int:
    """Read a tree and queries (``1 node value`` or ``2 u v``, 1-based) and answer them."""
    parser = argparse.ArgumentParser(description="Path maximum queries on a tree.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tokens = iter(args.input.read().split())
    n, q = int(next(tokens)), int(next(tokens))
    values = [int(next(tokens)) for _ in range(n)]
    adj: list[list[int]] = [[] for _ in range(n)]
    for _ in range(n - 1):
        x, y = int(next(tokens)) - 1, int(next(tokens)) - 1
        adj[x].append(y)
        adj[y].append(x)
    hld = HeavyLightDecomposition(adj, values)
    out: list[str] = []
    for _ in range(q):
        kind, a, b = int(next(tokens)), int(next(tokens)), int(next(tokens))
        if kind == 1:
            hld.update(a - 1, b)
        else:
            out.append(str(hld.query_path(a - 1, b - 1)))
    if out:
        sys.stdout.write("\n".join(out) + "\n")
    return 0
"""Segment tree of forward and backward string hashes for palindrome checks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from algokit.hashing import MOD1, MOD2, HashTables


@dataclass(frozen=True)
class HashNode:
    """Hash pairs of a segment read forwards and backwards, with its length."""

    size: int = 0
    forward: tuple[int, int] = (0, 0)
    backward: tuple[int, int] = (0, 0)


_EMPTY = HashNode()


def _leaf(char: str) -> HashNode:
    if len(char) != 1:
        raise ValueError("expected a single character")
    code = ord(char)
    return HashNode(1, (code, code), (code, code))


class HashSegmentTree:
    """Point updates and substring hash queries over a string; indices are 0-based."""

    def __init__(self, text: str) -> None:
        if not text:
            raise ValueError("text must be non-empty")
        self._n = len(text)
        self._tables = HashTables(self._n + 1)
        self._tree = [_EMPTY] * (4 * self._n)
        self._build(text, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _merge(self, a: HashNode, b: HashNode) -> HashNode:
        p0, p1 = self._tables.powers
        forward = (
            (a.forward[0] * p0[b.size] + b.forward[0]) % MOD1,
            (a.forward[1] * p1[b.size] + b.forward[1]) % MOD2,
        )
        backward = (
            (b.backward[0] * p0[a.size] + a.backward[0]) % MOD1,
            (b.backward[1] * p1[a.size] + a.backward[1]) % MOD2,
        )
        return HashNode(a.size + b.size, forward, backward)

    def _build(self, text: str, node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = _leaf(text[lo])
            return
        mid = (lo + hi) // 2
        self._build(text, 2 * node, lo, mid)
        self._build(text, 2 * node + 1, mid + 1, hi)
        self._tree[node] = self._merge(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, char: str) -> None:
        """Replace the character at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(1, 0, self._n - 1, index, _leaf(char))

    def _update(self, node: int, lo: int, hi: int, index: int, leaf: HashNode) -> None:
        if lo == hi:
            self._tree[node] = leaf
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, leaf)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, leaf)
        self._tree[node] = self._merge(self._tree[2 * node], self._tree[2 * node + 1])

    def query(self, left: int, right: int) -> HashNode:
        """Hashes of the substring ``left .. right`` inclusive."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> HashNode:
        if lo > right or hi < left:
            return _EMPTY
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._merge(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def is_palindrome(self, left: int, right: int) -> bool:
        """True when ``left .. right`` reads the same both ways."""
        node = self.query(left, right)
        return node.forward == node.backward

    def _clamp(self, left: int, right: int) -> tuple[int, int]:
        return max(left, 0), min(right, self._n - 1)

    def find_first(
        self, left: int, right: int, value: Any, predicate: Callable[[HashNode, Any], bool]
    ) -> int | None:
        """Leftmost index in ``left .. right`` reached by descending while
        ``predicate(node, value)`` holds; ``None`` if it fails on the range."""
        left, right = self._clamp(left, right)
        if left > right:
            return None
        return self._find_first(1, 0, self._n - 1, left, right, value, predicate)

    def _descend_first(self, node, lo, hi, value, predicate) -> int:
        while lo != hi:
            mid = (lo + hi) // 2
            if predicate(self._tree[2 * node], value):
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        return lo

    def _find_first(self, node, lo, hi, left, right, value, predicate) -> int | None:
        if left <= lo and hi <= right:
            if not predicate(self._tree[node], value):
                return None
            return self._descend_first(node, lo, hi, value, predicate)
        mid = (lo + hi) // 2
        result = None
        if left <= mid:
            result = self._find_first(2 * node, lo, mid, left, right, value, predicate)
        if result is None and right > mid:
            result = self._find_first(2 * node + 1, mid + 1, hi, left, right, value, predicate)
        return result

    def find_last(
        self, left: int, right: int, value: Any, predicate: Callable[[HashNode, Any], bool]
    ) -> int | None:
        """Rightmost counterpart of :meth:`find_first`."""
        left, right = self._clamp(left, right)
        if left > right:
            return None
        return self._find_last(1, 0, self._n - 1, left, right, value, predicate)

    def _descend_last(self, node, lo, hi, value, predicate) -> int:
        while lo != hi:
            mid = (lo + hi) // 2
            if predicate(self._tree[2 * node + 1], value):
                node, lo = 2 * node + 1, mid + 1
            else:
                node, hi = 2 * node, mid
        return lo

    def _find_last(self, node, lo, hi, left, right, value, predicate) -> int | None:
        if left <= lo and hi <= right:
            if not predicate(self._tree[node], value):
                return None
            return self._descend_last(node, lo, hi, value, predicate)
        mid = (lo + hi) // 2
        result = None
        if right > mid:
            result = self._find_last(2 * node + 1, mid + 1, hi, left, right, value, predicate)
        if result is None and left <= mid:
            result = self._find_last(2 * node, lo, mid, left, right, value, predicate)
        return result


def main(argv: list[str] | None = None) -> int:
    """Read 1-based ``l r`` pairs and print YES when that substring is a palindrome."""
    parser = argparse.ArgumentParser(description="Palindrome queries on a string.")
    parser.add_argument("--text", default="aabaa")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tree = HashSegmentTree(args.text)
    tokens = args.input.read().split()
    for left, right in zip(tokens[::2], tokens[1::2]):
        print("YES" if tree.is_palindrome(int(left) - 1, int(right) - 1) else "NO")
    return 0
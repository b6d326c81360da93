"""Segment tree with range addition and range sums."""

from __future__ import annotations

from collections.abc import Callable, Iterable


class LazySumSegmentTree:
    """Range-add / range-sum tree over 0-based indices."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must be non-empty")
        self._n = len(items)
        self._sum = [0] * (4 * self._n)
        self._pending = [0] * (4 * self._n)
        self._build(items, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, items: list[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._sum[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * node, lo, mid)
        self._build(items, 2 * node + 1, mid + 1, hi)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _apply(self, node: int, length: int, delta: int) -> None:
        self._sum[node] += delta * length
        self._pending[node] += delta

    def _push(self, node: int, lo: int, hi: int) -> None:
        delta = self._pending[node]
        if delta and lo < hi:
            mid = (lo + hi) // 2
            self._apply(2 * node, mid - lo + 1, delta)
            self._apply(2 * node + 1, hi - mid, delta)
            self._pending[node] = 0

    def update(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element of ``left .. right``."""
        self._update(1, 0, self._n - 1, left, right, value)

    def _update(self, node, lo, hi, left, right, value) -> None:
        if lo > right or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, hi - lo + 1, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def query(self, left: int, right: int) -> int:
        """Sum of ``left .. right``; 0 for an empty range."""
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node, lo, hi, left, right) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def _clamp(self, left: int, right: int) -> tuple[int, int]:
        return max(left, 0), min(right, self._n - 1)

    def find_first(
        self, left: int, right: int, value: int, predicate: Callable[[int, int], bool]
    ) -> int | None:
        """Leftmost index in ``left .. right`` reached by descending while
        ``predicate(node_sum, value)`` holds; ``None`` if it fails."""
        left, right = self._clamp(left, right)
        if left > right:
            return None
        return self._find_first(1, 0, self._n - 1, left, right, value, predicate)

    def _descend_first(self, node, lo, hi, value, predicate) -> int:
        while lo != hi:
            self._push(node, lo, hi)
            mid = (lo + hi) // 2
            if predicate(self._sum[2 * node], value):
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        return lo

    def _find_first(self, node, lo, hi, left, right, value, predicate) -> int | None:
        if left <= lo and hi <= right:
            if not predicate(self._sum[node], value):
                return None
            return self._descend_first(node, lo, hi, value, predicate)
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        result = None
        if left <= mid:
            result = self._find_first(2 * node, lo, mid, left, right, value, predicate)
        if result is None and right > mid:
            result = self._find_first(2 * node + 1, mid + 1, hi, left, right, value, predicate)
        return result

    def find_last(
        self, left: int, right: int, value: int, predicate: Callable[[int, int], bool]
    ) -> int | None:
        """Rightmost counterpart of :meth:`find_first`."""
        left, right = self._clamp(left, right)
        if left > right:
            return None
        return self._find_last(1, 0, self._n - 1, left, right, value, predicate)

    def _descend_last(self, node, lo, hi, value, predicate) -> int:
        while lo != hi:
            self._push(node, lo, hi)
            mid = (lo + hi) // 2
            if predicate(self._sum[2 * node + 1], value):
                node, lo = 2 * node + 1, mid + 1
            else:
                node, hi = 2 * node, mid
        return lo

    def _find_last(self, node, lo, hi, left, right, value, predicate) -> int | None:
        if left <= lo and hi <= right:
            if not predicate(self._sum[node], value):
                return None
            return self._descend_last(node, lo, hi, value, predicate)
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        result = None
        if right > mid:
            result = self._find_last(2 * node + 1, mid + 1, hi, left, right, value, predicate)
        if result is None and left <= mid:
            result = self._find_last(2 * node, lo, mid, left, right, value, predicate)
        return result
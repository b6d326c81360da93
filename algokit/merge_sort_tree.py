"""Merge-sort tree: every node keeps the sorted values of its segment."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Iterable
from heapq import merge


class MergeSortTree:
    """Segment tree whose nodes hold sorted tuples of their elements.

    ``query(left, right)`` counts positions in ``left .. right`` whose value
    exceeds ``right``; with a "next occurrence" array this is the number of
    distinct values in the range.
    """

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must be non-empty")
        self._n = len(items)
        self._tree: list[tuple[int, ...]] = [()] * (4 * self._n)
        self._build(items, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _merge_children(self, node: int) -> None:
        self._tree[node] = tuple(merge(self._tree[2 * node], self._tree[2 * node + 1]))

    def _build(self, items: list[int], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = (items[lo],)
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * node, lo, mid)
        self._build(items, 2 * node + 1, mid + 1, hi)
        self._merge_children(node)

    def update(self, index: int, value: int) -> None:
        """Replace the element at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(1, 0, self._n - 1, index, value)

    def _update(self, node: int, lo: int, hi: int, index: int, value: int) -> None:
        if lo == hi:
            self._tree[node] = (value,)
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, value)
        self._merge_children(node)

    def query(self, left: int, right: int) -> int:
        """Count positions in ``left .. right`` holding a value greater than ``right``."""
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            values = self._tree[node]
            return len(values) - bisect_right(values, right)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def _clamp(self, left: int, right: int) -> tuple[int, int]:
        return max(left, 0), min(right, self._n - 1)

    def find_first(
        self,
        left: int,
        right: int,
        value: int,
        predicate: Callable[[tuple[int, ...], int], bool],
    ) -> int | None:
        """Leftmost index in ``left .. right`` reached by descending while
        ``predicate(sorted_values, value)`` holds; ``None`` if it fails."""
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
        self,
        left: int,
        right: int,
        value: int,
        predicate: Callable[[tuple[int, ...], int], bool],
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
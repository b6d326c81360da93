"""Point-update segment trees with range queries and predicate searches."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

NEG_INF = -(10**18)


class SegmentTree:
    """Segment tree over an associative ``combine`` with neutral ``identity``.

    Defaults to range maximum. Indices are 0-based.
    """

    def __init__(
        self,
        values: Iterable[Any],
        combine: Callable[[Any, Any], Any] = max,
        identity: Any = NEG_INF,
    ) -> None:
        items = list(values)
        if not items:
            raise ValueError("values must be non-empty")
        self._n = len(items)
        self._combine = combine
        self._identity = identity
        self._tree = [identity] * (4 * self._n)
        self._build(items, 1, 0, self._n - 1)

    def __len__(self) -> int:
        return self._n

    def _build(self, items: list, node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self._tree[node] = items[lo]
            return
        mid = (lo + hi) // 2
        self._build(items, 2 * node, lo, mid)
        self._build(items, 2 * node + 1, mid + 1, hi)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, index: int, value: Any) -> None:
        """Replace the element at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(1, 0, self._n - 1, index, value)

    def _update(self, node: int, lo: int, hi: int, index: int, value: Any) -> None:
        if lo == hi:
            self._tree[node] = value
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, value)
        self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])

    def query(self, left: int, right: int) -> Any:
        """Combined value of ``left .. right``; ``identity`` when the range is empty."""
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> Any:
        if lo > right or hi < left:
            return self._identity
        if left <= lo and hi <= right:
            return self._tree[node]
        mid = (lo + hi) // 2
        return self._combine(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def _clamp(self, left: int, right: int) -> tuple[int, int]:
        return max(left, 0), min(right, self._n - 1)

    def find_first(
        self, left: int, right: int, value: Any, predicate: Callable[[Any, Any], bool]
    ) -> int | None:
        """Leftmost index in ``left .. right`` reached by descending while
        ``predicate(aggregate, value)`` holds; ``None`` if it fails."""
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
        self, left: int, right: int, value: Any, predicate: Callable[[Any, Any], bool]
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


class CompactMaxTree:
    """Range-maximum tree over ``n`` slots that all start at 0."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        size = 1
        while size < n:
            size *= 2
        self._n = n
        self._size = size
        self._tree = [0] * (2 * size)

    def update(self, index: int, value: int) -> None:
        """Set slot ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of range")
        self._update(0, self._size - 1, 0, index, value)

    def _update(self, lo: int, hi: int, p: int, index: int, value: int) -> None:
        if lo == hi:
            self._tree[p] = value
            return
        mid = (lo + hi) >> 1
        if mid >= index:
            self._update(lo, mid, 2 * p + 1, index, value)
        else:
            self._update(mid + 1, hi, 2 * p + 2, index, value)
        self._tree[p] = max(self._tree[2 * p + 1], self._tree[2 * p + 2])

    def query(self, left: int, right: int) -> int:
        """Maximum over ``left .. right``; 0 for an empty range."""
        return self._query(0, self._size - 1, 0, left, right)

    def _query(self, lo: int, hi: int, p: int, left: int, right: int) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._tree[p]
        mid = (lo + hi) >> 1
        return max(
            self._query(lo, mid, 2 * p + 1, left, right),
            self._query(mid + 1, hi, 2 * p + 2, left, right),
        )
"""Fenwick (binary indexed) trees: 1-D sums, an order-statistics multiset, and 2-D sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class FenwickTree:
    """Prefix sums over positions ``0 .. size-1``.

    The capacity is the smallest power of two greater than ``n``, so every
    position in ``[0, n]`` is usable.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        size = 1
        while size <= n:
            size <<= 1
        self._tree = [0] * size

    @property
    def size(self) -> int:
        """Number of usable positions."""
        return len(self._tree)

    def update(self, pos: int, value: int) -> None:
        """Add ``value`` at position ``pos``."""
        if not 0 <= pos < len(self._tree):
            raise IndexError(f"position {pos} out of range")
        i = pos + 1
        while i <= len(self._tree):
            self._tree[i - 1] += value
            i += i & -i

    def prefix_sum(self, pos: int) -> int:
        """Sum of positions ``0 .. pos``; zero when ``pos`` is negative."""
        if pos >= len(self._tree):
            raise IndexError(f"position {pos} out of range")
        total = 0
        i = pos + 1
        while i > 0:
            total += self._tree[i - 1]
            i -= i & -i
        return total

    def range_sum(self, start: int, end: int) -> int:
        """Sum of positions ``start .. end`` inclusive."""
        return self.prefix_sum(end) - self.prefix_sum(start - 1)

    def lower_bound(self, value: int) -> int:
        """Smallest position whose prefix sum reaches ``value`` (non-negative entries)."""
        pos = 0
        step = len(self._tree) >> 1
        while step:
            candidate = self._tree[pos + step - 1]
            if candidate < value:
                value -= candidate
                pos += step
            step >>= 1
        return pos


class FenwickMultiset:
    """A multiset of integers in ``[0, n]`` with rank and order-statistic queries."""

    def __init__(self, n: int) -> None:
        self.limit = n
        self._counts = FenwickTree(n)
        self._size = 0

    def _check(self, value: int) -> None:
        if not 0 <= value <= self.limit:
            raise IndexError(f"value {value} outside [0, {self.limit}]")

    def add(self, value: int) -> None:
        """Insert one copy of ``value``."""
        self._check(value)
        self._counts.update(value, 1)
        self._size += 1

    def remove(self, value: int) -> None:
        """Remove one copy of ``value``; raise ValueError if absent."""
        self._check(value)
        if self.count(value) == 0:
            raise ValueError(f"{value} is not in the multiset")
        self._counts.update(value, -1)
        self._size -= 1

    def count(self, value: int) -> int:
        """Number of copies of ``value``."""
        if not 0 <= value <= self.limit:
            return 0
        return self._counts.range_sum(value, value)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> int:
        """The ``index``-th smallest element (0-based)."""
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("multiset index out of range")
        return self._counts.lower_bound(index + 1)

    def count_less(self, value: int) -> int:
        """Number of elements strictly less than ``value``."""
        if value <= 0:
            return 0
        return self._counts.prefix_sum(min(value - 1, self.limit))

    def lower_bound(self, value: int) -> int:
        """Index of the last element less than ``value``, or -1 if there is none."""
        return self.count_less(value) - 1

    def count_less_or_equal(self, value: int) -> int:
        """Number of elements less than or equal to ``value``."""
        return self.count_less(value) + self.count(value)


class FenwickTree2D:
    """2-D prefix sums over a matrix; coordinates are 1-based."""

    def __init__(self, matrix: Iterable[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows or not rows[0]:
            raise ValueError("matrix must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("matrix rows must have equal length")
        self.rows = len(rows)
        self.cols = width
        self._tree = [[0] * (width + 1) for _ in range(self.rows + 1)]
        for i, row in enumerate(rows, 1):
            for j, value in enumerate(row, 1):
                self.update(i, j, value)

    def update(self, x: int, y: int, value: int) -> None:
        """Add ``value`` at cell ``(x, y)``."""
        if not (1 <= x <= self.rows and 1 <= y <= self.cols):
            raise IndexError(f"cell ({x}, {y}) out of range")
        i = x
        while i <= self.rows:
            row = self._tree[i]
            j = y
            while j <= self.cols:
                row[j] += value
                j += j & -j
            i += i & -i

    def prefix_sum(self, x: int, y: int) -> int:
        """Sum of the rectangle from ``(1, 1)`` to ``(x, y)``."""
        if x > self.rows or y > self.cols:
            raise IndexError(f"cell ({x}, {y}) out of range")
        total = 0
        i = x
        while i > 0:
            row = self._tree[i]
            j = y
            while j > 0:
                total += row[j]
                j -= j & -j
            i -= i & -i
        return total

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle with corners ``(x1, y1)`` and ``(x2, y2)``."""
        return (
            self.prefix_sum(x2, y2)
            - self.prefix_sum(x1 - 1, y2)
            - self.prefix_sum(x2, y1 - 1)
            + self.prefix_sum(x1 - 1, y1 - 1)
        )
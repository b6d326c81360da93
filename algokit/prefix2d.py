"""Static 2-D prefix sums with 1-based rectangle queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class PrefixSum2D:
    """Constant-time rectangle sums over a fixed matrix."""

    def __init__(self, matrix: Iterable[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows or not rows[0]:
            raise ValueError("matrix must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("matrix rows must have equal length")
        self.rows = len(rows)
        self.cols = width
        table = [[0] * (width + 1)]
        for row in rows:
            above = table[-1]
            running = 0
            current = [0]
            for j, value in enumerate(row, 1):
                running += value
                current.append(above[j] + running)
            table.append(current)
        self._table = table

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle with 1-based corners ``(x1, y1)`` and ``(x2, y2)``."""
        if not (1 <= x1 <= self.rows and 1 <= x2 <= self.rows):
            raise IndexError("row out of range")
        if not (1 <= y1 <= self.cols and 1 <= y2 <= self.cols):
            raise IndexError("column out of range")
        f = self._table
        return f[x2][y2] - f[x2][y1 - 1] - f[x1 - 1][y2] + f[x1 - 1][y1 - 1]
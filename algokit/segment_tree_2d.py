"""Static 2-D range-maximum segment tree (a segment tree of segment trees)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_FILL = float("-inf")


class SegmentTree2D:
    """Maximum over sub-rectangles of a fixed matrix; indices are 0-based."""

    def __init__(self, matrix: Iterable[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows or not rows[0]:
            raise ValueError("matrix must be non-empty")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("matrix rows must have equal length")
        self.rows = len(rows)
        self.cols = width
        self._tree: list[list] = [[] for _ in range(4 * self.rows)]
        self._build_rows(rows, 1, 0, self.rows - 1)

    def _build_cols(self, seg: list, row: list, node: int, lo: int, hi: int) -> None:
        if lo == hi:
            seg[node] = row[lo]
            return
        mid = (lo + hi) // 2
        self._build_cols(seg, row, 2 * node, lo, mid)
        self._build_cols(seg, row, 2 * node + 1, mid + 1, hi)
        seg[node] = max(seg[2 * node], seg[2 * node + 1])

    def _build_rows(self, rows: list[list], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            seg = [_FILL] * (4 * self.cols)
            self._build_cols(seg, rows[lo], 1, 0, self.cols - 1)
            self._tree[node] = seg
            return
        mid = (lo + hi) // 2
        self._build_rows(rows, 2 * node, lo, mid)
        self._build_rows(rows, 2 * node + 1, mid + 1, hi)
        self._tree[node] = [max(a, b) for a, b in zip(self._tree[2 * node], self._tree[2 * node + 1])]

    def _query_cols(self, seg: list, node: int, lo: int, hi: int, y1: int, y2: int):
        if lo > y2 or hi < y1:
            return None
        if y1 <= lo and hi <= y2:
            return seg[node]
        mid = (lo + hi) // 2
        left = self._query_cols(seg, 2 * node, lo, mid, y1, y2)
        right = self._query_cols(seg, 2 * node + 1, mid + 1, hi, y1, y2)
        if left is None:
            return right
        if right is None:
            return left
        return max(left, right)

    def _query_rows(self, node: int, lo: int, hi: int, x1: int, y1: int, x2: int, y2: int):
        if lo > x2 or hi < x1:
            return None
        if x1 <= lo and hi <= x2:
            return self._query_cols(self._tree[node], 1, 0, self.cols - 1, y1, y2)
        mid = (lo + hi) // 2
        left = self._query_rows(2 * node, lo, mid, x1, y1, x2, y2)
        right = self._query_rows(2 * node + 1, mid + 1, hi, x1, y1, x2, y2)
        if left is None:
            return right
        if right is None:
            return left
        return max(left, right)

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Maximum of rows ``x1 .. x2`` and columns ``y1 .. y2``."""
        if not 0 <= x1 <= x2 < self.rows:
            raise IndexError("row range out of bounds")
        if not 0 <= y1 <= y2 < self.cols:
            raise IndexError("column range out of bounds")
        return self._query_rows(1, 0, self.rows - 1, x1, y1, x2, y2)
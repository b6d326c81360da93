"""Coordinate compression."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable


class Compressor:
    """Maps values to their rank among every value seen so far."""

    def __init__(self) -> None:
        self._seen: set[int] = set()
        self._sorted: list[int] = []

    @property
    def values(self) -> list[int]:
        """Distinct values seen, in ascending order."""
        return list(self._sorted)

    def compress(self, values: Iterable[int]) -> list[int]:
        """Replace each value by its 0-based rank among the distinct values seen."""
        items = list(values)
        self._seen.update(items)
        self._sorted = sorted(self._seen)
        return [bisect_left(self._sorted, v) for v in items]

    def to_original(self, index: int) -> int:
        """The value whose rank is ``index``."""
        if not 0 <= index < len(self._sorted):
            raise IndexError(f"rank {index} out of range")
        return self._sorted[index]
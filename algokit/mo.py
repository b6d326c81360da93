"""Mo's algorithm for offline range queries: smallest missing positive value."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_BLOCK = 287


@dataclass(frozen=True)
class RangeQuery:
    """Inclusive 1-based range ``left .. right``; ``index`` is its answer slot."""

    left: int
    right: int
    index: int


def mo_key(query: RangeQuery, block: int = DEFAULT_BLOCK) -> tuple[int, int]:
    """Sort key placing queries by left block, then by right end."""
    return query.left // block, query.right


def range_mex(
    values: Sequence[int], queries: Iterable[RangeQuery], block: int = DEFAULT_BLOCK
) -> list[int]:
    """For each query, the smallest positive integer absent from its range.

    Ranges are 1-based and inclusive; answers are placed by query index.
    """
    if block <= 0:
        raise ValueError("block must be positive")
    items = list(queries)
    n = len(values)
    for q in items:
        if not 1 <= q.left <= q.right <= n:
            raise ValueError(f"query range [{q.left}, {q.right}] out of bounds")
        if not 0 <= q.index < len(items):
            raise ValueError(f"query index {q.index} out of range")

    counts = [0] * (n + 2)
    answers = [0] * len(items)
    mex = 1
    cur_left, cur_right = 1, 1  # window is [cur_left, cur_right)

    def add(value: int) -> None:
        nonlocal mex
        if 1 <= value <= n + 1:
            counts[value] += 1
            while counts[mex]:
                mex += 1

    def remove(value: int) -> None:
        nonlocal mex
        if 1 <= value <= n + 1:
            counts[value] -= 1
            if counts[value] == 0 and value < mex:
                mex = value

    for q in sorted(items, key=lambda query: mo_key(query, block)):
        while cur_left > q.left:
            cur_left -= 1
            add(values[cur_left - 1])
        while cur_right < q.right + 1:
            add(values[cur_right - 1])
            cur_right += 1
        while cur_left < q.left:
            remove(values[cur_left - 1])
            cur_left += 1
        while cur_right > q.right + 1:
            cur_right -= 1
            remove(values[cur_right - 1])
        answers[q.index] = mex
    return answers
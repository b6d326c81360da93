"""Digit DP: counting numbers with few non-zero digits."""

from __future__ import annotations

from functools import lru_cache

MAX_NONZERO = 3


def to_digits(n: int) -> list[int]:
    """Decimal digits of ``n``, most significant first; empty for 0."""
    return [int(ch) for ch in str(n)] if n > 0 else []


def count_few_nonzero(n: int) -> int:
    """Count integers in ``[0, n]`` with at most three non-zero digits."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = to_digits(n)

    @lru_cache(maxsize=None)
    def solve(index: int, loose: bool, nonzero: int) -> int:
        if nonzero > MAX_NONZERO:
            return 0
        if index == len(digits):
            return 1
        top = 9 if loose else digits[index]
        return sum(
            solve(index + 1, loose or d < top, nonzero + (d >= 1)) for d in range(top + 1)
        )

    return solve(0, False, 0)
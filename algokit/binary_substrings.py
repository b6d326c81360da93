"""Counting substrings of a binary string that hold exactly ``k`` ones."""

from __future__ import annotations

import argparse
import sys


def _ones(text: str) -> list[int]:
    if set(text) - {"0", "1"}:
        raise ValueError("text must contain only '0' and '1'")
    return [i for i, ch in enumerate(text) if ch == "1"]


def count_k_one_substrings_positive(k: int, text: str) -> int:
    """Substrings with exactly ``k`` ones, counted per window of ``k`` ones.

    Gives 0 when ``k`` is not positive.
    """
    ones = _ones(text)
    if k <= 0:
        return 0
    n = len(text)
    total = 0
    for first in range(len(ones) - k + 1):
        last = first + k - 1
        left_start = ones[first - 1] + 1 if first > 0 else 0
        right_end = ones[last + 1] - 1 if last + 1 < len(ones) else n - 1
        zeros_left = ones[first] - left_start
        zeros_right = right_end - ones[last]
        total += (zeros_left + 1) * (zeros_right + 1)
    return total


def count_k_one_substrings(k: int, text: str) -> int:
    """Substrings with exactly ``k`` ones, ``k = 0`` included."""
    if k < 0:
        raise ValueError("k must be non-negative")
    if k > 0:
        return count_k_one_substrings_positive(k, text)
    _ones(text)
    return sum(len(run) * (len(run) + 1) // 2 for run in text.split("1"))


def main(argv: list[str] | None = None) -> int:
    """Read ``k`` and a binary string, print the number of matching substrings."""
    parser = argparse.ArgumentParser(description="Count substrings with exactly k ones.")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    tokens = args.input.read().split()
    k = int(tokens[0])
    text = tokens[1] if len(tokens) > 1 else ""
    print(count_k_one_substrings(k, text))
    return 0
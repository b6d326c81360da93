"""Suffix array by prefix doubling, with substring search."""

from __future__ import annotations


def _classes(order: list[int], keys: list) -> list[int]:
    classes = [0] * len(order)
    for prev, cur in zip(order, order[1:]):
        classes[cur] = classes[prev] + (keys[cur] != keys[prev])
    return classes


class SuffixArray:
    """Sorted order of the suffixes of a string."""

    def __init__(self, text: str) -> None:
        self._text = text
        codes = [ord(ch) + 1 for ch in text] + [0]  # sentinel sorts first
        n = len(codes)
        order = sorted(range(n), key=codes.__getitem__)
        classes = _classes(order, codes)
        shift = 1
        while shift < n:
            keys = [(classes[i], classes[(i + shift) % n]) for i in range(n)]
            order = sorted(range(n), key=keys.__getitem__)
            classes = _classes(order, keys)
            shift <<= 1
        self._order = order[1:]

    def order(self) -> list[int]:
        """Start positions of the suffixes of the text, in ascending order."""
        return list(self._order)

    def contains(self, pattern: str) -> bool:
        """True when ``pattern`` occurs in the text."""
        if not pattern:
            return True
        text = self._text
        m = len(pattern)
        lo, hi = 0, len(self._order)
        while lo < hi:
            mid = (lo + hi) // 2
            start = self._order[mid]
            if text[start : start + m] < pattern:
                lo = mid + 1
            else:
                hi = mid
        if lo == len(self._order):
            return False
        start = self._order[lo]
        return text[start : start + m] == pattern
"""Basic string algorithms: palindromes, Z-function and Knuth-Morris-Pratt."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """True when ``text`` reads the same backwards."""
    return all(a == b for a, b in zip(text, reversed(text)))


def z_function(text: str) -> list[int]:
    """``z[i]`` is the length of the longest common prefix of ``text`` and ``text[i:]``; ``z[0] = 0``."""
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right:
            z[i] = min(right - i + 1, z[i - left])
        while i + z[i] < n and text[z[i]] == text[i + z[i]]:
            z[i] += 1
        if i + z[i] - 1 > right:
            left, right = i, i + z[i] - 1
    return z


def _advance(pattern: str, failure: list[int], length: int, char: str) -> int:
    while length and (length == len(pattern) or char != pattern[length]):
        length = failure[length - 1]
    if length < len(pattern) and char == pattern[length]:
        length += 1
    return length


def prefix_function(pattern: str) -> list[int]:
    """Length of the longest proper border of each prefix of ``pattern``."""
    failure = [0] * len(pattern)
    for i, ch in enumerate(pattern[1:], 1):
        failure[i] = _advance(pattern, failure, failure[i - 1], ch)
    return failure


def kmp_match(pattern: str, text: str) -> list[int]:
    """Start positions of every occurrence of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must be non-empty")
    failure = prefix_function(pattern)
    m = len(pattern)
    matches: list[int] = []
    length = 0
    for i, ch in enumerate(text):
        length = _advance(pattern, failure, length, ch)
        if length == m:
            matches.append(i - m + 1)
    return matches


class KMP:
    """A pattern prepared for repeated matching."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._failure = prefix_function(pattern)

    def match(self, text: str) -> int:
        """``len(pattern)`` if the pattern occurs in ``text``; otherwise the length of
        the longest pattern prefix that ends ``text``."""
        if not self.pattern:
            return 0
        length = 0
        for ch in text:
            length = _advance(self.pattern, self._failure, length, ch)
            if length == len(self.pattern):
                return length
        return length
"""Binary trie over 32-bit integers and a character trie for words."""

from __future__ import annotations

from collections.abc import Iterator

BITS = 32


def _bits(x: int) -> Iterator[int]:
    if not 0 <= x < 1 << BITS:
        raise ValueError(f"{x} does not fit in {BITS} unsigned bits")
    for bit in range(BITS - 1, -1, -1):
        yield (x >> bit) & 1


class BitTrie:
    """A multiset of 32-bit unsigned integers stored bit by bit."""

    def __init__(self) -> None:
        self._children: list[list[int]] = [[-1, -1]]
        self._counts: list[int] = [0]

    def add(self, x: int) -> None:
        """Insert one copy of ``x``."""
        cur = 0
        for bit in _bits(x):
            child = self._children[cur][bit]
            if child == -1:
                child = len(self._counts)
                self._children.append([-1, -1])
                self._counts.append(0)
                self._children[cur][bit] = child
            cur = child
            self._counts[cur] += 1

    def remove(self, x: int) -> None:
        """Remove one copy of ``x``; raise ValueError if absent."""
        if self.count(x) == 0:
            raise ValueError(f"{x} is not in the trie")
        cur = 0
        for bit in _bits(x):
            cur = self._children[cur][bit]
            self._counts[cur] -= 1

    def count(self, x: int) -> int:
        """Number of copies of ``x``."""
        cur = 0
        for bit in _bits(x):
            child = self._children[cur][bit]
            if child == -1 or not self._counts[child]:
                return 0
            cur = child
        return self._counts[cur]


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


class Trie:
    """A set of words supporting exact and prefix lookup."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.terminal = True

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        """True when ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.terminal

    def has_prefix(self, prefix: str) -> bool:
        """True when some inserted word starts with ``prefix``."""
        return self._walk(prefix) is not None
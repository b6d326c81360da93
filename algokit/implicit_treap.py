"""Implicit treap: a sequence with split/merge range operations."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("value", "priority", "size", "total", "left", "right", "flipped", "pending")

    def __init__(self, value: int, priority: int) -> None:
        self.value = value
        self.priority = priority
        self.size = 1
        self.total = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.flipped = False
        self.pending = 0


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _total(node: _Node | None) -> int:
    return node.total if node else 0


def _add(node: _Node | None, delta: int) -> None:
    if node is not None:
        node.value += delta
        node.total += delta * node.size
        node.pending += delta


def _push(node: _Node | None) -> None:
    if node is None:
        return
    if node.flipped:
        node.left, node.right = node.right, node.left
        for child in (node.left, node.right):
            if child is not None:
                child.flipped = not child.flipped
        node.flipped = False
    if node.pending:
        _add(node.left, node.pending)
        _add(node.right, node.pending)
        node.pending = 0


def _pull(node: _Node) -> None:
    node.size = 1 + _size(node.left) + _size(node.right)
    node.total = node.value + _total(node.left) + _total(node.right)


def _split(node: _Node | None, k: int) -> tuple[_Node | None, _Node | None]:
    """Split into the first ``k`` elements and the rest."""
    if node is None:
        return None, None
    _push(node)
    left_size = _size(node.left)
    if left_size < k:
        left, right = _split(node.right, k - left_size - 1)
        node.right = left
        _pull(node)
        return node, right
    left, right = _split(node.left, k)
    node.left = right
    _pull(node)
    return left, node


def _merge(a: _Node | None, b: _Node | None) -> _Node | None:
    if a is None:
        return b
    if b is None:
        return a
    if a.priority > b.priority:
        _push(a)
        a.right = _merge(a.right, b)
        _pull(a)
        return a
    _push(b)
    b.left = _merge(a, b.left)
    _pull(b)
    return b


class ImplicitTreap:
    """A list-like sequence with range reverse, rotation, addition and sums."""

    def __init__(self, values: Iterable[int] = (), seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._root: _Node | None = None
        for value in values:
            self.insert(len(self), value)

    def __len__(self) -> int:
        return _size(self._root)

    def _normalize(self, index: int) -> int:
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("treap index out of range")
        return index

    def _cut(self, start: int, end: int) -> tuple[_Node | None, _Node, _Node | None]:
        if not 0 <= start <= end < len(self):
            raise IndexError(f"range [{start}, {end}] out of bounds")
        left, right = _split(self._root, end + 1)
        left, middle = _split(left, start)
        return left, middle, right

    def _join(self, left: _Node | None, middle: _Node | None, right: _Node | None) -> None:
        self._root = _merge(_merge(left, middle), right)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` so that it ends up at position ``index``."""
        if not 0 <= index <= len(self):
            raise IndexError("insert position out of range")
        left, right = _split(self._root, index)
        self._join(left, _Node(value, self._rng.getrandbits(32)), right)

    def erase(self, index: int, count: int = 1) -> None:
        """Remove ``count`` elements starting at ``index``."""
        if count < 1:
            raise ValueError("count must be positive")
        left, _, right = self._cut(index, index + count - 1)
        self._root = _merge(left, right)

    def __getitem__(self, index: int) -> int:
        index = self._normalize(index)
        node = self._root
        while True:
            _push(node)
            left_size = _size(node.left)
            if index < left_size:
                node = node.left
            elif index == left_size:
                return node.value
            else:
                index -= left_size + 1
                node = node.right

    def __setitem__(self, index: int, value: int) -> None:
        index = self._normalize(index)
        left, middle, right = self._cut(index, index)
        middle.value = value
        middle.total = value
        self._join(left, middle, right)

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                _push(node)
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def cycle_shift_right(self, start: int, end: int, shift: int) -> None:
        """Rotate ``start .. end`` to the right by ``shift`` places."""
        left, middle, right = self._cut(start, end)
        k = shift % middle.size
        head, tail = _split(middle, middle.size - k)
        self._join(left, _merge(tail, head), right)

    def reverse(self, start: int, end: int) -> None:
        """Reverse the elements of ``start .. end``."""
        left, middle, right = self._cut(start, end)
        middle.flipped = not middle.flipped
        self._join(left, middle, right)

    def add_range(self, start: int, end: int, value: int) -> None:
        """Add ``value`` to every element of ``start .. end``."""
        left, middle, right = self._cut(start, end)
        _add(middle, value)
        self._join(left, middle, right)

    def range_sum(self, start: int, end: int) -> int:
        """Sum of the elements of ``start .. end``."""
        left, middle, right = self._cut(start, end)
        total = middle.total
        self._join(left, middle, right)
        return total
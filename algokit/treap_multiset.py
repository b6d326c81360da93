"""Treap multiset with order-statistic lookup."""

from __future__ import annotations

import random


class _Node:
    __slots__ = ("value", "priority", "freq", "size", "left", "right")

    def __init__(self, value: int, priority: int) -> None:
        self.value = value
        self.priority = priority
        self.freq = 1
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _priority(node: _Node | None) -> float:
    return node.priority if node else float("-inf")


def _pull(node: _Node) -> None:
    node.size = node.freq + _size(node.left) + _size(node.right)


def _rotate_left(node: _Node) -> _Node:
    top = node.right
    node.right = top.left
    top.left = node
    _pull(node)
    _pull(top)
    return top


def _rotate_right(node: _Node) -> _Node:
    top = node.left
    node.left = top.right
    top.right = node
    _pull(node)
    _pull(top)
    return top


class TreapMultiset:
    """A multiset kept as a rotation treap; equal values share one node."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._root: _Node | None = None

    def insert(self, value: int) -> None:
        """Add one copy of ``value``."""
        self._root = self._insert(self._root, value)

    def _insert(self, node: _Node | None, value: int) -> _Node:
        if node is None:
            return _Node(value, self._rng.randint(0, 10**9))
        if node.value == value:
            node.freq += 1
        elif value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)
        _pull(node)
        if _priority(node.right) > node.priority:
            node = _rotate_left(node)
        if _priority(node.left) > node.priority:
            node = _rotate_right(node)
        return node

    def remove(self, value: int) -> None:
        """Remove one copy of ``value``; nothing happens if it is absent."""
        self._root = self._remove(self._root, value)

    def _remove(self, node: _Node | None, value: int) -> _Node | None:
        if node is None:
            return None
        if node.value == value:
            node.freq -= 1
            if node.freq == 0:
                return self._kill(node)
        elif value < node.value:
            node.left = self._remove(node.left, value)
        else:
            node.right = self._remove(node.right, value)
        _pull(node)
        return node

    def _kill(self, node: _Node) -> _Node | None:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        if node.left.priority > node.right.priority:
            top = _rotate_right(node)
            top.right = self._kill(node)
        else:
            top = _rotate_left(node)
            top.left = self._kill(node)
        _pull(top)
        return top

    def at(self, index: int) -> int:
        """The ``index``-th smallest element (0-based, negatives count from the end)."""
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("multiset index out of range")
        node = self._root
        while True:
            left = _size(node.left)
            if index < left:
                node = node.left
                continue
            index -= left
            if index < node.freq:
                return node.value
            index -= node.freq
            node = node.right

    def __len__(self) -> int:
        return _size(self._root)

    def render(self) -> str:
        """In-order listing of values, indented three spaces per level."""
        lines: list[str] = []

        def walk(node: _Node | None, depth: int) -> None:
            if node is None:
                return
            walk(node.left, depth + 1)
            lines.append(" " * (3 * depth) + str(node.value))
            walk(node.right, depth + 1)

        walk(self._root, 0)
        return "\n".join(lines)
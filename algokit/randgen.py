"""Random test-data generation: numbers, strings, permutations, trees and matrices."""

from __future__ import annotations

import random
import time
from typing import TypeVar

T = TypeVar("T")

VOWELS = ("a", "e", "i", "o", "u")


class RandomGenerator:
    """A seedable source of random test data."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._rng = random.Random(seed)

    def rand(self, mod: int | None = None) -> int:
        """A random 32-bit unsigned value, reduced modulo ``mod`` when given."""
        value = self._rng.getrandbits(32)
        if mod is None:
            return value
        if mod <= 0:
            raise ValueError("mod must be positive")
        return value % mod

    def random32(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""
        if low > high:
            raise ValueError("random32 parameters is invalid")
        return self._rng.randint(low, high)

    def random64(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""
        if low > high:
            raise ValueError("random64 parameters is invalid")
        return self._rng.randint(low, high)

    def huge_number(self, length: int) -> str:
        """Decimal number of ``length`` digits with no leading zero."""
        return "".join(str(self.random32(0 if i else 1, 9)) for i in range(length))

    def string(self, length: int) -> str:
        """Random lowercase string."""
        return "".join(chr(ord("a") + self.random32(0, 25)) for _ in range(length))

    def pick(self, items: list[T]) -> T:
        """A random element of ``items``."""
        if not items:
            raise ValueError("can not pick from empty vector")
        return items[self.random32(0, len(items) - 1)]

    def pick_and_remove(self, items: list[T]) -> T:
        """Remove and return a random element; the last element fills its place."""
        if not items:
            raise ValueError("can not pick from empty vector")
        index = self.random32(0, len(items) - 1)
        items[index], items[-1] = items[-1], items[index]
        return items.pop()

    def tree(
        self, number_of_nodes: int = -1, root: int = -1, height: int = -1
    ) -> list[tuple[int, int]]:
        """Edges ``(parent, child)`` of a random rooted tree on nodes ``1 .. n``.

        A node count of -1 picks one in ``1 .. 100000``; an invalid root picks a
        random one; a height of -1 picks one, and any height is clamped to
        ``1 .. n-1``.
        """
        if number_of_nodes == -1:
            number_of_nodes = self.random32(1, 100000)
        if number_of_nodes <= 1:
            return []
        if root > number_of_nodes or root < 1:
            root = self.random32(1, number_of_nodes)
        if height == -1:
            height = self.random32(1, number_of_nodes - 1)
        height = max(1, min(height, number_of_nodes - 1))

        edges: list[tuple[int, int]] = []
        depth = {root: 0}
        nodes_to_connect = [root]
        disconnected = list(range(1, number_of_nodes + 1))

        h = 1
        while h <= height:
            node = self.pick_and_remove(disconnected)
            if node == root:
                continue
            parent = edges[-1][1] if edges else root
            depth[node] = depth[parent] + 1
            edges.append((parent, node))
            if depth[node] != height:
                nodes_to_connect.append(node)
            h += 1

        while disconnected:
            node = self.pick_and_remove(disconnected)
            if node == root:
                continue
            parent = self.pick(nodes_to_connect)
            depth[node] = depth[parent] + 1
            edges.append((parent, node))
            if depth[node] != height:
                nodes_to_connect.append(node)

        self._rng.shuffle(edges)
        return edges

    def permutation(self, length: int) -> list[int]:
        """Random permutation of ``1 .. length``."""
        if length < 0:
            raise ValueError("can not generate negative size for permutation")
        pool = list(range(1, length + 1))
        return [self.pick_and_remove(pool) for _ in range(length)]

    def binary_string(self, length: int) -> str:
        """Random string of ``0`` and ``1``."""
        if length < 0:
            raise ValueError("can not generate negative size for string")
        return "".join(str(self.random32(0, 1)) for _ in range(length))

    def flag(self) -> bool:
        """Random boolean."""
        return bool(self.random32(0, 1))

    def vowel(self, upper: bool = False) -> str:
        """Random vowel, upper case when ``upper``."""
        chosen = self.pick(list(VOWELS))
        return chosen.upper() if upper else chosen

    def matrix(self, row: int, col: int, low: int, high: int) -> list[list[int]]:
        """``row`` by ``col`` matrix of integers in ``[low, high]``."""
        if low > high:
            raise ValueError("range is invalid")
        if row == 0 or col == 0:
            raise ValueError("row or column can't be empty")
        return [[self.random64(low, high) for _ in range(col)] for _ in range(row)]
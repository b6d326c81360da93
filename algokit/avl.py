"""AVL tree multiset with rank queries."""

from __future__ import annotations


class _Node:
    __slots__ = ("value", "left", "right", "height", "freq", "size")

    def __init__(self, value: int) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1
        self.freq = 1
        self.size = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _refresh(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))
    node.size = node.freq + _size(node.left) + _size(node.right)


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


class AVLMultiset:
    """A balanced multiset of integers that counts elements below a value."""

    def __init__(self) -> None:
        self._root: _Node | None = None

    def clear(self) -> None:
        """Remove every element."""
        self._root = None

    def insert(self, key: int) -> None:
        """Add one copy of ``key``."""
        self._root = self._insert(self._root, key)

    def _insert(self, node: _Node | None, key: int) -> _Node:
        if node is None:
            return _Node(key)
        if key < node.value:
            node.left = self._insert(node.left, key)
        elif key > node.value:
            node.right = self._insert(node.right, key)
        else:
            node.freq += 1
            node.size += 1
            return node
        _refresh(node)
        balance = _height(node.left) - _height(node.right)
        if balance > 1:
            if key > node.left.value:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1:
            if key < node.right.value:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def count(self, value: int) -> int:
        """Number of copies of ``value``."""
        node = self._root
        while node:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node.freq
        return 0

    def lower_bound(self, value: int) -> int:
        """Number of elements strictly less than ``value``."""
        result = 0
        node = self._root
        while node:
            if value < node.value:
                node = node.left
            elif value == node.value:
                return result + _size(node.left)
            else:
                result += _size(node.left) + node.freq
                node = node.right
        return result

    def upper_bound(self, value: int) -> int:
        """Number of elements less than or equal to the integer ``value``."""
        return self.lower_bound(value + 1)

    def __len__(self) -> int:
        return _size(self._root)

    def render(self) -> str:
        """In-order listing of ``(value, frequency, subtree size)``, indented by depth."""
        lines: list[str] = []

        def walk(node: _Node | None, depth: int) -> None:
            if node is None:
                return
            walk(node.left, depth + 1)
            lines.append(f"{' ' * (depth * 5)}( {node.value:2d},{node.freq:2d},{node.size:2d} ) ")
            walk(node.right, depth + 1)

        walk(self._root, 0)
        return "\n".join(lines)
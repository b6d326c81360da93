"""Polynomial string hashing: double-modulus prefix hashes and a small exact hash."""

from __future__ import annotations

MOD1 = 1_000_000_007
BASE1 = 31
MOD2 = 1_000_000_009
BASE2 = 43
MODULI = (MOD1, MOD2)
BASES = (BASE1, BASE2)

SMALL_BASE = 27
SMALL_LIMIT = 12


class HashTables:
    """Powers of each base and their modular inverses, for positions ``0 .. size-1``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        powers = []
        inverses = []
        for mod, base in zip(MODULI, BASES):
            inv_base = pow(base, mod - 2, mod)
            pw = [1]
            iv = [1]
            for _ in range(size - 1):
                pw.append(pw[-1] * base % mod)
                iv.append(iv[-1] * inv_base % mod)
            powers.append(pw)
            inverses.append(iv)
        self.powers: tuple[list[int], list[int]] = (powers[0], powers[1])
        self.inverses: tuple[list[int], list[int]] = (inverses[0], inverses[1])

    @property
    def size(self) -> int:
        """Number of positions covered."""
        return len(self.powers[0])


class DoubleHash:
    """Prefix hashes of a string under both moduli, for substring comparison."""

    def __init__(self, text: str, tables: HashTables | None = None) -> None:
        if tables is None:
            tables = HashTables(max(1, len(text)))
        if len(text) > tables.size:
            raise ValueError("hash tables are too small for this text")
        self._tables = tables
        self._n = len(text)
        prefixes = []
        for mod, pw in zip(MODULI, tables.powers):
            running = 0
            table = []
            for p, ch in zip(pw, text):
                running = (running + p * ord(ch)) % mod
                table.append(running)
            prefixes.append(table)
        self._prefix = prefixes

    def __len__(self) -> int:
        return self._n

    def range(self, left: int, right: int) -> tuple[int, int]:
        """Hash pair of ``text[left .. right]`` (inclusive), independent of position."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        if left == 0:
            return self._prefix[0][right], self._prefix[1][right]
        result = []
        for mod, table, inv in zip(MODULI, self._prefix, self._tables.inverses):
            result.append((table[right] - table[left - 1]) * inv[left] % mod)
        return result[0], result[1]


def _char_value(char: str) -> int:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return ord(char) - ord("a") + 1


def _small_power(pos: int) -> int:
    if not 0 <= pos < SMALL_LIMIT:
        raise ValueError(f"position {pos} outside 0 .. {SMALL_LIMIT - 1}")
    return SMALL_BASE**pos


def small_hash(text: str) -> int:
    """Exact base-27 hash of a short lowercase string (at most 12 characters)."""
    if len(text) > SMALL_LIMIT:
        raise ValueError(f"text longer than {SMALL_LIMIT} characters")
    return sum(_char_value(ch) * _small_power(pos) for pos, ch in enumerate(text))


def add_char_hash(pos: int, char: str, old_hash: int) -> int:
    """Hash after placing ``char`` at position ``pos``."""
    return old_hash + _char_value(char) * _small_power(pos)


def remove_char_hash(pos: int, char: str, old_hash: int) -> int:
    """Hash after taking ``char`` away from position ``pos``."""
    return old_hash - _char_value(char) * _small_power(pos)


def double_char_hash(text: str, tables: HashTables | None = None) -> tuple[int, int]:
    """Hash pair of a lowercase string, letters valued ``a=1 .. z=26``."""
    if tables is None:
        tables = HashTables(max(1, len(text)))
    if len(text) > tables.size:
        raise ValueError("hash tables are too small for this text")
    result = []
    for mod, pw in zip(MODULI, tables.powers):
        total = 0
        for p, ch in zip(pw, text):
            total = (total + p * _char_value(ch)) % mod
        result.append(total)
    return result[0], result[1]
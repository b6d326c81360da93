"""Arbitrary-precision signed integers with truncating division."""

from __future__ import annotations

import re
from typing import Union

_NUMBER = re.compile(r"-?\d+")

Operand = Union["BigInt", int, str]


class BigInt:
    """A signed integer built from a decimal string or an ``int``.

    Division truncates toward zero; the remainder carries the product of
    the operands' signs.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Operand = 0) -> None:
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, int):
            self._value = int(value)
        elif isinstance(value, str):
            if not _NUMBER.fullmatch(value):
                raise ValueError(f"not a decimal integer: {value!r}")
            self._value = int(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")

    @staticmethod
    def _coerce(other: object) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, str)):
            return BigInt(other)
        return None

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigInt('{self._value}')"

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value == rhs._value

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value < rhs._value

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value <= rhs._value

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value > rhs._value

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._value >= rhs._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __neg__(self) -> "BigInt":
        return BigInt(-self._value)

    def __add__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value + rhs._value)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value - rhs._value)

    def __mul__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._value * rhs._value)

    __rmul__ = __mul__

    def _truncated_divmod(self, other: "BigInt") -> tuple[int, int]:
        if other._value == 0:
            raise ZeroDivisionError("BigInt division by zero")
        sign = (-1 if self._value < 0 else 1) * (-1 if other._value < 0 else 1)
        q, r = divmod(abs(self._value), abs(other._value))
        return sign * q, sign * r

    def __floordiv__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._truncated_divmod(rhs)[0])

    def __mod__(self, other: Operand) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return BigInt(self._truncated_divmod(rhs)[1])


def big_pow(base: Operand, exponent: Operand) -> BigInt:
    """``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    base, exponent = BigInt(base), BigInt(exponent)
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = BigInt(1)
    while exponent != 0:
        if exponent % 2 != 0:
            result = result * base
        base = base * base
        exponent = exponent // 2
    return result


def big_pow_mod(base: Operand, exponent: Operand, mod: Operand) -> BigInt:
    """``base ** exponent % mod``; an exponent of 0 gives 1."""
    base, exponent, mod = BigInt(base), BigInt(exponent), BigInt(mod)
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return BigInt(1)
    half = big_pow_mod(base, exponent // 2, mod)
    square = (half * half) % mod
    if exponent % 2 == 0:
        return square
    return (square * base) % mod


def big_sqrt(x: Operand) -> BigInt:
    """Integer square root by Newton's iteration."""
    x = BigInt(x)
    if x < 0:
        raise ValueError("square root of a negative number")
    answer, candidate = x, (x + 1) // 2
    while candidate < answer:
        answer = candidate
        candidate = (candidate + x // candidate) // 2
    return answer


def big_gcd(a: Operand, b: Operand) -> BigInt:
    """Greatest common divisor by Euclid's algorithm."""
    a, b = BigInt(a), BigInt(b)
    while a % b != 0:
        a, b = b, a % b
    return b


def big_lcm(a: Operand, b: Operand) -> BigInt:
    """Least common multiple."""
    a, b = BigInt(a), BigInt(b)
    return a // big_gcd(a, b) * b
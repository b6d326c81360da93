"""Linear Diophantine equations ``a*x + b*y = c``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LdeSolution:
    """One solution ``(x, y)`` of ``a*x + b*y = c`` together with ``g = gcd(a, b)``."""

    x: int
    y: int
    g: int


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``|g| == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def solve_lde(a: int, b: int, c: int) -> LdeSolution | None:
    """Find one integer solution of ``a*x + b*y = c``, or ``None`` if there is none."""
    if a == 0 and b == 0:
        raise ValueError("a and b must not both be zero")
    g, x, y = extended_gcd(a, b)
    if c % g:
        return None
    m = c // g
    return LdeSolution(x * m, y * m, g)
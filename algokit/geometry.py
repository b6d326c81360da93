"""Small geometry and numeric helpers."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A lattice point."""

    x: int
    y: int


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def is_triangle(x1: int, y1: int, x2: int, y2: int, x3: int, y3: int) -> bool:
    """True when the three points are not collinear."""
    return x1 * (y2 - y3) + x2 * (y3 - y1) + x3 * (y1 - y2) != 0


def doubled_area(a: Point, b: Point, c: Point) -> int:
    """Twice the area of triangle ``abc``."""
    return abs((c.x - a.x) * (b.y - a.y) - (a.x - b.x) * (a.y - c.y))


def heron_area(a: float, b: float, c: float) -> float:
    """Area of a triangle from its side lengths."""
    if a < 0 or b < 0 or c < 0 or a + b <= c or a + c <= b or b + c <= a:
        raise ValueError("Not a valid triangle")
    s = (a + b + c) / 2
    return math.sqrt(s * (s - a) * (s - b) * (s - c))


def ceil_div(a: int, b: int) -> int:
    """Ceiling of ``a / b`` in integers."""
    return -(-a // b)


def is_power_of_two(x: int) -> bool:
    """True when ``x`` is a positive power of two."""
    return x > 0 and x & (x - 1) == 0


def ternary_search(
    func: Callable[[float], float],
    low: float = 0.0,
    high: float = 1_000_000.0,
    iterations: int = 200,
) -> float:
    """Minimum value of a unimodal ``func`` on ``[low, high]``."""
    for _ in range(iterations):
        mid1 = low + (high - low) / 3.0
        mid2 = high - (high - low) / 3.0
        if func(mid1) < func(mid2):
            high = mid2
        else:
            low = mid1
    return func((low + high) / 2)
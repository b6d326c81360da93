import itertools
import math

import pytest

from algokit.geometry import (
    Point,
    ceil_div,
    distance,
    doubled_area,
    heron_area,
    is_power_of_two,
    is_triangle,
    ternary_search,
)


def test_distance():
    assert distance(0, 0, 3, 4) == 5.0
    assert distance(2, 7, 2, 7) == 0.0
    assert distance(1, 2, 4, 6) == distance(4, 6, 1, 2)


def test_is_triangle():
    assert is_triangle(0, 0, 1, 1, 2, 2) is False
    assert is_triangle(0, 0, 1, 0, 0, 1) is True


def test_doubled_area_matches_heron():
    a, b, c = Point(0, 0), Point(3, 0), Point(0, 4)
    assert doubled_area(a, b, c) == pytest.approx(2 * heron_area(3, 4, 5))


def test_doubled_area_symmetric():
    pts = [Point(1, 2), Point(7, -3), Point(-4, 5)]
    areas = {doubled_area(*perm) for perm in itertools.permutations(pts)}
    assert len(areas) == 1


def test_collinear_area_zero():
    assert doubled_area(Point(0, 0), Point(2, 2), Point(5, 5)) == 0


@pytest.mark.parametrize("sides", [(1, 2, 3), (1, 1, 5), (-1, 2, 2)])
def test_heron_rejects_invalid(sides):
    with pytest.raises(ValueError):
        heron_area(*sides)


@pytest.mark.parametrize("a,b", [(7, 2), (8, 2), (1, 5), (0, 3), (-7, 2), (-4, 2)])
def test_ceil_div(a, b):
    assert ceil_div(a, b) == math.ceil(a / b)


def test_is_power_of_two():
    found = {x for x in range(-10, 1100) if is_power_of_two(x)}
    assert found == {2**k for k in range(11)}


def test_ternary_search_finds_minimum():
    assert ternary_search(lambda x: (x - 3) ** 2 + 1, 0.0, 10.0, 200) == pytest.approx(1.0)
    assert ternary_search(lambda x: abs(x - 5)) == pytest.approx(0.0, abs=1e-6)
import itertools
import math
from functools import reduce
from operator import and_

import pytest

from algokit.modular import (
    Combination,
    catalan,
    derangements,
    mod_add,
    mod_div,
    mod_inverse,
    mod_mul,
    mod_pow,
    mod_sub,
    ncr_exact,
    ncr_pascal,
    ncr_recursive,
    range_and,
)

MOD = 1_000_000_007


@pytest.mark.parametrize("a,b", [(3, 5), (-4, 9), (10**12, 10**11), (-7, -8)])
def test_basic_ops_stay_in_range_and_agree(a, b):
    assert mod_mul(a, b, MOD) == (a * b) % MOD
    assert mod_add(a, b, MOD) == (a + b) % MOD
    assert mod_sub(a, b, MOD) == (a - b) % MOD
    assert 0 <= mod_sub(a, b, MOD) < MOD


def test_pow_matches_builtin():
    assert mod_pow(3, 200, MOD) == pow(3, 200, MOD)
    with pytest.raises(ValueError):
        mod_pow(3, -1, MOD)


@pytest.mark.parametrize("x", [1, 2, 12345, MOD - 1])
def test_inverse_round_trip(x):
    assert x * mod_inverse(x, MOD) % MOD == 1
    assert mod_div(x * 7 % MOD, x, MOD) == 7


def test_inverse_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod_inverse(0, MOD)


def test_combination_matches_math():
    comb = Combination(40, MOD)
    for n in range(41):
        for r in range(n + 1):
            assert comb.ncr(n, r) == math.comb(n, r) % MOD
            assert comb.npr(n, r) == math.perm(n, r) % MOD


def test_combination_out_of_range():
    comb = Combination(10)
    assert comb.ncr(5, 6) == 0
    assert comb.ncr(5, -1) == 0
    assert comb.npr(3, 4) == 0
    with pytest.raises(ValueError):
        comb.ncr(11, 2)


@pytest.mark.parametrize("a,b", [(5, 7), (12, 15), (0, 3), (8, 8), (1, 1024)])
def test_range_and(a, b):
    assert range_and(a, b) == reduce(and_, range(a, b + 1))


def test_exact_and_pascal_agree_with_math():
    for n in range(30):
        for r in range(n + 1):
            assert ncr_exact(n, r) == math.comb(n, r)
            assert ncr_pascal(n, r) == math.comb(n, r)
    assert ncr_exact(3, 5) == 0
    assert ncr_pascal(3, 5) == 0


def test_recursive_form():
    for n in range(1, 30):
        for r in range(1, n + 1):
            assert ncr_recursive(n, r) == math.comb(n, r)
    assert ncr_recursive(5, 0) == 0
    assert ncr_recursive(3, 4) == 0


def test_catalan():
    for n in range(15):
        assert catalan(n, MOD) == math.comb(2 * n, n) // (n + 1) % MOD


def test_derangements_against_permutations():
    for n in range(1, 8):
        brute = sum(
            all(p[i] != i for i in range(n)) for p in itertools.permutations(range(n))
        )
        assert derangements(n, MOD) == brute


def test_derangements_rejects_zero():
    with pytest.raises(ValueError):
        derangements(0)
import math

import pytest

from algokit.divisors import (
    SmallestPrimeFactorSieve,
    count_in_range,
    count_proper_divisors,
    euler_phi,
    prime_factors,
    proper_divisors,
    sieve,
)


def is_prime(p):
    return p > 1 and all(p % d for d in range(2, p))


@pytest.mark.parametrize("n", [2, 12, 36, 97, 360, 1001])
def test_proper_divisors(n):
    assert proper_divisors(n) == [d for d in range(2, n + 1) if n % d == 0]


def test_proper_divisors_of_one():
    assert proper_divisors(1) == []


@pytest.mark.parametrize("n", [2, 12, 36, 97, 360, 1001])
def test_count_excludes_number_itself(n):
    assert count_proper_divisors(n) == len(proper_divisors(n)) - 1


def test_sieve_flags_primes():
    flags = sieve(60)
    assert len(flags) == 61
    assert [i for i, f in enumerate(flags) if f] == [p for p in range(61) if is_prime(p)]


def test_count_in_range():
    values = [1, 3, 3, 5, 8, 13]
    assert count_in_range(3, 8, values) == len([v for v in values if 3 <= v <= 8])
    assert count_in_range(9, 12, values) == 0


@pytest.mark.parametrize("n", [1, 2, 9, 10, 36, 97, 100])
def test_euler_phi(n):
    assert euler_phi(n) == sum(math.gcd(k, n) == 1 for k in range(1, n + 1))


@pytest.mark.parametrize("n", [2, 60, 97, 1024, 9973 * 3])
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(p) for p in factors)


def test_spf_sieve_factorize_and_divisors():
    spf = SmallestPrimeFactorSieve(5000)
    for n in [1, 2, 84, 997, 4096, 4998]:
        assert spf.factorize(n) == prime_factors(n)
        divs = spf.divisors(n)
        assert sorted(divs) == [d for d in range(1, n + 1) if n % d == 0]
        assert divs[0] == 1


def test_spf_limit():
    spf = SmallestPrimeFactorSieve(100)
    with pytest.raises(ValueError):
        spf.factorize(100)
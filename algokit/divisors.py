"""Divisors, sieves, Euler's totient and prime factorisation."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from math import isqrt


def proper_divisors(num: int) -> list[int]:
    """Sorted divisors of ``num`` greater than 1 (``num`` itself included)."""
    found = set()
    for i in range(2, isqrt(num) + 1 if num > 0 else 0):
        if num % i == 0:
            found.add(i)
            found.add(num // i)
    if num > 1:
        found.add(num)
    return sorted(found)


def count_proper_divisors(num: int) -> int:
    """Count divisors of ``num`` strictly between 1 and ``num``."""
    count = 0
    for i in range(2, isqrt(num) + 1 if num > 0 else 0):
        if num % i == 0:
            count += 1 if num // i == i else 2
    return count


def sieve(n: int) -> list[bool]:
    """Primality flags for ``0..n`` by the sieve of Eratosthenes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    is_prime = [True] * (n + 1)
    is_prime[0] = False
    if n >= 1:
        is_prime[1] = False
    for i in range(2, isqrt(n) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return is_prime


def count_in_range(low: int, high: int, sorted_values: Sequence[int]) -> int:
    """Number of items of a sorted sequence lying in ``[low, high]``."""
    return max(0, bisect_right(sorted_values, high) - bisect_left(sorted_values, low))


def euler_phi(n: int) -> int:
    """Count of integers in ``[1, n]`` coprime to ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    phi = list(range(n + 1))
    for i in range(2, n + 1):
        if phi[i] == i:
            for j in range(i, n + 1, i):
                phi[j] -= phi[j] // i
    return phi[n]


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` with multiplicity, in non-decreasing order."""
    factors = []
    candidate = 2
    while n > 1:
        if n % candidate == 0:
            factors.append(candidate)
            n //= candidate
        else:
            candidate += 1
    return factors


class SmallestPrimeFactorSieve:
    """Smallest-prime-factor table for fast factorisation below ``limit``."""

    def __init__(self, limit: int) -> None:
        if limit < 2:
            raise ValueError("limit must be at least 2")
        self.limit = limit
        spf = list(range(limit))
        for i in range(2, isqrt(limit - 1) + 1):
            if spf[i] == i:
                for j in range(i * i, limit, i):
                    if spf[j] == j:
                        spf[j] = i
        self._spf = spf

    def _check(self, n: int) -> None:
        if n >= self.limit:
            raise ValueError(f"{n} is outside the sieve limit {self.limit}")

    def factorize(self, n: int) -> list[int]:
        """Prime factors of ``n`` with multiplicity, smallest first."""
        self._check(n)
        factors = []
        while n > 1:
            p = self._spf[n]
            factors.append(p)
            n //= p
        return factors

    def _prime_powers(self, x: int) -> list[tuple[int, int]]:
        powers: list[tuple[int, int]] = []
        for p in self.factorize(x):
            if powers and powers[-1][0] == p:
                powers[-1] = (p, powers[-1][1] + 1)
            else:
                powers.append((p, 1))
        return powers

    def divisors(self, x: int) -> list[int]:
        """All divisors of ``x``, enumerated with the smallest prime outermost."""
        result = [1]
        for p, e in reversed(self._prime_powers(x)):
            result = [p**j * d for j in range(e + 1) for d in result]
        return result
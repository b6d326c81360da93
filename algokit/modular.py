"""Modular arithmetic helpers, binomial coefficients and related counts."""

from __future__ import annotations

from math import gcd

DEFAULT_MOD = 1_000_000_007


def mod_mul(a: int, b: int, mod: int = DEFAULT_MOD) -> int:
    """Return ``a * b`` reduced modulo ``mod``."""
    return (a % mod) * (b % mod) % mod


def mod_add(a: int, b: int, mod: int = DEFAULT_MOD) -> int:
    """Return ``a + b`` reduced modulo ``mod``."""
    return (a + b) % mod


def mod_sub(a: int, b: int, mod: int = DEFAULT_MOD) -> int:
    """Return ``a - b`` reduced modulo ``mod``."""
    return (a - b) % mod


def mod_pow(base: int, exponent: int, mod: int = DEFAULT_MOD) -> int:
    """Return ``base ** exponent`` modulo ``mod`` by fast exponentiation."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, mod)


def mod_inverse(x: int, mod: int = DEFAULT_MOD) -> int:
    """Return the inverse of ``x`` modulo the prime ``mod`` (Fermat)."""
    if x % mod == 0:
        raise ZeroDivisionError("value has no inverse modulo mod")
    return pow(x, mod - 2, mod)


def mod_div(x: int, y: int, mod: int = DEFAULT_MOD) -> int:
    """Return ``x / y`` modulo the prime ``mod``."""
    return mod_mul(x, mod_inverse(y, mod), mod)


class Combination:
    """Precomputed factorials for nCr and nPr modulo a prime."""

    def __init__(self, n: int, mod: int = DEFAULT_MOD) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.mod = mod
        self.limit = n
        factorials = [1] * (n + 1)
        for i in range(1, n + 1):
            factorials[i] = factorials[i - 1] * i % mod
        self._fact = factorials
        self._inv_fact = [mod_inverse(f, mod) for f in factorials]

    def _check(self, n: int) -> None:
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the precomputed limit {self.limit}")

    def ncr(self, n: int, r: int) -> int:
        """Number of ways to choose ``r`` of ``n`` items, modulo ``mod``."""
        if r < 0 or n < r:
            return 0
        self._check(n)
        return self._fact[n] * self._inv_fact[r] % self.mod * self._inv_fact[n - r] % self.mod

    def npr(self, n: int, r: int) -> int:
        """Number of ordered selections of ``r`` of ``n`` items, modulo ``mod``."""
        if r < 0 or n < r:
            return 0
        self._check(n)
        return self._fact[n] * self._inv_fact[n - r] % self.mod


def range_and(a: int, b: int) -> int:
    """Bitwise AND of every integer in ``[a, b]``."""
    shift = 0
    while a != b and a > 0:
        shift += 1
        a >>= 1
        b >>= 1
    return a << shift


def ncr_exact(n: int, r: int) -> int:
    """Exact binomial coefficient, reducing by the gcd at every step."""
    if r < 0 or r > n:
        return 0
    r = min(r, n - r)
    numerator, denominator = 1, 1
    while r:
        numerator *= n
        denominator *= r
        common = gcd(numerator, denominator)
        numerator //= common
        denominator //= common
        n -= 1
        r -= 1
    return numerator


def ncr_pascal(n: int, k: int) -> int:
    """Binomial coefficient from Pascal's triangle."""
    if k < 0 or k > n:
        return 0
    row = [1]
    for _ in range(n):
        row = [1, *(x + y for x, y in zip(row, row[1:])), 1]
    return row[k]


def ncr_recursive(n: int, r: int) -> int:
    """Binomial coefficient via ``C(n, r) = n * C(n-1, r-1) / r``.

    Yields 0 when ``r <= 0`` or ``n < r``.
    """
    if n < r or r <= 0:
        return 0
    if r == 1:
        return n
    if r == n:
        return 1
    value = n - r + 1
    for k in range(2, r + 1):
        value = (n - r + k) * value // k
    return value


def catalan(n: int, mod: int = DEFAULT_MOD) -> int:
    """The ``n``-th Catalan number modulo ``mod``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return mod_div(Combination(2 * n, mod).ncr(2 * n, n), n + 1, mod)


def derangements(n: int, mod: int = DEFAULT_MOD) -> int:
    """Number of permutations of ``n`` items with no fixed point, modulo ``mod``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return 0
    previous, current = 0, 1
    for i in range(3, n + 1):
        previous, current = current, mod_mul(i - 1, mod_add(current, previous, mod), mod)
    return current
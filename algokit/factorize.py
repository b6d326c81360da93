"""Integer factorization: Miller-Rabin primality and SQUFOF splitting.

Works for inputs up to about 10**18. SQUFOF cannot handle multiplied values
of 2**62 or more, so larger composites with no small factor are not split.
"""

from __future__ import annotations

import math

_U32 = 0xFFFFFFFF
_U64 = 0xFFFFFFFFFFFFFFFF
_TRIAL_LIMIT = 5000
_MULTIPLIERS = (
    1, 3, 5, 7, 11, 3 * 5, 3 * 7, 3 * 11, 5 * 7, 5 * 11, 7 * 11,
    3 * 5 * 7, 3 * 5 * 11, 3 * 7 * 11, 5 * 7 * 11, 3 * 5 * 7 * 11,
)


def mul_mod(a: int, b: int, mod: int) -> int:
    """``a * b`` reduced modulo ``mod``."""
    return a * b % mod


def pow_mod(a: int, b: int, mod: int) -> int:
    """``a ** b`` modulo ``mod``; an exponent of 0 gives 1."""
    if b < 0:
        raise ValueError("exponent must be non-negative")
    if b == 0:
        return 1
    return pow(a, b, mod)


def is_prime_trial(x: int) -> bool:
    """Primality by trial division."""
    if x < 4:
        return x > 1
    i = 2
    while i * i <= x:
        if x % i == 0:
            return False
        i += 1
    return True


def _miller_rabin_single(x: int, base: int) -> bool:
    if x < 4:
        return x > 1
    if x % 2 == 0:
        return False
    base %= x
    if base == 0:
        return True
    xm1 = x - 1
    d = xm1 // 2
    j = 1
    while d % 2 == 0:
        d //= 2
        j += 1
    t = pow_mod(base, d, x)
    if t == 1 or t == xm1:
        return True
    for _ in range(1, j):
        t = t * t % x
        if t == xm1:
            return True
        if t <= 1:
            break
    return False


def miller_rabin(x: int) -> bool:
    """Deterministic Miller-Rabin test for ``x < 2**64``."""
    if x < 316349281:
        bases: tuple[int, ...] = (11000544, 31481107)
    elif x < 4759123141:
        bases = (2, 7, 61)
    else:
        bases = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)
    return all(_miller_rabin_single(x, b) for b in bases)


def isqrt(x: int) -> int:
    """Floor of the square root of ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def icbrt(x: int) -> int:
    """Floor of the cube root of ``x``."""
    if x < 0:
        raise ValueError("cube root of a negative number")
    if x < 2:
        return x
    r = 1 << ((x.bit_length() + 2) // 3)
    while True:
        y = (2 * r + x // (r * r)) // 3
        if y >= r:
            break
        r = y
    while r > 0 and r * r * r > x:
        r -= 1
    while (r + 1) ** 3 <= x:
        r += 1
    return r


def _trailing_zeros(v: int) -> int:
    return (v & -v).bit_length() - 1 if v else 0


def _squfof_attempt(x: int, k: int, it_max: int, cutoff_div: int) -> int:
    g = math.gcd(k, x)
    if g != 1:
        return g
    saved: list[int] = []
    scaledn = k * x
    if scaledn >> 62:
        return 1
    sqrtn = isqrt(scaledn) & _U32
    cutoff = (isqrt(2 * sqrtn) // cutoff_div) & _U32
    q0 = 1
    p1 = sqrtn
    q1 = (scaledn - p1 * p1) & _U32

    if q1 == 0:
        factor = math.gcd(x, p1)
        return 1 if factor == x else factor

    multiplier = (2 * k) & _U32
    coarse_cutoff = (cutoff * multiplier) & _U32
    p0 = 0
    sqrtq = 0

    def remember(value: int) -> None:
        if value < coarse_cutoff:
            reduced = value // math.gcd(value, multiplier)
            if reduced < cutoff:
                saved.append(reduced & 0xFFFF)

    found = False
    for _ in range(it_max):
        tmp = (sqrtn + p1 - q1) & _U32
        q = 1
        if tmp >= q1:
            q += tmp // q1
        p0 = (q * q1 - p1) & _U32
        q0 = (q0 + (p1 - p0) * q) & _U32

        remember(q1)

        bits = _trailing_zeros(q0)
        tmp = q0 >> bits
        if not bits & 1 and (tmp & 7) == 1:
            sqrtq = isqrt(q0) & _U32
            if sqrtq * sqrtq == q0 and sqrtq not in saved:
                found = True
                break

        tmp = (sqrtn + p0 - q0) & _U32
        q = 1
        if tmp >= q0:
            q += tmp // q0
        p1 = (q * q0 - p0) & _U32
        q1 = (q1 + (p0 - p1) * q) & _U32

        remember(q0)

    if sqrtq == 1 or not found:
        return 1

    q0 = sqrtq
    p1 = (p0 + sqrtq * (((sqrtn - p0) & _U32) // sqrtq)) & _U32
    q1 = (((scaledn - p1 * p1) & _U64) // q0) & _U32

    for _ in range(it_max):
        tmp = (sqrtn + p1 - q1) & _U32
        q = 1
        if tmp >= q1:
            q += tmp // q1
        p0 = (q * q1 - p1) & _U32
        q0 = (q0 + (p1 - p0) * q) & _U32
        if p0 == p1:
            q0 = q1
            break

        tmp = (sqrtn + p0 - q0) & _U32
        q = 1
        if tmp >= q0:
            q += tmp // q0
        p1 = (q * q0 - p0) & _U32
        q1 = (q1 + (p0 - p1) * q) & _U32
        if p0 == p1:
            break
    else:
        return 1

    factor = math.gcd(q0, x)
    return 1 if factor == x else factor


def squfof(x: int) -> int:
    """A non-trivial factor of the composite ``x`` by Shanks' square forms method."""
    cbrt_x = icbrt(x)
    if cbrt_x ** 3 == x:
        return cbrt_x
    iter_lim = 300
    iter_fact = 1
    while iter_fact < 20000:
        for k in _MULTIPLIERS:
            if _U64 // k <= x:
                continue
            factor = _squfof_attempt(x, k, iter_fact * iter_lim, 1)
            if factor not in (1, x):
                return factor
        iter_fact *= 4
    raise ValueError(f"failed to factor {x}")


def factorize_brute(x: int) -> list[int]:
    """Prime factors of ``x`` with multiplicity, by trial division, ascending."""
    if x < 1:
        raise ValueError("x must be positive")
    factors: list[int] = []
    while x % 2 == 0:
        x //= 2
        factors.append(2)
    i = 3
    while i * i <= x:
        while x % i == 0:
            x //= i
            factors.append(i)
        i += 2
    if x > 1:
        factors.append(x)
    return factors


def factorize(x: int) -> list[int]:
    """Prime factors of ``x`` with multiplicity, ascending."""
    if x < 1:
        raise ValueError("x must be positive")
    factors: list[int] = []

    def trial(p: int) -> None:
        nonlocal x
        while x % p == 0:
            x //= p
            factors.append(p)

    trial(2)
    trial(3)
    i, step = 5, 2
    while i < _TRIAL_LIMIT and i * i <= x:
        trial(i)
        i += step
        step = 6 - step

    if x > 1:
        stack = [x]
        while stack:
            value = stack.pop()
            if miller_rabin(value):
                factors.append(value)
                continue
            factor = squfof(value)
            if factor in (1, value):
                raise ValueError(f"failed to factor {value}")
            stack.append(factor)
            stack.append(value // factor)
    factors.sort()
    return factors
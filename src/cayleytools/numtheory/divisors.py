"""Small number-theory helpers used for order statistics."""
from __future__ import annotations

from functools import lru_cache
from typing import Tuple


def _check_positive(n: int) -> None:
    if n < 1:
        raise ValueError(f"expected a positive integer, got {n!r}")


@lru_cache(maxsize=None)
def prime_factors(n: int) -> Tuple[int, ...]:
    """Prime factors of n in ascending order, repeated by multiplicity.

    prime_factors(12) == (2, 2, 3); prime_factors(1) == ().
    """
    _check_positive(n)
    out = []
    p = 2
    while p * p <= n:
        while n % p == 0:
            out.append(p)
            n //= p
        p += 1
    if n > 1:
        out.append(n)
    return tuple(out)


@lru_cache(maxsize=None)
def divisors(n: int) -> Tuple[int, ...]:
    """All positive divisors of n, ascending (1 and n included)."""
    _check_positive(n)
    small = []
    large = []
    d = 1
    while d * d <= n:
        if n % d == 0:
            small.append(d)
            if d != n // d:
                large.append(n // d)
        d += 1
    return tuple(small + large[::-1])


def multiplicity(n: int, p: int) -> int:
    """Largest m such that p**m divides n."""
    _check_positive(n)
    if p < 2:
        raise ValueError(f"multiplicity needs a base >= 2, got {p!r}")
    m = 0
    while n % p == 0:
        n //= p
        m += 1
    return m


def int_pow(base: int, exp: int) -> int:
    """Integer power by repeated squaring, exp >= 0."""
    if exp < 0:
        raise ValueError(f"negative exponent {exp!r}")
    result = 1
    while exp:
        if exp & 1:
            result *= base
        base *= base
        exp >>= 1
    return result

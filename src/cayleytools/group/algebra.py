from __future__ import annotations

from typing import Sequence


def power(
    op: Sequence[Sequence[int]],
    inv: Sequence[int],
    orders: Sequence[int],
    x: int,
    e: int,
) -> int:
    """x**e by square-and-multiply. Negative exponents go through inv[x]."""
    o = orders[x]
    e = abs(e) % o if e >= 0 else -(abs(e) % o)
    if e < 0:
        x, e = inv[x], -e
    elif e == 0:
        return 0

    t = 0
    while e > 1:
        if e & 1:
            t = op[x][t]
        x = op[x][x]
        e >>= 1
    return op[x][t]


def count_powers(
    op: Sequence[Sequence[int]],
    inv: Sequence[int],
    orders: Sequence[int],
    k: int,
) -> int:
    """Number of distinct k-th powers in the group."""
    return len({power(op, inv, orders, x, k) for x in range(len(op))})

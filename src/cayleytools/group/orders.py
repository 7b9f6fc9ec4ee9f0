"""Element orders and order statistics."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from cayleytools.errors import PreconditionError
from cayleytools.numtheory import divisors, int_pow, multiplicity, prime_factors


def element_orders(op: Sequence[Sequence[int]]) -> List[int]:
    """Multiplicative order of every element, by repeated multiplication."""
    # Could be sped up: once ord(x) is known so is the order of every power of x.
    n = len(op)
    orders = []
    for x in range(n):
        j, k = op[x][0], 1
        while j != 0:
            j = op[x][j]
            k += 1
            if k > n:
                raise PreconditionError(f"powers of {x} never reach the identity; not a group table")
        orders.append(k)
    return orders


def order_stats(orders: Sequence[int], n: int) -> Tuple[int, ...]:
    """Number of elements of each order d, for the divisors d of n in ascending order."""
    return tuple(sum(1 for o in orders if o == d) for d in divisors(n))


def p_order_stats(orders: Sequence[int], n: int) -> Dict[int, Tuple[int, ...]]:
    """
    For each prime p | n with p^m || n:
      p -> (#elements of order p^0, ..., #elements of order p^m)
    """
    stats: Dict[int, Tuple[int, ...]] = {}
    for p in sorted(set(prime_factors(n))):
        m = multiplicity(n, p)
        stats[p] = tuple(sum(1 for o in orders if o == int_pow(p, e)) for e in range(m + 1))
    return stats

"""Structural tests: abelian, dihedral, center and commutators."""
from __future__ import annotations

import logging
from itertools import combinations
from typing import List, Sequence

from cayleytools.errors import AbelianGroupError
from cayleytools.group.closure import generated_subgroup, is_generating_set

logger = logging.getLogger(__name__)


def is_central(op: Sequence[Sequence[int]], generators: Sequence[int], x: int) -> bool:
    """True iff x commutes with every generator, hence with every element."""
    for g in generators:
        if op[x][g] != op[g][x]:
            return False
    return True


def check_abelian(op: Sequence[Sequence[int]], generators: Sequence[int]) -> bool:
    return all(is_central(op, generators, g) for g in generators)


def check_dihedral(
    op: Sequence[Sequence[int]],
    orders: Sequence[int],
    factors: Sequence[int],
    is_abelian: bool,
) -> bool:
    """
    Dihedral test for a group with the given element orders.

    factors are the prime factors of the order with multiplicity. A
    non-abelian group is dihedral iff it is generated by two involutions.
    """
    if is_abelian:
        return False
    if not factors or factors[0] != 2:
        return False

    involutions = [x for x in range(len(op)) if orders[x] == 2]
    if len(involutions) < 2:
        return False

    # Non-abelian of order 2p.
    if len(factors) == 2:
        return True

    for a, b in combinations(involutions, 2):
        if is_generating_set(op, (a, b)):
            logger.debug("involutions %d and %d generate the group", a, b)
            return True
    return False


def center(op: Sequence[Sequence[int]], generators: Sequence[int], is_abelian: bool) -> List[int]:
    """Central elements of a non-abelian group."""
    if is_abelian:
        raise AbelianGroupError("group is abelian; its center is the whole group")
    return [x for x in range(len(op)) if is_central(op, generators, x)]


def commutator_set(op: Sequence[Sequence[int]], inv: Sequence[int]) -> List[int]:
    """
    The identity together with every commutator [i, j] = i j i^-1 j^-1 and
    [j, i] over non-identity pairs j < i.

    This is the set of commutators, not the subgroup they generate; see
    derived_subgroup().
    """
    elms = {0}
    for i in range(1, len(op)):
        for j in range(1, i):
            elms.add(op[op[i][j]][inv[op[j][i]]])
            elms.add(op[op[j][i]][inv[op[i][j]]])
    return sorted(elms)


def derived_subgroup(op: Sequence[Sequence[int]], inv: Sequence[int]) -> List[int]:
    """Subgroup generated by all commutators."""
    return sorted(generated_subgroup(op, commutator_set(op, inv)))

"""Cayley graphs of standard small groups."""
from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Sequence

from cayleytools.errors import PreconditionError
from cayleytools.graph.cayley import CayleyGraph
from cayleytools.io.permutations import Perm, identity_perm, is_perm, perm_compose

logger = logging.getLogger(__name__)


def cayley_graph_from_permutations(perms: Sequence[Sequence[int]], *, max_order: int = 10000) -> CayleyGraph:
    """
    Cayley graph of the permutation group generated by perms.

    Elements are enumerated breadth-first from the identity permutation, so
    the identity is vertex 0 and generator g is vertex out_edges[0][g].
    Products compose left to right: x * g applies x first, then g.
    """
    if not perms:
        raise PreconditionError("need at least one generating permutation")
    gens: List[Perm] = [tuple(p) for p in perms]
    npts = len(gens[0])
    for p in gens:
        if len(p) != npts or not is_perm(p):
            raise PreconditionError(f"{p!r} is not a permutation of 0..{npts - 1}")

    e = identity_perm(npts)
    elements: List[Perm] = [e]
    index: Dict[Perm, int] = {e: 0}
    table: List[List[int]] = []
    queue = deque([e])
    while queue:
        x = queue.popleft()
        row = []
        for g in gens:
            y = perm_compose(x, g)
            if y not in index:
                if len(elements) >= max_order:
                    raise PreconditionError(f"generated group exceeds max_order={max_order}")
                index[y] = len(elements)
                elements.append(y)
                queue.append(y)
            row.append(index[y])
        table.append(row)

    logger.debug("enumerated permutation group of order %d on %d points", len(elements), npts)
    return CayleyGraph.from_out_edges(table, elements=elements)


def cyclic_cayley_graph(n: int) -> CayleyGraph:
    """C_n with the single generator 1."""
    if n < 1:
        raise PreconditionError(f"cyclic group order must be positive, got {n}")
    return CayleyGraph.from_out_edges([[(x + 1) % n] for x in range(n)])


def dihedral_cayley_graph(n: int) -> CayleyGraph:
    """
    Dihedral group of order 2n, generated by a rotation r (generator 0)
    and a reflection s (generator 1).

    Element r^k s^t has index k + n*t.
    """
    if n < 1:
        raise PreconditionError(f"dihedral group needs n >= 1, got {n}")
    table = []
    for t in range(2):
        for k in range(n):
            if t == 0:
                rot = (k + 1) % n
            else:
                rot = (k - 1) % n + n
            table.append([rot, k + n * (1 - t)])
    return CayleyGraph.from_out_edges(table)


def symmetric_cayley_graph(n: int) -> CayleyGraph:
    """S_n generated by the transposition (0 1) and the n-cycle (0 1 ... n-1)."""
    if n < 2:
        raise PreconditionError(f"symmetric group needs n >= 2, got {n}")
    swap = list(range(n))
    swap[0], swap[1] = 1, 0
    cycle = [(i + 1) % n for i in range(n)]
    return cayley_graph_from_permutations([swap, cycle])


def direct_product_cayley_graph(A: CayleyGraph, B: CayleyGraph) -> CayleyGraph:
    """
    A x B with the generators of A (on the first factor) followed by those
    of B. Pair (a, b) has index a * |B| + b.
    """
    nb = B.order
    table = []
    for a in range(A.order):
        for b in range(nb):
            row = [A.out_edges[a][g] * nb + b for g in range(A.degree)]
            row += [a * nb + B.out_edges[b][g] for g in range(B.degree)]
            table.append(row)
    return CayleyGraph.from_out_edges(table)

"""The Group aggregate: a read-only view of a finite group built from its Cayley graph."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple

from cayleytools.config import MAX_ORDER
from cayleytools.errors import PreconditionError
from cayleytools.graph.cayley import CayleyGraph, SpanningTree
from cayleytools.group import algebra, classify, closure, orders as _orders
from cayleytools.group.table import build_operation_table
from cayleytools.numtheory import divisors, prime_factors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupInvariants:
    """
    Isomorphism invariants of a finite group, hashable so that groups can
    be bucketed by them before a finer identification.

    p_order_stats: ((p, counts), ...) sorted by p
    power_counts:  ((p, #distinct p-th powers), ...) sorted by p
    center_size:   order of the center (the whole group when abelian)
    """

    order: int
    factors: Tuple[int, ...]
    order_stats: Tuple[int, ...]
    p_order_stats: Tuple[Tuple[int, Tuple[int, ...]], ...]
    is_abelian: bool
    is_dihedral: bool
    center_size: int
    derived_size: int
    power_counts: Tuple[Tuple[int, int], ...]


class Group:
    """
    Finite group given by a Cayley graph.

    Everything (multiplication table, inverses, element orders, order
    statistics, abelian and dihedral flags) is computed in __init__; the
    instance is read-only afterwards.

    Parameters
    ----------
    graph : CayleyGraph
        Right-multiplication Cayley graph; vertex 0 is the identity.
    tree : (labels, parents), optional
        Spanning tree rooted at vertex 0. Defaults to graph.bfs(0).
    """

    def __init__(self, graph: CayleyGraph, tree: Optional[SpanningTree] = None):
        if tree is None:
            tree = graph.bfs(0)
        n = graph.order
        if n >= MAX_ORDER:
            logger.warning("group of order %d is above the soft limit %d; tables are O(n^2)", n, MAX_ORDER)

        factors = prime_factors(n)
        divs = divisors(n)
        op, inv = build_operation_table(graph, tree[0], tree[1])
        generators = graph.generators
        orders = _orders.element_orders(op)
        stats = _orders.order_stats(orders, n)
        p_stats = _orders.p_order_stats(orders, n)
        abelian = classify.check_abelian(op, generators)
        dihedral = classify.check_dihedral(op, orders, factors, abelian)

        self._graph = graph
        self._tree = tree
        self._op = tuple(tuple(row) for row in op)
        self._inv = tuple(inv)
        self._orders = tuple(orders)
        self._generators = tuple(generators)
        self._factors = factors
        self._divisors = divs
        self._order_stats = stats
        self._p_order_stats = p_stats
        self._is_abelian = abelian
        self._is_dihedral = dihedral
        logger.debug("built %r", self)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def graph(self) -> CayleyGraph:
        return self._graph

    @property
    def order(self) -> int:
        return len(self._op)

    @property
    def degree(self) -> int:
        return self._graph.degree

    @property
    def generators(self) -> Tuple[int, ...]:
        return self._generators

    @property
    def factors(self) -> Tuple[int, ...]:
        """Prime factors of the order, ascending, with multiplicity."""
        return self._factors

    @property
    def divisors(self) -> Tuple[int, ...]:
        return self._divisors

    @property
    def order_stats(self) -> Tuple[int, ...]:
        """order_stats[i] = number of elements whose order is divisors[i]."""
        return self._order_stats

    @property
    def p_order_stats(self) -> Dict[int, Tuple[int, ...]]:
        """p -> number of elements of order p**e, e = 0..multiplicity."""
        return dict(self._p_order_stats)

    @property
    def is_abelian(self) -> bool:
        return self._is_abelian

    @property
    def is_dihedral(self) -> bool:
        return self._is_dihedral

    @property
    def table(self) -> Tuple[Tuple[int, ...], ...]:
        return self._op

    @property
    def inverses(self) -> Tuple[int, ...]:
        return self._inv

    @property
    def orders(self) -> Tuple[int, ...]:
        return self._orders

    # ------------------------------------------------------------------
    # Element queries
    # ------------------------------------------------------------------

    def _check(self, x: int) -> int:
        if not 0 <= x < self.order:
            raise PreconditionError(f"element {x} out of range for a group of order {self.order}")
        return x

    def multiply(self, x: int, y: int) -> int:
        return self._op[self._check(x)][self._check(y)]

    def inverse(self, x: int) -> int:
        return self._inv[self._check(x)]

    def element_order(self, x: int) -> int:
        return self._orders[self._check(x)]

    def power(self, x: int, e: int) -> int:
        return algebra.power(self._op, self._inv, self._orders, self._check(x), e)

    def count_powers(self, k: int) -> int:
        """Number of distinct k-th powers."""
        return algebra.count_powers(self._op, self._inv, self._orders, k)

    def is_central(self, x: int) -> bool:
        return classify.is_central(self._op, self._generators, self._check(x))

    # ------------------------------------------------------------------
    # Subgroups
    # ------------------------------------------------------------------

    def generated_subgroup(self, generators: Iterable[int]) -> list[int]:
        return closure.generated_subgroup(self._op, generators)

    def is_generating_set(self, generators: Iterable[int]) -> bool:
        return closure.is_generating_set(self._op, generators)

    def center(self) -> list[int]:
        """Central elements. Raises AbelianGroupError for abelian groups."""
        return classify.center(self._op, self._generators, self._is_abelian)

    def commutator_set(self) -> list[int]:
        """The set of commutators (not closed under the operation in general)."""
        return classify.commutator_set(self._op, self._inv)

    def derived_subgroup(self) -> list[int]:
        return classify.derived_subgroup(self._op, self._inv)

    def invariants(self) -> GroupInvariants:
        n = self.order
        center_size = n if self._is_abelian else len(self.center())
        primes: Sequence[int] = sorted(self._p_order_stats)
        return GroupInvariants(
            order=n,
            factors=self._factors,
            order_stats=self._order_stats,
            p_order_stats=tuple((p, self._p_order_stats[p]) for p in primes),
            is_abelian=self._is_abelian,
            is_dihedral=self._is_dihedral,
            center_size=center_size,
            derived_size=len(self.derived_subgroup()),
            power_counts=tuple((p, self.count_powers(p)) for p in primes),
        )

    def __len__(self) -> int:
        return self.order

    def __repr__(self) -> str:
        return (
            f"Group(order={self.order}, abelian={self._is_abelian}, "
            f"dihedral={self._is_dihedral})"
        )

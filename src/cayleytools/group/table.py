"""Cayley table construction from a Cayley graph and a spanning tree.

Each element i gets the generator word that the spanning tree uses to reach
it from the identity. Replaying that word from any element j walks the
Cayley graph to j * i, which fills column i of the table in one pass.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from cayleytools.errors import PreconditionError
from cayleytools.graph.cayley import ROOT, CayleyGraph

logger = logging.getLogger(__name__)

Table = List[List[int]]


def _check_parents(graph: CayleyGraph, labels: Sequence[int], parents: Sequence[int]) -> None:
    if len(parents) != len(labels):
        raise PreconditionError(f"spanning tree has {len(parents)} parents for {len(labels)} labels")
    for v, g in enumerate(labels):
        expected = ROOT if g == ROOT else graph.in_edges[v][g]
        if parents[v] != expected:
            raise PreconditionError(
                f"tree parent of vertex {v} is {parents[v]}, but its label {g} leads back to {expected}"
            )


def element_words(
    graph: CayleyGraph,
    labels: Sequence[int],
    parents: Optional[Sequence[int]] = None,
) -> List[Tuple[int, ...]]:
    """
    Generator word of every element, in replay order from the identity.

    labels[i] is the generator of the tree edge into i (ROOT at vertex 0).
    If parents is given it must agree with labels:
    parents[i] == in_edges[i][labels[i]].
    """
    n = graph.order
    if len(labels) != n:
        raise PreconditionError(f"spanning tree has {len(labels)} labels for {n} vertices")
    if labels[0] != ROOT:
        raise PreconditionError("spanning tree must be rooted at the identity (vertex 0)")
    for v, g in enumerate(labels):
        if g != ROOT and not 0 <= g < graph.degree:
            raise PreconditionError(f"tree label {g} at vertex {v} is not a generator")
    if parents is not None:
        _check_parents(graph, labels, parents)

    words = []
    for i in range(n):
        word: List[int] = []
        j = i
        seen = {j}
        while labels[j] != ROOT:
            g = labels[j]
            word.append(g)
            j = graph.in_edges[j][g]
            if j in seen:
                raise PreconditionError(f"spanning tree has a cycle through vertex {j}")
            seen.add(j)
        if j != 0:
            raise PreconditionError(f"vertex {i} is not connected to the identity by the spanning tree")
        word.reverse()
        words.append(tuple(word))
    return words


def _check_columns(graph: CayleyGraph, op: Table) -> None:
    """
    Every row map i -> op[j][i] must commute with every generator:
    op[j][i * g] == op[j][i] * g. This holds exactly when the graph is a
    Cayley graph, and fails for Schreier graphs of non-regular actions.
    """
    out = graph.out_edges
    for j, row in enumerate(op):
        for i in range(len(op)):
            for g in range(graph.degree):
                if row[out[i][g]] != out[row[i]][g]:
                    raise PreconditionError(
                        f"not a Cayley graph: {j} * ({i} * g{g}) != ({j} * {i}) * g{g}"
                    )


def build_operation_table(
    graph: CayleyGraph,
    labels: Sequence[int],
    parents: Optional[Sequence[int]] = None,
) -> Tuple[Table, List[int]]:
    """
    Full multiplication table and inverse map.

    op[j][i] = j * i, inv[j] = the i with j * i = 0.
    """
    n = graph.order
    out = graph.out_edges
    words = element_words(graph, labels, parents)

    op: Table = [[0] * n for _ in range(n)]
    inv = [-1] * n
    for i, word in enumerate(words):
        for j in range(n):
            k = j
            for g in word:
                k = out[k][g]
            op[j][i] = k
            if k == 0:
                inv[j] = i

    _check_columns(graph, op)
    missing = [x for x in range(n) if inv[x] == -1]
    if missing:
        raise PreconditionError(f"elements {missing} have no inverse; the graph is not a Cayley graph")
    logger.debug("built %dx%d operation table, max word length %d", n, n, max(len(w) for w in words))
    return op, inv

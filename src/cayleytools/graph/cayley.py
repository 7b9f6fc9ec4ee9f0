"""Cayley graphs as labelled networkx multidigraphs.

Vertices are group elements 0..n-1 (0 is the identity). There is one edge
per (vertex, generator); the edge key is the generator index, so
x --g--> y means y = x * g.
"""
from __future__ import annotations

import logging
from typing import Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from cayleytools.errors import PreconditionError

logger = logging.getLogger(__name__)

# labels[i] is the generator of the tree edge into i, or -1 at the root;
# parents[i] is the tree predecessor of i, or -1.
SpanningTree = Tuple[List[int], List[int]]

ROOT = -1


class CayleyGraph:
    """
    Right-multiplication Cayley graph of a finite group.

    out_edges[x][g] = x * g
    in_edges[x][g]  = the unique y with out_edges[y][g] == x
    """

    def __init__(
        self,
        G: nx.MultiDiGraph,
        degree: int,
        elements: Optional[Sequence[Hashable]] = None,
    ):
        n = G.number_of_nodes()
        if n == 0:
            raise PreconditionError("a Cayley graph needs at least one vertex")
        if set(G.nodes) != set(range(n)):
            raise PreconditionError("Cayley graph vertices must be 0..n-1")
        if degree < 1:
            raise PreconditionError(f"a Cayley graph needs at least one generator, got {degree}")
        if elements is not None and len(elements) != n:
            raise PreconditionError(f"got {len(elements)} element labels for {n} vertices")

        out: List[List[int]] = [[-1] * degree for _ in range(n)]
        inn: List[List[int]] = [[-1] * degree for _ in range(n)]
        for u, v, g in G.edges(keys=True):
            if not (isinstance(g, int) and 0 <= g < degree):
                raise PreconditionError(f"edge {u}->{v} has generator key {g!r} outside 0..{degree - 1}")
            if out[u][g] != -1:
                raise PreconditionError(f"vertex {u} has two out-edges for generator {g}")
            if inn[v][g] != -1:
                raise PreconditionError(f"vertex {v} has two in-edges for generator {g}")
            out[u][g] = v
            inn[v][g] = u
        for x in range(n):
            if -1 in out[x]:
                raise PreconditionError(f"vertex {x} is missing an out-edge for generator {out[x].index(-1)}")

        self._G = G
        self._degree = degree
        self._out = tuple(tuple(row) for row in out)
        self._in = tuple(tuple(row) for row in inn)
        self._elements = tuple(elements) if elements is not None else None
        logger.debug("Cayley graph with %d vertices and %d generators", n, degree)

    @classmethod
    def from_out_edges(
        cls,
        table: Sequence[Sequence[int]],
        elements: Optional[Sequence[Hashable]] = None,
    ) -> "CayleyGraph":
        """Build from an explicit table: table[x][g] = x * g."""
        if not table:
            raise PreconditionError("empty out-edge table")
        degree = len(table[0])
        G = nx.MultiDiGraph()
        G.add_nodes_from(range(len(table)))
        for x, row in enumerate(table):
            if len(row) != degree:
                raise PreconditionError(f"row {x} has {len(row)} generators, expected {degree}")
            for g, y in enumerate(row):
                if not 0 <= y < len(table):
                    raise PreconditionError(f"out-edge {x} --{g}--> {y} leaves the vertex set")
                G.add_edge(x, y, key=g, generator=g)
        return cls(G, degree, elements=elements)

    @property
    def order(self) -> int:
        return len(self._out)

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def out_edges(self) -> Tuple[Tuple[int, ...], ...]:
        return self._out

    @property
    def in_edges(self) -> Tuple[Tuple[int, ...], ...]:
        return self._in

    @property
    def generators(self) -> Tuple[int, ...]:
        """The generator elements, i.e. the neighbours of the identity."""
        return self._out[0]

    @property
    def elements(self) -> Optional[Tuple[Hashable, ...]]:
        """Optional labels for the vertices (e.g. permutations)."""
        return self._elements

    @property
    def nx_graph(self) -> nx.MultiDiGraph:
        return self._G

    def is_connected(self) -> bool:
        return nx.is_strongly_connected(self._G)

    def bfs(self, root: int = 0) -> SpanningTree:
        """
        BFS spanning tree from root.

        Returns (labels, parents). Unreached vertices keep label -1, the same
        marker as the root, and are rejected by the table builder.
        """
        n = self.order
        labels = [ROOT] * n
        parents = [ROOT] * n
        for u, v in nx.bfs_edges(self._G, root):
            labels[v] = min(self._G[u][v])
            parents[v] = u
        return labels, parents

    def __repr__(self) -> str:
        return f"CayleyGraph(order={self.order}, degree={self.degree})"

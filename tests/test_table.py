"""Tests for cayleytools.group.table (Cayley table construction)."""
import random

import pytest

from cayleytools.errors import PreconditionError
from cayleytools.graph import (
    CayleyGraph,
    cyclic_cayley_graph,
    dihedral_cayley_graph,
    symmetric_cayley_graph,
)
from cayleytools.group.table import build_operation_table, element_words


GRAPHS = [
    cyclic_cayley_graph(1),
    cyclic_cayley_graph(5),
    dihedral_cayley_graph(3),
    dihedral_cayley_graph(4),
    symmetric_cayley_graph(4),
]


def _table(G):
    return build_operation_table(G, G.bfs(0)[0])


# --- words ---

def test_words_replay_to_element():
    G = dihedral_cayley_graph(5)
    words = element_words(G, G.bfs(0)[0])
    assert words[0] == ()
    for i, w in enumerate(words):
        k = 0
        for g in w:
            k = G.out_edges[k][g]
        assert k == i


# --- group laws ---

@pytest.mark.parametrize("G", GRAPHS)
def test_identity_law(G):
    op, _ = _table(G)
    for x in range(G.order):
        assert op[x][0] == x
        assert op[0][x] == x


@pytest.mark.parametrize("G", GRAPHS)
def test_inverse_law(G):
    op, inv = _table(G)
    for x in range(G.order):
        assert op[x][inv[x]] == 0
        assert op[inv[x]][x] == 0
        assert inv[inv[x]] == x


@pytest.mark.parametrize("G", GRAPHS)
def test_associativity_spot_check(G):
    op, _ = _table(G)
    rng = random.Random(0)
    n = G.order
    for _ in range(300):
        a, b, c = rng.randrange(n), rng.randrange(n), rng.randrange(n)
        assert op[op[a][b]][c] == op[a][op[b][c]]


@pytest.mark.parametrize("G", GRAPHS)
def test_right_multiplication_by_generators(G):
    op, _ = _table(G)
    for x in range(G.order):
        for g in range(G.degree):
            assert op[x][G.generators[g]] == G.out_edges[x][g]


def test_table_independent_of_spanning_tree():
    G = dihedral_cayley_graph(3)
    # r: 0->1->2, s: 2->5, r: 5->4->3
    labels = [-1, 0, 0, 0, 0, 1]
    assert build_operation_table(G, labels) == _table(G)


# --- malformed trees ---

def test_tree_wrong_length():
    G = cyclic_cayley_graph(4)
    with pytest.raises(PreconditionError):
        build_operation_table(G, [-1, 0, 0])


def test_tree_not_rooted_at_identity():
    G = cyclic_cayley_graph(3)
    with pytest.raises(PreconditionError):
        build_operation_table(G, [0, -1, 0])


def test_tree_missing_vertex():
    G = dihedral_cayley_graph(3)
    with pytest.raises(PreconditionError):
        build_operation_table(G, [-1, 0, 0, -1, 0, 1])


def test_tree_with_cycle():
    G = dihedral_cayley_graph(3)
    # 3 <- 4 <- 5 <- 3 along r
    with pytest.raises(PreconditionError):
        build_operation_table(G, [-1, 0, 0, 0, 0, 0])


def test_tree_bad_generator_label():
    G = cyclic_cayley_graph(3)
    with pytest.raises(PreconditionError):
        build_operation_table(G, [-1, 0, 4])


def test_disconnected_graph():
    G = CayleyGraph.from_out_edges([[1], [0], [3], [2]])
    with pytest.raises(PreconditionError):
        build_operation_table(G, G.bfs(0)[0])


# --- graphs that are not Cayley graphs ---

@pytest.mark.parametrize(
    "out_edges",
    [
        # each generator permutes the vertices, but the rows never close up
        [[3, 3], [1, 0], [2, 1], [0, 2]],
        # S3 acting on three points
        [[1, 0], [2, 2], [0, 1]],
    ],
)
def test_non_cayley_graph_rejected(out_edges):
    G = CayleyGraph.from_out_edges(out_edges)
    with pytest.raises(PreconditionError):
        build_operation_table(G, G.bfs(0)[0])


# --- parents ---

def test_bfs_parents_accepted():
    G = dihedral_cayley_graph(4)
    labels, parents = G.bfs(0)
    assert build_operation_table(G, labels, parents) == _table(G)


def test_parents_inconsistent_with_labels():
    G = dihedral_cayley_graph(3)
    labels = [-1, 0, 0, 0, 0, 1]
    # vertex 5 is reached from 2 along s, not from 1
    parents = [-1, 0, 1, 4, 5, 1]
    with pytest.raises(PreconditionError):
        build_operation_table(G, labels, parents)


def test_parents_wrong_length():
    G = cyclic_cayley_graph(3)
    with pytest.raises(PreconditionError):
        element_words(G, [-1, 0, 0], [-1, 0])

"""Tests for cayleytools.graph module."""
import networkx as nx
import pytest

from cayleytools.errors import PreconditionError
from cayleytools.graph import (
    ROOT,
    CayleyGraph,
    cayley_graph_from_permutations,
    cyclic_cayley_graph,
    dihedral_cayley_graph,
    direct_product_cayley_graph,
    symmetric_cayley_graph,
)
from cayleytools.io.permutations import parse_cycles


# --- construction ---

def test_from_out_edges_cyclic():
    G = CayleyGraph.from_out_edges([[1], [2], [0]])
    assert G.order == 3
    assert G.degree == 1
    assert G.generators == (1,)
    assert G.in_edges[0][0] == 2
    assert isinstance(G.nx_graph, nx.MultiDiGraph)


def test_in_edges_invert_out_edges():
    G = dihedral_cayley_graph(4)
    for x in range(G.order):
        for g in range(G.degree):
            assert G.in_edges[G.out_edges[x][g]][g] == x


def test_rejects_non_permutation_generator():
    with pytest.raises(PreconditionError):
        CayleyGraph.from_out_edges([[1], [1]])


def test_rejects_edge_leaving_vertex_set():
    with pytest.raises(PreconditionError):
        CayleyGraph.from_out_edges([[2], [0]])


def test_rejects_ragged_table():
    with pytest.raises(PreconditionError):
        CayleyGraph.from_out_edges([[1, 0], [0]])


def test_rejects_missing_out_edge():
    G = nx.MultiDiGraph()
    G.add_nodes_from(range(2))
    G.add_edge(0, 1, key=0)
    with pytest.raises(PreconditionError):
        CayleyGraph(G, 1)


def test_rejects_bad_vertex_labels():
    G = nx.MultiDiGraph()
    G.add_edge(1, 2, key=0)
    G.add_edge(2, 1, key=0)
    with pytest.raises(PreconditionError):
        CayleyGraph(G, 1)


# --- bfs ---

def test_bfs_tree_edges_are_graph_edges():
    G = dihedral_cayley_graph(5)
    labels, parents = G.bfs(0)
    assert labels[0] == ROOT
    for v in range(1, G.order):
        assert G.out_edges[parents[v]][labels[v]] == v


def test_bfs_disconnected_leaves_unreached_vertices_unlabelled():
    G = CayleyGraph.from_out_edges([[1], [0], [3], [2]])
    labels, _ = G.bfs(0)
    assert labels[2] == ROOT and labels[3] == ROOT
    assert not G.is_connected()


# --- builders ---

def test_cyclic_order():
    assert cyclic_cayley_graph(7).order == 7


def test_dihedral_order():
    G = dihedral_cayley_graph(6)
    assert G.order == 12
    assert G.degree == 2
    assert G.is_connected()


def test_symmetric_order():
    assert symmetric_cayley_graph(4).order == 24


def test_from_permutations_identity_first():
    G = cayley_graph_from_permutations([parse_cycles("(0 1 2)", 4), parse_cycles("(0 1)(2 3)", 4)])
    assert G.order == 12  # A4
    assert G.elements[0] == (0, 1, 2, 3)
    assert G.elements[G.generators[0]] == (1, 2, 0, 3)


def test_from_permutations_max_order():
    with pytest.raises(PreconditionError):
        cayley_graph_from_permutations([parse_cycles("(0 1 2 3 4)", 5), parse_cycles("(0 1)", 5)], max_order=50)


def test_from_permutations_rejects_non_permutation():
    with pytest.raises(PreconditionError):
        cayley_graph_from_permutations([(0, 0, 1)])


def test_direct_product():
    G = direct_product_cayley_graph(cyclic_cayley_graph(2), cyclic_cayley_graph(3))
    assert G.order == 6
    assert G.degree == 2
    assert G.is_connected()

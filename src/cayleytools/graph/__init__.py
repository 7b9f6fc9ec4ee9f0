from .cayley import CayleyGraph, SpanningTree, ROOT
from .builders import (
    cayley_graph_from_permutations,
    cyclic_cayley_graph,
    dihedral_cayley_graph,
    symmetric_cayley_graph,
    direct_product_cayley_graph,
)

__all__ = [
    "CayleyGraph",
    "SpanningTree",
    "ROOT",
    "cayley_graph_from_permutations",
    "cyclic_cayley_graph",
    "dihedral_cayley_graph",
    "symmetric_cayley_graph",
    "direct_product_cayley_graph",
]

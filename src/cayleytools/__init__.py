"""
cayleytools: multiplication tables, element orders and structural
classification of small finite groups given by Cayley graphs.
"""

from .errors import CayleyToolsError, PreconditionError, AbelianGroupError

from .graph.cayley import CayleyGraph
from .graph.builders import (
    cayley_graph_from_permutations,
    cyclic_cayley_graph,
    dihedral_cayley_graph,
    symmetric_cayley_graph,
    direct_product_cayley_graph,
)
from .group.group import Group, GroupInvariants
from .io.permutations import parse_cycles, format_cycles
from .viz.draw import draw_cayley_graph

__all__ = [
    # Errors
    "CayleyToolsError",
    "PreconditionError",
    "AbelianGroupError",
    # Graphs
    "CayleyGraph",
    "cayley_graph_from_permutations",
    "cyclic_cayley_graph",
    "dihedral_cayley_graph",
    "symmetric_cayley_graph",
    "direct_product_cayley_graph",
    # Groups
    "Group",
    "GroupInvariants",
    # IO
    "parse_cycles",
    "format_cycles",
    # Viz
    "draw_cayley_graph",
]

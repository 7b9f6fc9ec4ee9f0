from .table import element_words, build_operation_table
from .orders import element_orders, order_stats, p_order_stats
from .closure import generated_subgroup, is_generating_set
from .algebra import power, count_powers
from .classify import (
    is_central,
    check_abelian,
    check_dihedral,
    center,
    commutator_set,
    derived_subgroup,
)
from .group import Group, GroupInvariants

__all__ = [
    "element_words",
    "build_operation_table",
    "element_orders",
    "order_stats",
    "p_order_stats",
    "generated_subgroup",
    "is_generating_set",
    "power",
    "count_powers",
    "is_central",
    "check_abelian",
    "check_dihedral",
    "center",
    "commutator_set",
    "derived_subgroup",
    "Group",
    "GroupInvariants",
]

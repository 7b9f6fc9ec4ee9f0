from .permutations import (
    Perm,
    identity_perm,
    perm_compose,
    perm_inverse,
    is_perm,
    parse_cycles,
    format_cycles,
)

__all__ = [
    "Perm",
    "identity_perm",
    "perm_compose",
    "perm_inverse",
    "is_perm",
    "parse_cycles",
    "format_cycles",
]

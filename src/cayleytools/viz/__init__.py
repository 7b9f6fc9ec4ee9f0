from .draw import cayley_layout, draw_cayley_graph

__all__ = [
    "cayley_layout",
    "draw_cayley_graph",
]

from .layouts import highlight_colors, tree_layout
from .draw import draw_tree

__all__ = [
    "highlight_colors",
    "tree_layout",
    "draw_tree",
]

from .graph6 import edges_to_nx, tree_to_g6
from .sequence import format_father_code, parse_sequence

__all__ = [
    "edges_to_nx",
    "tree_to_g6",
    "format_father_code",
    "parse_sequence",
]

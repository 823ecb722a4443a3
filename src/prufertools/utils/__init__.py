from .connectivity import is_connected_edges, is_tree_edges
from .naming import expected_degrees, tree_name

__all__ = [
    "is_connected_edges",
    "is_tree_edges",
    "expected_degrees",
    "tree_name",
]

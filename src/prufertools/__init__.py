"""
prufertools: decode Prüfer sequences into labeled trees, with helpers for
checking, naming, exporting (graph6) and drawing the result.
"""

from .errors import PruferError, MalformedSequenceError, DecoderInvariantError
from .structures.queue import EligibilityQueue
from .decode import decode, decode_tree, validate_sequence, DecodeSession, PruferTree

# IO
from .io.sequence import parse_sequence, format_father_code
from .io.graph6 import edges_to_nx, tree_to_g6

# Shared utilities
from .utils.connectivity import is_connected_edges, is_tree_edges
from .utils.naming import expected_degrees, tree_name

__all__ = [
    # Errors
    "PruferError",
    "MalformedSequenceError",
    "DecoderInvariantError",
    # Core
    "EligibilityQueue",
    "decode",
    "decode_tree",
    "validate_sequence",
    "DecodeSession",
    "PruferTree",
    # IO
    "parse_sequence",
    "format_father_code",
    "edges_to_nx",
    "tree_to_g6",
    # Utils
    "is_connected_edges",
    "is_tree_edges",
    "expected_degrees",
    "tree_name",
]

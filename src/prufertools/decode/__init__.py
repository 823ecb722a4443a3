from .decoder import decode, decode_tree, validate_sequence
from .session import DecodeSession
from .tree import PruferTree

__all__ = [
    "decode",
    "decode_tree",
    "validate_sequence",
    "DecodeSession",
    "PruferTree",
]

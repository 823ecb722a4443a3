"""Prüfer sequence decoding.

At each step the front of the pending sequence is paired with the smallest
vertex that is neither referenced by a pending element nor already emitted
as a child. This is the usual "smallest current leaf" rule, done with a
linear scan instead of a priority queue: O(n * m) for n = m + 2 vertices.
"""
from __future__ import annotations

import logging
from numbers import Integral
from typing import Iterable, List, Tuple

from prufertools.decode.session import DecodeSession
from prufertools.decode.tree import PruferTree
from prufertools.errors import DecoderInvariantError, MalformedSequenceError

logger = logging.getLogger(__name__)


def validate_sequence(sequence: Iterable[int]) -> Tuple[int, ...]:
    """
    Materialize *sequence* and check it is a Prüfer sequence over {0, ..., m+1}.

    Raises MalformedSequenceError on a non-integer, negative or out-of-range
    element.
    """
    seq = tuple(sequence)
    n = len(seq) + 2
    out: List[int] = []
    for i, v in enumerate(seq):
        if isinstance(v, bool) or not isinstance(v, Integral):
            raise MalformedSequenceError(
                f"element {i} is not an integer vertex label: {v!r}"
            )
        v = int(v)
        if v < 0 or v >= n:
            raise MalformedSequenceError(
                f"element {i} is {v}, labels must lie in 0..{n - 1} "
                f"for a sequence of length {len(seq)}"
            )
        out.append(v)
    return tuple(out)


def _step(session: DecodeSession, father: int) -> Tuple[int, int]:
    child = session.first_available()
    if child is None:
        raise DecoderInvariantError(
            f"no eligible vertex to pair with {father} "
            f"after {len(session.edges)} edges"
        )
    session.consumed[child] = True
    session.refresh_enabled()
    session.edges.append((child, father))
    return child, father


def _final_edge(session: DecodeSession) -> Tuple[int, int]:
    rest = session.unconsumed()
    if len(rest) != 2:
        raise DecoderInvariantError(
            f"expected 2 unconsumed vertices at the end, found {len(rest)}: {rest}"
        )
    edge = (rest[0], rest[1])
    session.edges.append(edge)
    return edge


def decode(sequence: Iterable[int]) -> List[Tuple[int, int]]:
    """
    Decode a Prüfer sequence of length m into the m+1 edges of its tree.

    Edges are (child, father) pairs in the order they are produced. The last
    edge joins the two vertices never emitted as a child, smaller label first.

    >>> decode([0, 0])
    [(1, 0), (2, 0), (0, 3)]
    >>> decode([])
    [(0, 1)]
    """
    seq = validate_sequence(sequence)
    session = DecodeSession.start(seq)
    logger.debug("decoding sequence of length %d over %d vertices", len(seq), session.n)

    while True:
        father = session.queue.dequeue()
        if father is None:
            break
        child, _ = _step(session, father)
        logger.debug("step %d: child=%d father=%d", len(session.edges), child, father)

    u, v = _final_edge(session)
    logger.debug("final edge: %d-%d", u, v)
    return session.edges


def decode_tree(sequence: Iterable[int]) -> PruferTree:
    """Like decode(), but returns a PruferTree carrying the sequence too."""
    seq = validate_sequence(sequence)
    return PruferTree(sequence=seq, edges=tuple(decode(seq)))

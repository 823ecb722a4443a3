from __future__ import annotations


class PruferError(Exception):
    """Base class for all errors raised by prufertools."""


class MalformedSequenceError(PruferError, ValueError):
    """
    The input is not a Prüfer sequence over {0, ..., n-1}, n = len(seq) + 2.

    Raised before any edge is produced.
    """


class DecoderInvariantError(PruferError, RuntimeError):
    """
    A bookkeeping invariant of the decoder was broken.

    Either no eligible vertex existed at some step, or the number of
    unconsumed vertices left at the end was not exactly two.
    """

from __future__ import annotations

from typing import List, Sequence, Tuple

from prufertools.errors import MalformedSequenceError


def parse_sequence(line: str) -> List[int]:
    """
    Parse one line of whitespace-separated non-negative integers.

    A blank line is the empty sequence (the two-vertex tree).
    Range checks against the vertex universe are left to the decoder.
    """
    out: List[int] = []
    for i, tok in enumerate(line.split()):
        try:
            v = int(tok)
        except ValueError:
            raise MalformedSequenceError(f"token {i} is not an integer: {tok!r}") from None
        if v < 0:
            raise MalformedSequenceError(f"token {i} is negative: {v}")
        out.append(v)
    return out


def format_father_code(edges: Sequence[Tuple[int, int]]) -> str:
    """
    Render edges as two rows: children on the first, fathers on the second.
    Every cell, the last included, is followed by two spaces.

      | 1 |  | 2 |  | 0 |
      | 0 |  | 0 |  | 3 |
    """
    rows = [
        "".join(f"| {child} |  " for child, _ in edges),
        "".join(f"| {father} |  " for _, father in edges),
    ]
    return "\n".join(rows)

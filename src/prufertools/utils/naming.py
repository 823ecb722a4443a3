from __future__ import annotations

from collections import Counter
from typing import Sequence


def expected_degrees(sequence: Sequence[int]) -> list[int]:
    """Degree of every vertex in the tree a Prüfer sequence encodes.

    deg(v) = 1 + (number of occurrences of v in the sequence).
    """
    n = len(sequence) + 2
    counts = Counter(sequence)
    return [1 + counts[v] for v in range(n)]


def tree_name(edges: list[tuple[int, int]], n: int | None = None) -> str:
    """Human-readable name for a tree from its edge list.

    Handles: K1, K2, P{n}, K1,{r}, fork, and general T{nv}[{deg_seq}].
    *n* only sizes the degree array; labels beyond it still count.
    """
    if not edges:
        return "K1"

    nedges = len(edges)
    nv = nedges + 1
    top_label = max(max(u, v) for u, v in edges)
    n = top_label + 1 if n is None else max(n, top_label + 1)

    deg = [0] * n
    for u, v in edges:
        deg[u] += 1
        deg[v] += 1
    degs = sorted((d for d in deg if d > 0), reverse=True)
    top = degs[0]

    if nedges == 1:
        return "K2"
    if top <= 2:
        return f"P{nv}"
    if top == nedges:
        return f"K1,{nedges}"
    # a single degree-3 vertex with one arm of length 2
    if nv == 5 and top == 3:
        return "fork"
    return f"T{nv}[{''.join(str(d) for d in degs)}]"

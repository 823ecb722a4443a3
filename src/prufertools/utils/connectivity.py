from __future__ import annotations

from collections import defaultdict
from typing import Iterable


def _adjacency(edges: Iterable[tuple[int, int]]) -> dict[int, set[int]]:
    adj: dict[int, set[int]] = defaultdict(set)
    for u, v in edges:
        adj[u].add(v)
        adj[v].add(u)
    return adj


def _reach(adj: dict[int, set[int]], start: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for nbr in adj[node]:
            if nbr not in seen:
                seen.add(nbr)
                stack.append(nbr)
    return seen


def is_connected_edges(
    edges: list[tuple[int, int]],
    vertices: Iterable[int] | None = None,
) -> bool:
    """Check whether an edge list forms a connected graph.

    If *vertices* is given, isolated vertices in it count against
    connectivity. With no vertices at all the graph is vacuously connected.
    """
    verts = set(vertices) if vertices is not None else {x for e in edges for x in e}
    if len(verts) <= 1:
        return True
    adj = _adjacency((u, v) for u, v in edges if u in verts and v in verts)
    return _reach(adj, next(iter(verts))) == verts


def is_tree_edges(edges: list[tuple[int, int]], n: int) -> bool:
    """True iff *edges* form a spanning tree on vertices 0..n-1.

    That is: exactly n-1 edges, all endpoints in range, no self-loops and
    no repeated edge, and connected.
    """
    if n <= 0:
        return not edges
    if len(edges) != n - 1:
        return False
    seen: set[frozenset[int]] = set()
    for u, v in edges:
        if u == v or not (0 <= u < n and 0 <= v < n):
            return False
        key = frozenset((u, v))
        if key in seen:
            return False
        seen.add(key)
    # n-1 distinct edges plus connectivity rules out cycles
    return is_connected_edges(edges, vertices=range(n))

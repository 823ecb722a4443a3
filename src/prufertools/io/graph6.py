from __future__ import annotations

from typing import Iterable, Tuple

import networkx as nx


def edges_to_nx(edges: Iterable[Tuple[int, int]], n: int) -> nx.Graph:
    """
    Build a simple undirected graph on vertices 0..n-1 from an edge list.

    Vertices that no edge touches are still added.
    """
    G = nx.empty_graph(n)
    G.add_edges_from(edges)
    return G


def tree_to_g6(edges: Iterable[Tuple[int, int]], n: int) -> str:
    """
    graph6 string (no header, no newline) for the graph on 0..n-1 with *edges*.
    """
    G = edges_to_nx(edges, n)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()

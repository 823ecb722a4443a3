from __future__ import annotations

import networkx as nx


def tree_layout(G: nx.Graph, seed: int = 7, iterations: int = 300):
    """
    Spring layout for a decoded tree, seeded so repeated draws agree.
    """
    return nx.spring_layout(G, seed=seed, iterations=iterations)


def highlight_colors(G: nx.Graph, internal: str = "tab:orange", leaf: str = "tab:blue"):
    """
    Node colors in G.nodes() order: leaves (degree <= 1) vs internal vertices.
    """
    return [leaf if G.degree(v) <= 1 else internal for v in G.nodes()]

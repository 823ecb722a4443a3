from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from prufertools.decode.tree import PruferTree
from prufertools.utils.naming import tree_name
from .layouts import highlight_colors, tree_layout


def draw_tree(
    tree: PruferTree,
    *,
    ax=None,
    seed: int = 7,
    node_size: int = 300,
    edge_width: float = 1.2,
    save_path: str | None = None,
):
    """
    Draw a decoded tree with vertex labels; leaves and internal vertices
    get different colors. The title shows the sequence and the tree shape.

    If save_path is set the figure is written there as PNG and closed.
    Returns the matplotlib Figure.
    """
    G = tree.to_nx()
    pos = tree_layout(G, seed=seed)

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    ax.set_axis_off()
    ax.set_title(
        f"{list(tree.sequence)}   {tree_name(list(tree.edges), tree.vertex_number)}"
        f"   |V|={G.number_of_nodes()}  |E|={G.number_of_edges()}"
    )
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        with_labels=True,
        node_color=highlight_colors(G),
        node_size=node_size,
        width=edge_width,
    )
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=200)
        plt.close(fig)
    return fig

"""Tests for prufertools.viz (rendered off-screen)."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import networkx as nx  # noqa: E402

from prufertools.cli import main  # noqa: E402
from prufertools.decode import decode_tree  # noqa: E402
from prufertools.viz.draw import draw_tree  # noqa: E402
from prufertools.viz.layouts import highlight_colors, tree_layout  # noqa: E402


def test_tree_layout_positions_every_vertex():
    G = decode_tree([3, 3, 3, 4]).to_nx()
    pos = tree_layout(G)
    assert set(pos) == set(range(6))


def test_highlight_colors_leaves_vs_internal():
    G = nx.star_graph(3)
    colors = highlight_colors(G, internal="red", leaf="blue")
    assert colors == ["red", "blue", "blue", "blue"]


def test_draw_tree_saves_png(tmp_path):
    path = tmp_path / "tree.png"
    draw_tree(decode_tree([0, 0]), save_path=str(path))
    assert path.exists() and path.stat().st_size > 0


def test_draw_tree_on_given_axes():
    fig, ax = plt.subplots()
    out = draw_tree(decode_tree([1, 2, 3]), ax=ax)
    assert out is fig
    assert "P5" in ax.get_title()
    plt.close(fig)


def test_cli_draw_flag(tmp_path, capsys):
    path = tmp_path / "cli.png"
    assert main(["--draw", str(path), "0"]) == 0
    assert path.exists()

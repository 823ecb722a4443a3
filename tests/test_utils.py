"""Tests for prufertools.utils module."""
from prufertools.utils.connectivity import is_connected_edges, is_tree_edges
from prufertools.utils.naming import expected_degrees, tree_name


# --- connectivity ---

def test_is_connected_empty():
    assert is_connected_edges([]) is True


def test_is_connected_two_isolated():
    assert is_connected_edges([], vertices={0, 1}) is False


def test_is_connected_triangle():
    assert is_connected_edges([(0, 1), (1, 2), (0, 2)]) is True


def test_is_connected_disconnected():
    assert is_connected_edges([(0, 1), (2, 3)]) is False


# --- is_tree_edges ---

def test_is_tree_star():
    assert is_tree_edges([(1, 0), (2, 0), (0, 3)], 4)


def test_is_tree_rejects_cycle_plus_isolated():
    # right edge count, but a triangle leaves vertex 3 out
    assert not is_tree_edges([(0, 1), (1, 2), (2, 0)], 4)


def test_is_tree_rejects_wrong_count():
    assert not is_tree_edges([(0, 1)], 3)


def test_is_tree_rejects_self_loop_and_duplicate():
    assert not is_tree_edges([(0, 0), (0, 1)], 3)
    assert not is_tree_edges([(0, 1), (1, 0)], 3)


def test_is_tree_rejects_out_of_range():
    assert not is_tree_edges([(0, 5)], 2)


def test_is_tree_single_vertex():
    assert is_tree_edges([], 1)


# --- naming ---

def test_expected_degrees():
    assert expected_degrees([3, 3, 3, 4]) == [1, 1, 1, 4, 2, 1]
    assert expected_degrees([]) == [1, 1]


def test_tree_name_k1():
    assert tree_name([]) == "K1"


def test_tree_name_k2():
    assert tree_name([(0, 1)]) == "K2"


def test_tree_name_p4():
    assert tree_name([(0, 1), (1, 2), (2, 3)]) == "P4"


def test_tree_name_star():
    assert tree_name([(1, 0), (2, 0), (0, 3)]) == "K1,3"


def test_tree_name_fork():
    assert tree_name([(0, 1), (1, 2), (2, 3), (2, 4)]) == "fork"


def test_tree_name_general():
    edges = [(0, 3), (1, 3), (2, 3), (3, 4), (4, 5)]
    assert tree_name(edges, 6) == "T6[421111]"


def test_tree_name_n_smaller_than_labels():
    # n too small for the labels present: degree array grows to fit
    assert tree_name([(0, 5)], 3) == "K2"
    assert tree_name([(0, 7), (1, 7), (2, 7)], 4) == "K1,3"

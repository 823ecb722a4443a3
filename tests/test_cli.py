"""Tests for the prufer-decode command line."""
import io

from prufertools.cli import main


def test_positional_values(capsys):
    assert main(["0", "0"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "| 1 |  | 2 |  | 0 |  ",
        "| 0 |  | 0 |  | 3 |  ",
    ]


def test_reads_one_line_from_stdin(capsys):
    assert main([], stdin=io.StringIO("3 3 3 4\nignored\n")) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "| 0 |  | 1 |  | 2 |  | 3 |  | 4 |  "
    assert out[1] == "| 3 |  | 3 |  | 3 |  | 4 |  | 5 |  "


def test_empty_line_gives_single_edge(capsys):
    assert main([], stdin=io.StringIO("\n")) == 0
    assert capsys.readouterr().out.splitlines() == ["| 0 |  ", "| 1 |  "]


def test_name_and_g6_flags(capsys):
    assert main(["--name", "--g6", "0", "0"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "shape: K1,3" in out
    assert any(line.startswith("graph6: ") for line in out)


def test_out_of_range_exit_code(capsys):
    assert main(["7", "0"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_bad_token_exit_code(capsys):
    assert main([], stdin=io.StringIO("1 two\n")) == 2
    assert "error:" in capsys.readouterr().err


def test_name_flag_general_tree(capsys):
    assert main(["--name", "3", "3", "3", "4"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "shape: T6[421111]"

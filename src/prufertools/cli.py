"""Command-line entry point: read one Prüfer sequence, print its tree."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from prufertools.decode.decoder import decode_tree
from prufertools.errors import DecoderInvariantError, MalformedSequenceError
from prufertools.io.graph6 import tree_to_g6
from prufertools.io.sequence import format_father_code, parse_sequence
from prufertools.utils.naming import tree_name

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prufer-decode",
        description="Decode a Prüfer sequence into the edges of its labeled tree.",
    )
    parser.add_argument(
        "values", nargs="*",
        help="sequence elements; if omitted, one line is read from stdin",
    )
    parser.add_argument("--g6", action="store_true", help="also print the tree in graph6")
    parser.add_argument("--name", action="store_true", help="also print the tree shape")
    parser.add_argument("--draw", metavar="PATH", default=None,
                        help="save a drawing of the tree to PATH (PNG)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log decoding steps")
    return parser


def _read_line(stdin) -> str:
    if stdin.isatty():
        print("enter the Prüfer sequence, elements separated by spaces:", file=sys.stderr)
    return stdin.readline()


def main(argv: Optional[List[str]] = None, stdin=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    stdin = sys.stdin if stdin is None else stdin

    try:
        line = " ".join(args.values) if args.values else _read_line(stdin)
        tree = decode_tree(parse_sequence(line))
    except MalformedSequenceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except DecoderInvariantError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_father_code(tree.edges))
    if args.name:
        print("shape:", tree_name(list(tree.edges), tree.vertex_number))
    if args.g6:
        print("graph6:", tree_to_g6(tree.edges, tree.vertex_number))
    if args.draw:
        from prufertools.viz.draw import draw_tree

        draw_tree(tree, save_path=args.draw)
        logger.info("saved drawing to %s", args.draw)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Decode every Prüfer sequence of length m and tabulate tree shapes.

Cayley's formula says there are n^(n-2) labeled trees on n = m + 2 vertices;
the decoder is a bijection, so every sequence must give a distinct tree.
"""
import argparse
from collections import Counter
from itertools import product

from prufertools.decode import decode
from prufertools.io.graph6 import tree_to_g6
from prufertools.utils.naming import tree_name


def run(m: int) -> Counter:
    n = m + 2
    shapes: Counter = Counter()
    seen = set()
    for seq in product(range(n), repeat=m):
        edges = decode(seq)
        seen.add(tree_to_g6(edges, n))
        shapes[tree_name(edges, n)] += 1

    print(f"m={m}  n={n}  sequences={n ** m}  distinct labeled trees={len(seen)}")
    for name, count in sorted(shapes.items(), key=lambda kv: (-kv[1], kv[0])):
        print(f"  {name:>12s}  {count}")
    return shapes


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--m', type=int, default=4,
                        help='Sequence length (default: 4; m=6 already gives 262144 trees)')
    args = parser.parse_args()
    run(args.m)


if __name__ == '__main__':
    main()

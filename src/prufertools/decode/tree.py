from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import networkx as nx

from prufertools.io.graph6 import edges_to_nx


@dataclass(frozen=True)
class PruferTree:
    """
    A decoded labeled tree together with the sequence it came from.

    sequence: the Prüfer sequence (length m)
    edges:    m+1 (child, father) pairs in decoding order
    """

    sequence: Tuple[int, ...]
    edges: Tuple[Tuple[int, int], ...]

    @property
    def vertex_number(self) -> int:
        return len(self.sequence) + 2

    @property
    def edge_number(self) -> int:
        return len(self.sequence) + 1

    @property
    def father_code(self) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
        """2 x edge_number matrix: row 0 children, row 1 fathers."""
        children = tuple(c for c, _ in self.edges)
        fathers = tuple(f for _, f in self.edges)
        return children, fathers

    def degrees(self) -> List[int]:
        deg = [0] * self.vertex_number
        for u, v in self.edges:
            deg[u] += 1
            deg[v] += 1
        return deg

    def to_nx(self) -> nx.Graph:
        return edges_to_nx(self.edges, self.vertex_number)

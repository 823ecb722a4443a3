from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from prufertools.structures.queue import EligibilityQueue


@dataclass
class DecodeSession:
    """
    Bookkeeping for a single decode call.

    queue:    sequence elements not yet paired, in arrival order
    enabled:  enabled[v] is True iff v does not occur among the queued elements
    consumed: consumed[v] is True once v has been emitted as a child (monotonic)
    edges:    (child, father) pairs in production order
    """

    n: int
    queue: EligibilityQueue[int]
    enabled: List[bool]
    consumed: List[bool]
    edges: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def start(cls, sequence: Sequence[int]) -> "DecodeSession":
        n = len(sequence) + 2
        session = cls(
            n=n,
            queue=EligibilityQueue(sequence),
            enabled=[False] * n,
            consumed=[False] * n,
        )
        session.refresh_enabled()
        return session

    def refresh_enabled(self) -> None:
        for v in range(self.n):
            self.enabled[v] = not self.queue.contains(v)

    def first_available(self) -> Optional[int]:
        """Smallest vertex that is enabled and not consumed, or None."""
        for v in range(self.n):
            if self.enabled[v] and not self.consumed[v]:
                return v
        return None

    def unconsumed(self) -> List[int]:
        return [v for v in range(self.n) if not self.consumed[v]]

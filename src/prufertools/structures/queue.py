from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class EligibilityQueue(Generic[T]):
    """
    FIFO over the still-pending elements of a sequence.

    dequeue() on an empty queue returns None rather than raising, so callers
    can use it as a loop-termination signal.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: Deque[T] = deque()
        for v in values:
            self.enqueue(v)

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> Optional[T]:
        if not self._items:
            return None
        return self._items.popleft()

    def contains(self, value: T) -> bool:
        """Linear membership test over the queued elements."""
        return value in self._items

    def is_empty(self) -> bool:
        return not self._items

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"EligibilityQueue({list(self._items)!r})"

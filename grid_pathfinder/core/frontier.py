"""Min-priority queue of cells waiting to be expanded."""

from __future__ import annotations

import itertools
from heapq import heappop, heappush
from typing import Iterator, List, Tuple

from .coordinates import Coord


class PriorityFrontier:
    """Heap of ``(priority, sequence, coord)`` entries.

    Equal priorities pop in insertion order. There is no decrease-key: a
    coordinate may be pushed several times and stale copies are left for
    the caller to skip.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Coord]] = []
        self._sequence: Iterator[int] = itertools.count()

    def push(self, coord: Coord, priority: int) -> None:
        heappush(self._heap, (priority, next(self._sequence), coord))

    def pop(self) -> Coord:
        """Remove and return the lowest-priority coordinate."""
        return heappop(self._heap)[2]

    def pop_entry(self) -> Tuple[int, Coord]:
        """Like :meth:`pop` but also return the entry's priority."""
        priority, _, coord = heappop(self._heap)
        return priority, coord

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["PriorityFrontier"]

"""Turn a predecessor map into a bounded output path."""

from __future__ import annotations

from typing import List, MutableSequence

from .coordinates import Coord
from .grid import Grid
from .search import PredecessorMap


NO_PATH = -1


def write_path(
    grid: Grid,
    predecessors: PredecessorMap,
    start: Coord,
    target: Coord,
    out_buffer: MutableSequence[int],
    capacity: int,
) -> int:
    """Return the number of moves from ``start`` to ``target``.

    When the path fits in ``capacity`` its cell indices are written to
    ``out_buffer[0:length]`` in start-to-target order, excluding ``start``.
    Otherwise ``out_buffer`` is left untouched. An empty ``predecessors``
    means no path and yields :data:`NO_PATH`.
    """

    if not predecessors:
        return NO_PATH

    length = 0
    current = target
    while current != start:
        length += 1
        current = predecessors[current]

    if length <= capacity:
        current = target
        cursor = length
        while current != start:
            cursor -= 1
            out_buffer[cursor] = grid.index_of(current)
            current = predecessors[current]

    return length


def path_coords(predecessors: PredecessorMap, start: Coord, target: Coord) -> List[Coord]:
    """Return the path cells after ``start`` up to and including ``target``."""

    if not predecessors:
        return []
    path: List[Coord] = []
    current = target
    while current != start:
        path.append(current)
        current = predecessors[current]
    path.reverse()
    return path


__all__ = ["NO_PATH", "path_coords", "write_path"]

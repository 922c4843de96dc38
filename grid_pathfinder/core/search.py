"""A* search over a :class:`~grid_pathfinder.core.grid.Grid`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from .coordinates import Coord
from .frontier import PriorityFrontier
from .grid import Grid

logger = logging.getLogger(__name__)

_NO_ENTRY = -1


class PredecessorMap:
    """Map each reached cell to the cell it was cheapest to arrive from.

    Entries live in a flat list indexed by the grid's row-major index, so
    only in-bounds coordinates can be stored.
    """

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._prev: List[int] = [_NO_ENTRY] * grid.size
        self._count = 0

    def __setitem__(self, coord: Coord, prev: Coord) -> None:
        index = self._grid.index_of(coord)
        if self._prev[index] == _NO_ENTRY:
            self._count += 1
        self._prev[index] = self._grid.index_of(prev)

    def __getitem__(self, coord: Coord) -> Coord:
        if coord not in self:
            raise KeyError(coord)
        return self._grid.coord_of(self._prev[self._grid.index_of(coord)])

    def __contains__(self, coord: object) -> bool:
        if not isinstance(coord, Coord) or not self._grid.in_bounds(coord):
            return False
        return self._prev[self._grid.index_of(coord)] != _NO_ENTRY

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def clear(self) -> None:
        self._prev = [_NO_ENTRY] * self._grid.size
        self._count = 0


@dataclass
class SearchResult:
    """Outcome of one :func:`a_star` run."""

    predecessors: PredecessorMap
    found: bool = False
    expanded: int = 0
    costs: List[int] = field(default_factory=list, repr=False)


def a_star(grid: Grid, start: Coord, target: Coord) -> SearchResult:
    """Search ``grid`` for the shortest path from ``start`` to ``target``.

    ``start`` and ``target`` must be distinct passable cells. Every move
    costs 1 and the Manhattan heuristic never overestimates, so the first
    time ``target`` leaves the frontier its cost is minimal. The returned
    predecessor map is empty when ``target`` cannot be reached.
    """

    cost: List[int] = [_NO_ENTRY] * grid.size
    cost[grid.index_of(start)] = 0
    predecessors = PredecessorMap(grid)

    frontier = PriorityFrontier()
    frontier.push(start, 0)

    found = False
    expanded = 0
    while not frontier.is_empty():
        priority, current = frontier.pop_entry()
        current_cost = cost[grid.index_of(current)]

        if current == target:
            found = True
            break

        # A cheaper copy of this cell was already expanded.
        if priority > current_cost + grid.heuristic(current, target):
            continue
        expanded += 1

        new_cost = current_cost + 1
        for nxt in grid.neighbors(current):
            index = grid.index_of(nxt)
            if cost[index] == _NO_ENTRY or new_cost < cost[index]:
                cost[index] = new_cost
                predecessors[nxt] = current
                frontier.push(nxt, new_cost + grid.heuristic(nxt, target))

    if not found:
        predecessors.clear()

    logger.debug(
        "A* %s -> %s on %r: found=%s expanded=%d",
        start,
        target,
        grid,
        found,
        expanded,
    )
    return SearchResult(predecessors=predecessors, found=found, expanded=expanded, costs=cost)


__all__ = ["PredecessorMap", "SearchResult", "a_star"]

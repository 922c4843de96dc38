"""Read-only view over a row-major passability buffer."""

from __future__ import annotations

from typing import List, Sequence

from .coordinates import Coord


class Grid:
    """Answer bounds, passability and adjacency questions for a map.

    The grid does not copy ``cells``; callers must not mutate the buffer
    while a search over it is running.
    """

    def __init__(self, cells: Sequence[int], width: int, height: int) -> None:
        assert width >= 1 and height >= 1
        assert len(cells) == width * height
        self.cells = cells
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        return self.width * self.height

    # ------------------------------------------------------------------
    # Cell queries
    # ------------------------------------------------------------------
    def in_bounds(self, coord: Coord) -> bool:
        """Return ``True`` if ``coord`` lies inside the map."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def is_passable(self, coord: Coord) -> bool:
        """Return ``True`` if ``coord`` is inside the map and not blocked."""
        if not self.in_bounds(coord):
            return False
        return self.cells[self.index_of(coord)] != 0

    def index_of(self, coord: Coord) -> int:
        """Return the row-major index of ``coord``."""
        assert self.in_bounds(coord), f"{coord} is outside the map"
        return coord.y * self.width + coord.x

    def coord_of(self, index: int) -> Coord:
        """Return the coordinate stored at row-major ``index``."""
        assert 0 <= index < self.size, f"index {index} is outside the map"
        return Coord(index % self.width, index // self.width)

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------
    def neighbors(self, coord: Coord) -> List[Coord]:
        """Return passable cells adjacent to ``coord``.

        Candidates are checked up, down, left, right. The search relies on
        this order to break ties between equally short paths.
        """

        x, y = coord
        candidates = (
            Coord(x, y - 1),
            Coord(x, y + 1),
            Coord(x - 1, y),
            Coord(x + 1, y),
        )
        return [c for c in candidates if self.is_passable(c)]

    @staticmethod
    def heuristic(a: Coord, b: Coord) -> int:
        """Manhattan distance, exact on an empty 4-neighbour grid."""
        return abs(a.x - b.x) + abs(a.y - b.y)

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"


__all__ = ["Grid"]

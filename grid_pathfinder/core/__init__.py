"""Core A* components: grid view, frontier, search and reconstruction."""

from .coordinates import UNSET, Coord
from .errors import BadInputError
from .frontier import PriorityFrontier
from .grid import Grid
from .reconstruct import NO_PATH, path_coords, write_path
from .search import PredecessorMap, SearchResult, a_star

__all__ = [
    "Coord",
    "UNSET",
    "BadInputError",
    "Grid",
    "PriorityFrontier",
    "PredecessorMap",
    "SearchResult",
    "a_star",
    "NO_PATH",
    "path_coords",
    "write_path",
]

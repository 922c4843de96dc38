"""Shortest paths on 4-connected passability grids using A*."""

from .core.coordinates import UNSET, Coord
from .core.errors import BadInputError
from .core.grid import Grid
from .pathfinder import find_path
from .persistence.map_io import GridMap, MapFormatError, load_map, save_map

__all__ = [
    "find_path",
    "BadInputError",
    "Coord",
    "UNSET",
    "Grid",
    "GridMap",
    "MapFormatError",
    "load_map",
    "save_map",
]

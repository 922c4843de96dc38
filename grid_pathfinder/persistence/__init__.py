"""Map file persistence."""

from .map_io import GridMap, MapFormatError, load_map, map_to_dict, parse_map, save_map

__all__ = ["GridMap", "MapFormatError", "load_map", "save_map", "parse_map", "map_to_dict"]

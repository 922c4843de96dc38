"""Implementations of development CLI commands."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...config import CONFIG, Config
from ...core.coordinates import Coord
from ...core.errors import BadInputError
from ...pathfinder import find_path
from ...persistence.map_io import GridMap, MapFormatError, load_map, save_map
from ..observer import log_event, print_stats, record_search
from ..profiling import profile_searches
from .terminal_view import get_view

logger = logging.getLogger(__name__)


HELP_TEXT = """Available commands:
  /load <path>                 load a YAML map
  /save <path>                 write the current map as YAML
  /capacity <n>                set the output buffer size
  /find [sx sy tx ty]          search the current map (defaults to the map's endpoints)
  /view                        toggle map rendering after each search
  /stats                       print search statistics
  /profile [n]                 profile the last search n times
  /quit                        exit"""


def new_state(cfg: Config | None = None) -> Dict[str, Any]:
    """Return a fresh CLI session state using ``cfg`` (the loaded config by default)."""

    cfg = cfg if cfg is not None else CONFIG
    return {
        "running": True,
        "config": cfg,
        "map": None,
        "capacity": cfg.search.default_capacity,
        "last_find": None,
        "events": [],
    }


def help_command(state: Dict[str, Any]) -> None:
    print(HELP_TEXT)


def _config(state: Dict[str, Any]) -> Config:
    return state.get("config") or CONFIG


def _resolve_map_path(path: str, maps_dir: str) -> Path:
    candidate = Path(path)
    if not candidate.exists():
        in_maps_dir = Path(maps_dir) / candidate
        if in_maps_dir.exists():
            return in_maps_dir
    return candidate


def load(state: Dict[str, Any], path: str) -> Optional[GridMap]:
    path = _resolve_map_path(path, _config(state).paths.maps_dir)
    try:
        grid_map = load_map(path)
    except (OSError, MapFormatError) as e:
        logger.error("Error loading map %s: %s", path, e)
        return None
    state["map"] = grid_map
    state["last_find"] = None
    logger.info("Loaded %dx%d map from %s", grid_map.width, grid_map.height, path)
    return grid_map


def save(state: Dict[str, Any], path: str) -> None:
    grid_map: GridMap | None = state.get("map")
    if grid_map is None:
        logger.error("No map loaded. Use /load first.")
        return
    try:
        save_map(grid_map, path)
        logger.info("Map saved to %s", path)
    except OSError as e:
        logger.error("Error saving map: %s", e)


def capacity(state: Dict[str, Any], value: str) -> None:
    try:
        state["capacity"] = int(value)
    except ValueError:
        logger.error("Invalid capacity: %s", value)
        return
    logger.info("Output buffer size set to %s", state["capacity"])


def _endpoints(grid_map: GridMap, args: Sequence[str]) -> tuple[Coord, Coord] | None:
    if len(args) >= 4:
        try:
            sx, sy, tx, ty = (int(a) for a in args[:4])
        except ValueError:
            logger.error("Coordinates must be integers: %s", " ".join(args[:4]))
            return None
        return Coord(sx, sy), Coord(tx, ty)
    if args:
        logger.error("Usage: /find [sx sy tx ty]")
        return None
    if grid_map.start is None or grid_map.target is None:
        logger.error("Map has no start/target; pass them as /find sx sy tx ty")
        return None
    return grid_map.start, grid_map.target


def _buffer_size(state: Dict[str, Any], grid_map: GridMap) -> tuple[int, int]:
    """Return the requested capacity and the buffer size to allocate for it.

    No path on the map is longer than its cell count, so larger capacities
    allocate only that many slots.
    """
    requested = int(state.get("capacity", 0))
    return requested, min(max(requested, 0), grid_map.width * grid_map.height)


def find(state: Dict[str, Any], args: Sequence[str]) -> Optional[int]:
    """Run ``find_path`` on the loaded map and print the result."""

    grid_map: GridMap | None = state.get("map")
    if grid_map is None:
        logger.error("No map loaded. Use /load first.")
        return None
    endpoints = _endpoints(grid_map, args)
    if endpoints is None:
        return None
    start, target = endpoints

    requested, size = _buffer_size(state, grid_map)
    buffer: List[int] = [0] * size
    began = time.perf_counter()
    try:
        length = find_path(
            start.x, start.y, target.x, target.y,
            grid_map.cells, grid_map.width, grid_map.height,
            buffer, size if requested >= 0 else requested,
        )
    except BadInputError as e:
        logger.error("Bad input: %s", e)
        return None
    record_search(time.perf_counter() - began, length)
    state["last_find"] = (start, target)
    log_event(
        "find",
        {"start": tuple(start), "target": tuple(target), "length": length},
        state.setdefault("events", []),
    )

    if length < 0:
        print("No path.")
        return length
    print(f"Length: {length}")
    if length > size:
        print(f"Path does not fit in buffer of size {requested}.")
        return length
    indices = buffer[:length]
    print(f"Path: {indices}")

    grid = grid_map.grid()
    get_view().render(grid, [grid.coord_of(i) for i in indices], start, target)
    return length


def view(state: Dict[str, Any]) -> None:
    state["view"] = get_view().toggle()
    logger.info("Map view %s.", "enabled" if state["view"] else "disabled")


def stats(state: Dict[str, Any]) -> None:
    print_stats()


def profile(state: Dict[str, Any], count_str: str | None = None) -> None:
    try:
        count = int(count_str) if count_str else 100
        if count <= 0:
            logger.info("Number of searches must be positive.")
            return
    except ValueError:
        logger.error("Invalid number of searches: %s", count_str)
        return
    grid_map: GridMap | None = state.get("map")
    last = state.get("last_find")
    if grid_map is None or last is None:
        logger.error("Nothing to profile. Run /find first.")
        return
    start, target = last
    _, size = _buffer_size(state, grid_map)

    def single_search() -> int:
        return find_path(
            start.x, start.y, target.x, target.y,
            grid_map.cells, grid_map.width, grid_map.height,
            [0] * size, size,
        )

    out_path = Path(_config(state).paths.profile_out)
    logger.info("Profiling %s searches. Output to %s", count, out_path)
    profile_searches(count, single_search, out_path)
    logger.info("Profiling complete. Stats saved to %s", out_path)


def execute(command: str, args: list[str], state: Dict[str, Any]) -> Any:
    if "running" not in state:
        state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    if cmd_lower == "help":
        help_command(state)
    elif cmd_lower == "load" and args:
        return_value = load(state, args[0])
    elif cmd_lower == "save" and args:
        save(state, args[0])
    elif cmd_lower == "capacity" and args:
        capacity(state, args[0])
    elif cmd_lower == "find":
        return_value = find(state, args)
    elif cmd_lower == "view":
        view(state)
    elif cmd_lower == "stats":
        stats(state)
    elif cmd_lower == "profile":
        profile(state, args[0] if args else None)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received. Shutting down...")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "execute",
    "new_state",
    "help_command",
    "load",
    "save",
    "capacity",
    "find",
    "view",
    "stats",
    "profile",
]

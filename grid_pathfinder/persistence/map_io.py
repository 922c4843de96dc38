"""Load and save grid maps as YAML documents.

A map file looks like::

    width: 4
    height: 3
    start: [0, 0]
    target: [1, 2]
    cells:
      - "...."
      - "#.#."
      - "#..."

``#`` marks a blocked cell, any other glyph is passable. ``cells`` may also
be a flat row-major list of integers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.coordinates import Coord
from ..core.grid import Grid


BLOCKED_GLYPH = "#"
OPEN_GLYPH = "."


class MapFormatError(ValueError):
    """Raised when a map document cannot be turned into a :class:`GridMap`."""


@dataclass
class GridMap:
    """Passability buffer plus dimensions and optional endpoints."""

    width: int
    height: int
    cells: bytes
    start: Optional[Coord] = None
    target: Optional[Coord] = None

    def grid(self) -> Grid:
        return Grid(self.cells, self.width, self.height)


def _parse_coord(value: Any, key: str) -> Optional[Coord]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise MapFormatError(f"'{key}' must be a pair of integers, got {value!r}")
    try:
        return Coord(int(value[0]), int(value[1]))
    except (TypeError, ValueError) as exc:
        raise MapFormatError(f"'{key}' must be a pair of integers, got {value!r}") from exc


def _parse_rows(rows: List[Any], width: int, height: int) -> bytes:
    if len(rows) != height:
        raise MapFormatError(f"expected {height} rows, got {len(rows)}")
    out = bytearray()
    for y, row in enumerate(rows):
        row = str(row)
        if len(row) != width:
            raise MapFormatError(f"row {y} has {len(row)} cells, expected {width}")
        out.extend(0 if glyph == BLOCKED_GLYPH else 1 for glyph in row)
    return bytes(out)


def parse_map(data: Any) -> GridMap:
    """Build a :class:`GridMap` from a decoded YAML mapping."""

    if not isinstance(data, dict):
        raise MapFormatError("map document must be a mapping")
    try:
        width = int(data["width"])
        height = int(data["height"])
        raw_cells = data["cells"]
    except KeyError as exc:
        raise MapFormatError(f"map document is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise MapFormatError(f"map size must be integers: {exc}") from exc

    if width < 1 or height < 1:
        raise MapFormatError(f"map size must be positive, got {width}x{height}")
    if not isinstance(raw_cells, list):
        raise MapFormatError("'cells' must be a list")

    if raw_cells and all(isinstance(c, str) for c in raw_cells):
        cells = _parse_rows(raw_cells, width, height)
    else:
        if len(raw_cells) != width * height:
            raise MapFormatError(
                f"'cells' holds {len(raw_cells)} values, expected {width * height}"
            )
        try:
            cells = bytes(1 if int(c) else 0 for c in raw_cells)
        except (TypeError, ValueError) as exc:
            raise MapFormatError(f"'cells' values must be integers: {exc}") from exc

    return GridMap(
        width=width,
        height=height,
        cells=cells,
        start=_parse_coord(data.get("start"), "start"),
        target=_parse_coord(data.get("target"), "target"),
    )


def map_to_dict(grid_map: GridMap) -> Dict[str, Any]:
    """Return a YAML-friendly mapping for ``grid_map``."""

    rows = []
    for y in range(grid_map.height):
        row = grid_map.cells[y * grid_map.width:(y + 1) * grid_map.width]
        rows.append("".join(OPEN_GLYPH if c else BLOCKED_GLYPH for c in row))
    data: Dict[str, Any] = {
        "width": grid_map.width,
        "height": grid_map.height,
        "cells": rows,
    }
    if grid_map.start is not None:
        data["start"] = [grid_map.start.x, grid_map.start.y]
    if grid_map.target is not None:
        data["target"] = [grid_map.target.x, grid_map.target.y]
    return data


def load_map(path: str | Path) -> GridMap:
    """Read a map from ``path``."""

    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise MapFormatError(f"{path}: {exc}") from exc
    return parse_map(data)


def save_map(grid_map: GridMap, path: str | Path) -> None:
    """Write ``grid_map`` to ``path`` as YAML."""

    path = Path(path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        yaml.safe_dump(map_to_dict(grid_map), fh, sort_keys=False)


__all__ = [
    "GridMap",
    "MapFormatError",
    "load_map",
    "save_map",
    "parse_map",
    "map_to_dict",
]

"""Public ``find_path`` entry point.

Arguments are validated here; the modules under :mod:`grid_pathfinder.core`
trust their inputs.
"""

from __future__ import annotations

import logging
from typing import MutableSequence, NoReturn, Sequence

from .core.coordinates import Coord
from .core.errors import BadInputError
from .core.grid import Grid
from .core.reconstruct import write_path
from .core.search import a_star

logger = logging.getLogger(__name__)


def _reject(message: str) -> NoReturn:
    logger.debug("find_path rejected input: %s", message)
    raise BadInputError(message)


def _check_inputs(
    start_x: int,
    start_y: int,
    target_x: int,
    target_y: int,
    passability: Sequence[int],
    width: int,
    height: int,
    out_buffer: MutableSequence[int],
    out_capacity: int,
) -> None:
    if width < 1:
        _reject("map width must be greater than 0")
    if height < 1:
        _reject("map height must be greater than 0")
    if not 0 <= start_x < width:
        _reject(f"start x must be in [0, {width}), got {start_x}")
    if not 0 <= start_y < height:
        _reject(f"start y must be in [0, {height}), got {start_y}")
    if not 0 <= target_x < width:
        _reject(f"target x must be in [0, {width}), got {target_x}")
    if not 0 <= target_y < height:
        _reject(f"target y must be in [0, {height}), got {target_y}")
    if out_capacity < 0:
        _reject(f"output buffer size must not be negative, got {out_capacity}")
    if len(passability) != width * height:
        _reject(
            f"map buffer holds {len(passability)} cells, expected {width * height}"
        )
    if out_capacity > len(out_buffer):
        _reject(
            f"output buffer size {out_capacity} exceeds buffer length {len(out_buffer)}"
        )


def find_path(
    start_x: int,
    start_y: int,
    target_x: int,
    target_y: int,
    passability: Sequence[int],
    width: int,
    height: int,
    out_buffer: MutableSequence[int],
    out_capacity: int,
) -> int:
    """Find a shortest 4-directional path between two cells.

    Parameters
    ----------
    start_x, start_y, target_x, target_y:
        Endpoints of the path.
    passability:
        ``width * height`` cells in row-major order, ``0`` for blocked.
    width, height:
        Map dimensions.
    out_buffer:
        Receives the row-major index of every cell after the start, up to
        and including the target, when the path fits.
    out_capacity:
        Number of slots of ``out_buffer`` that may be written. ``0`` only
        reports the length.

    Returns
    -------
    int
        Number of moves, ``0`` when start and target coincide and ``-1``
        when the target is unreachable. A value above ``out_capacity``
        means the buffer was left untouched.

    Raises
    ------
    BadInputError
        If the dimensions, coordinates or capacity are out of range, or if
        the start or target cell is blocked.
    """

    _check_inputs(
        start_x, start_y, target_x, target_y,
        passability, width, height, out_buffer, out_capacity,
    )

    grid = Grid(passability, width, height)
    start = Coord(start_x, start_y)
    target = Coord(target_x, target_y)

    if not grid.is_passable(start):
        _reject(f"start cell {start_x},{start_y} must be passable")
    if not grid.is_passable(target):
        _reject(f"target cell {target_x},{target_y} must be passable")

    if start == target:
        return 0

    result = a_star(grid, start, target)
    return write_path(grid, result.predecessors, start, target, out_buffer, out_capacity)


__all__ = ["find_path"]

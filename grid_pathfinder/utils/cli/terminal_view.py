"""ASCII terminal renderer for grid maps and paths."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from ...core.coordinates import Coord
from ...core.grid import Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_GLYPHS = {
    "wall": ("#", "blue"),
    "open": (".", "white"),
    "path": ("*", "yellow"),
    "start": ("S", "green"),
    "target": ("T", "red"),
}


class TerminalView:
    """Minimal map viewer using ANSI colours."""

    def __init__(self, colour: bool = True) -> None:
        self.enabled: bool = False
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def toggle(self) -> bool:
        """Toggle rendering. Returns ``True`` if enabled after toggle."""

        self.enabled = not self.enabled
        return self.enabled

    def lines(
        self,
        grid: Grid,
        path: Iterable[Coord] = (),
        start: Optional[Coord] = None,
        target: Optional[Coord] = None,
    ) -> list[str]:
        """Return one string per map row."""

        on_path = set(path)
        out: list[str] = []
        for y in range(grid.height):
            row: list[str] = []
            for x in range(grid.width):
                cell = Coord(x, y)
                if cell == start:
                    kind = "start"
                elif cell == target:
                    kind = "target"
                elif cell in on_path:
                    kind = "path"
                elif grid.is_passable(cell):
                    kind = "open"
                else:
                    kind = "wall"
                glyph, colour = _GLYPHS[kind]
                row.append(f"{_COLOURS[colour]}{glyph}" if self.colour else glyph)
            if self.colour:
                row.append(_COLOURS["reset"])
            out.append("".join(row))
        return out

    def render(
        self,
        grid: Grid,
        path: Iterable[Coord] = (),
        start: Optional[Coord] = None,
        target: Optional[Coord] = None,
        stream: TextIO | None = None,
    ) -> None:
        """Draw ``grid`` with ``path`` highlighted to ``stream`` (stdout)."""

        if not self.enabled:
            return
        stream = stream or sys.stdout
        stream.write("\n".join(self.lines(grid, path, start, target)) + "\n")
        stream.flush()


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the singleton :class:`TerminalView` instance."""

    return _view


__all__ = ["TerminalView", "get_view"]

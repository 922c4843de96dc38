"""Cell coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, order=True)
class Coord:
    """Integer grid position, ordered by ``x`` then ``y``."""

    x: int = -1
    y: int = -1

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y


# Default value meaning "no coordinate".
UNSET = Coord(-1, -1)


__all__ = ["Coord", "UNSET"]

"""Exceptions raised by the pathfinder."""

from __future__ import annotations


class BadInputError(ValueError):
    """Raised when ``find_path`` is called with arguments it cannot accept."""


__all__ = ["BadInputError"]

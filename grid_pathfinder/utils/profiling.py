"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
import time
from pathlib import Path
from typing import Callable

from .observer import record_search


def profile_searches(
    n: int,
    search_callback: Callable[[], int],
    out_path: str | Path = "pathfinder.prof",
) -> pstats.Stats:
    """Profile ``search_callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of searches to run.
    search_callback:
        Function performing one search and returning the path length.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        began = time.perf_counter()
        length = search_callback()
        record_search(time.perf_counter() - began, length)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]

"""Runtime observability helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Tuple

# Rolling history of the last 1000 searches as (seconds, length)
_SEARCH_HISTORY_LEN = 1000
_searches: Deque[Tuple[float, int]] = deque(maxlen=_SEARCH_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_search(duration: float, length: int) -> None:
    """Append one search ``duration`` in seconds and its returned ``length``."""

    _searches.append((duration, length))


def search_stats() -> Dict[str, float]:
    """Return count, average time and share of searches that found a path."""

    if not _searches:
        return {"count": 0, "avg_ms": 0.0, "found_ratio": 0.0}
    count = len(_searches)
    avg = sum(d for d, _ in _searches) / count
    found = sum(1 for _, length in _searches if length >= 0)
    return {"count": count, "avg_ms": avg * 1000, "found_ratio": found / count}


def print_stats() -> None:
    """Print a one-line summary of recorded searches."""

    stats = search_stats()
    if not stats["count"]:
        print("Searches: --")
        return
    print(
        f"Searches: {stats['count']} (avg {stats['avg_ms']:.3f} ms, "
        f"{stats['found_ratio'] * 100:.0f}% found)"
    )


def reset_stats() -> None:
    _searches.clear()


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


__all__ = [
    "record_search",
    "search_stats",
    "print_stats",
    "reset_stats",
    "log_event",
    "_searches",
    "_events",
]

# tests/conftest.py
import pytest

from grid_pathfinder.utils import observer


# Maps below are row-major, 1 = open, 0 = blocked.

SMALL_4X3 = [1, 1, 1, 1,
             0, 1, 0, 1,
             0, 1, 1, 1]

COMPLEX_10X10 = [0, 1, 0, 1, 1, 1, 1, 1, 0, 1,
                 0, 1, 0, 1, 0, 0, 0, 0, 0, 1,
                 1, 1, 0, 1, 0, 1, 1, 1, 0, 1,
                 1, 1, 0, 1, 1, 1, 0, 1, 0, 1,
                 1, 1, 0, 1, 0, 0, 0, 1, 0, 1,
                 1, 1, 0, 1, 1, 0, 1, 1, 0, 1,
                 1, 1, 0, 0, 1, 0, 1, 1, 0, 1,
                 1, 1, 1, 0, 1, 1, 0, 1, 1, 1,
                 1, 0, 1, 1, 0, 1, 0, 0, 0, 1,
                 1, 1, 0, 1, 1, 1, 0, 0, 0, 1]

SEVERAL_PATHS_10X10 = [1, 1, 1, 1, 1, 1, 0, 1, 1, 1,
                       1, 0, 0, 0, 0, 1, 1, 1, 0, 1,
                       1, 0, 0, 0, 0, 1, 0, 0, 0, 1,
                       1, 1, 1, 1, 0, 1, 1, 1, 0, 1,
                       0, 0, 0, 1, 0, 1, 1, 1, 0, 1,
                       1, 1, 1, 1, 0, 1, 1, 1, 0, 1,
                       1, 0, 0, 1, 0, 1, 1, 1, 0, 1,
                       1, 0, 1, 1, 1, 1, 1, 1, 0, 1,
                       1, 0, 0, 0, 0, 0, 0, 0, 0, 1,
                       1, 1, 1, 1, 1, 1, 1, 1, 1, 1]


@pytest.fixture
def small_map():
    return bytes(SMALL_4X3), 4, 3


@pytest.fixture
def complex_map():
    return bytes(COMPLEX_10X10), 10, 10


@pytest.fixture
def several_paths_map():
    return bytes(SEVERAL_PATHS_10X10), 10, 10


@pytest.fixture(autouse=True)
def _reset_observer():
    observer.reset_stats()
    observer._events.clear()
    yield
    observer.reset_stats()
    observer._events.clear()

import os
import sys
from collections import deque

import pytest

# Ensure project root (where main.py lives) is on sys.path
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from algorithms import build_maze  # noqa: E402
from maze import ORIGIN  # noqa: E402


SEEDS = (0, 1, 7, 42, 1234)


def reachable(grid, start=ORIGIN):
    """Flood fill through open walls; independent of the solvers under test."""
    seen = {start}
    todo = deque([start])
    while todo:
        cur = todo.popleft()
        for _, nbr in grid.open_neighbours(cur):
            if nbr not in seen:
                seen.add(nbr)
                todo.append(nbr)
    return seen


@pytest.fixture
def maze5():
    return build_maze(5, seed=42).grid


@pytest.fixture(params=[(n, s) for n in (1, 2, 3, 5, 8) for s in SEEDS], ids=lambda p: f"n{p[0]}-s{p[1]}")
def seeded_maze(request):
    size, seed = request.param
    return build_maze(size, seed=seed).grid

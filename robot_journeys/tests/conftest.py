from __future__ import annotations

import matplotlib

# Headless backend for every test that touches the trajectory plot
matplotlib.use("Agg")

import pytest  # noqa: E402

# Three journeys on a 5x5 grid: a full turn, a legitimate L-shaped drive,
# and a drive straight into the obstacle.
FIVE_BY_FIVE = (
    "GRID 5x5\n"
    "OBSTACLE 1 3\n"
    "\n"
    "1 1 E\n"
    "RRRR\n"
    "1 1 E\n"
    "\n"
    "1 1 E\n"
    "FFLFF\n"
    "3 3 N\n"
    "\n"
    "1 0 N\n"
    "FFF\n"
    "1 3 N\n"
)

# Success, wrong final state, and running off the top edge.
FOUR_BY_THREE = (
    "GRID 4x3\n"
    "OBSTACLE 2 2\n"
    "\n"
    "3 0 W\n"
    "FF\n"
    "1 0 W\n"
    "\n"
    "1 1 S\n"
    "FRF\n"
    "2 2 N\n"
    "\n"
    "0 2 N\n"
    "F\n"
    "0 2 N\n"
)


@pytest.fixture
def five_by_five() -> str:
    return FIVE_BY_FIVE


@pytest.fixture
def four_by_three() -> str:
    return FOUR_BY_THREE

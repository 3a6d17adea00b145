"""Solved-grid generation by randomized backtracking."""

# generator.py
# Fills the first empty cell (row-major) with candidates 1..9 in shuffled
# order, recursing and undoing on failure. The shuffle is what makes two
# generated grids differ; pass a seeded rng for reproducible output.
from __future__ import annotations

import logging
import random

from types_sudoku import Grid

from .board_core import DIGITS, empty_grid, find_empty_cell, is_valid_placement
from .exceptions import UnsolvableGridError

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> random.Random:
    """The single random source threaded through generation and carving."""
    return random.Random(seed)


def shuffled(items, rng: random.Random) -> list:
    out = list(items)
    rng.shuffle(out)
    return out


def fill_grid(grid: Grid, rng: random.Random | None = None) -> bool:
    """Complete ``grid`` in place. Returns False (grid left as it was) when
    the pre-filled cells admit no completion."""
    rng = rng or make_rng()
    find = find_empty_cell(grid)
    if find is None:
        return True
    row, col = find
    for num in shuffled(DIGITS, rng):
        if is_valid_placement(grid, num, (row, col)):
            grid[row][col] = num
            if fill_grid(grid, rng):
                return True
            grid[row][col] = 0
    return False


def generate_solved_grid(rng: random.Random | None = None) -> Grid:
    grid = empty_grid()
    if not fill_grid(grid, rng or make_rng()):
        raise UnsolvableGridError("backtracking could not complete an empty grid")
    logger.debug("generated solved grid, first row %s", grid[0])
    return grid

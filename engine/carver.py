"""Solution counting and unique-solution puzzle carving.

``count_solutions`` is a plain backtracking search that stops as soon as a
second completion turns up; the carver only ever asks whether the answer is
exactly one. ``carve_puzzle`` blanks cells of a solved grid in a random
order and keeps each removal only while the puzzle stays uniquely solvable.
"""

from __future__ import annotations

import logging
import random

from types_sudoku import Grid

from .board_core import DIGITS, SIZE, all_cells, clone_grid, find_empty_cell, is_valid_placement
from .generator import make_rng, shuffled

logger = logging.getLogger(__name__)

MAX_HOLES = SIZE * SIZE


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Number of completions of ``grid``, capped at ``limit``.

    The search runs on a private copy; ``grid`` is left untouched.
    """
    board = clone_grid(grid)
    count = 0

    def solve() -> None:
        nonlocal count
        find = find_empty_cell(board)
        if find is None:
            count += 1
            return
        row, col = find
        for num in DIGITS:
            if is_valid_placement(board, num, (row, col)):
                board[row][col] = num
                solve()
                board[row][col] = 0
                if count >= limit:
                    return

    solve()
    return count


def has_unique_solution(grid: Grid) -> bool:
    return count_solutions(grid, limit=2) == 1


def carve_puzzle(solved: Grid, holes: int, rng: random.Random | None = None) -> Grid:
    """Blank up to ``holes`` cells of ``solved`` while keeping exactly one solution.

    Returns a new grid; ``solved`` is not modified. The result can have fewer
    holes than requested when no remaining cell can be removed safely.
    """
    if holes < 0:
        raise ValueError(f"holes must be non-negative, got {holes}")
    holes = min(holes, MAX_HOLES)
    rng = rng or make_rng()
    puzzle = clone_grid(solved)
    removed = 0
    rejected = 0
    for row, col in shuffled(all_cells(), rng):
        if removed >= holes:
            break
        temp = puzzle[row][col]
        puzzle[row][col] = 0
        if count_solutions(clone_grid(puzzle)) != 1:
            puzzle[row][col] = temp
            rejected += 1
        else:
            removed += 1
    if removed < holes:
        logger.debug("carving stopped at %d/%d holes (%d removals rejected)", removed, holes, rejected)
    return puzzle

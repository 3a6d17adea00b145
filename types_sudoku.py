# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""A (row, col) position, both 0-based in 0..8."""


class Issue(TypedDict, total=False):
    """One finding of the board sanity report."""

    type: str  # 'duplicate' or 'given_overwritten'
    unit: str  # for duplicates, 'r1'..'r9', 'c1'..'c9' or 'b1'..'b9'
    digits: list[int]  # duplicated digits inside the unit
    cells: list[Cell]  # cells involved
    given: int  # for overwritten givens, the original digit
    found: int  # for overwritten givens, the digit now on the board


class BoardState(TypedDict):
    """Read-only snapshot handed to the presentation layer."""

    board: Grid  # current play state
    initial: Grid  # initial puzzle; non-zero cells are givens
    given: list[list[bool]]  # given-cell mask
    conflicts: list[Cell]  # user cells clashing with a peer
    active: bool  # False once the puzzle is solved

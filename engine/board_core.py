"""Core board utilities shared by the generator, carver and session: grid copies, unit iterators, the placement rule and a duplicate/overwrite sanity report."""

# board_core.py
# Grid is 9x9 list of lists of ints (0..9). 0 = blank.
# Cells are (row, col), 0-based.
from __future__ import annotations

from types_sudoku import Cell, Grid, Issue

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def in_bounds(r: int, c: int) -> bool:
    return 0 <= r < SIZE and 0 <= c < SIZE


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def box_origin(r: int, c: int) -> Cell:
    return (r // BOX) * BOX, (c // BOX) * BOX


def all_cells() -> list[Cell]:
    return [(r, c) for r in range(SIZE) for c in range(SIZE)]


def unit_cells_box(b: int) -> list[Cell]:
    # b = 0..8 left->right, top->bottom
    r0 = BOX * (b // BOX)
    c0 = BOX * (b % BOX)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


def find_empty_cell(grid: Grid) -> Cell | None:
    """First empty cell in row-major order, or None when the grid is full."""
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == 0:
                return r, c
    return None


def is_valid_placement(grid: Grid, value: int, pos: Cell) -> bool:
    """Return False iff ``value`` already sits in the row, column or box of ``pos``
    at some other position. The cell at ``pos`` itself is ignored."""
    row, col = pos
    for j in range(SIZE):
        if j != col and grid[row][j] == value:
            return False
    for i in range(SIZE):
        if i != row and grid[i][col] == value:
            return False
    r0, c0 = box_origin(row, col)
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            if (i, j) != (row, col) and grid[i][j] == value:
                return False
    return True


def is_solved_grid(grid: Grid) -> bool:
    """True when every row, column and box holds 1..9 exactly once."""
    full = set(DIGITS)
    for i in range(SIZE):
        if set(grid[i]) != full:
            return False
        if {grid[r][i] for r in range(SIZE)} != full:
            return False
        if {grid[r][c] for r, c in unit_cells_box(i)} != full:
            return False
    return True


def _duplicates_in_unit(vals) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def find_duplicates(original: Grid, current: Grid) -> dict:
    """Sanity report over ``current``: givens from ``original`` that were
    overwritten, and duplicated digits per row, column and box."""
    issues: list[Issue] = []
    for r, c in all_cells():
        if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
            issues.append(
                {
                    "type": "given_overwritten",
                    "cells": [(r, c)],
                    "given": original[r][c],
                    "found": current[r][c],
                }
            )
    units = []
    for i in range(SIZE):
        units.append((f"r{i + 1}", [(i, c) for c in range(SIZE)]))
    for i in range(SIZE):
        units.append((f"c{i + 1}", [(r, i) for r in range(SIZE)]))
    for i in range(SIZE):
        units.append((f"b{i + 1}", unit_cells_box(i)))
    for name, cells in units:
        vals = [current[r][c] for r, c in cells]
        dups = _duplicates_in_unit(vals)
        if dups:
            bad = [cells[i] for i, v in enumerate(vals) if v in dups]
            issues.append({"type": "duplicate", "unit": name, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}

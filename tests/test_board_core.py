# tests/test_board_core.py
from engine.board_core import (
    all_cells,
    box_origin,
    clone_grid,
    empty_grid,
    find_duplicates,
    find_empty_cell,
    is_solved_grid,
    is_valid_placement,
    unit_cells_box,
)


def test_box_origin_uses_three_by_three_boundaries():
    assert box_origin(0, 0) == (0, 0)
    assert box_origin(2, 2) == (0, 0)
    assert box_origin(3, 5) == (3, 3)
    assert box_origin(8, 6) == (6, 6)
    assert unit_cells_box(4) == [(r, c) for r in range(3, 6) for c in range(3, 6)]


def test_placement_round_trip_on_solved_grid(solved_grid):
    for r, c in all_cells():
        grid = clone_grid(solved_grid)
        answer = grid[r][c]
        grid[r][c] = 0
        assert is_valid_placement(grid, answer, (r, c))
        # every other digit already sits somewhere in the row, column or box
        for d in range(1, 10):
            if d != answer:
                assert not is_valid_placement(grid, d, (r, c))


def test_placement_ignores_the_cell_itself(solution):
    assert is_valid_placement(solution, solution[4][4], (4, 4))


def test_placement_checks_row_column_and_box():
    grid = empty_grid()
    grid[0][8] = 7
    assert not is_valid_placement(grid, 7, (0, 0))  # row
    grid = empty_grid()
    grid[8][0] = 7
    assert not is_valid_placement(grid, 7, (0, 0))  # column
    grid = empty_grid()
    grid[2][2] = 7
    assert not is_valid_placement(grid, 7, (0, 0))  # box
    # same digit just outside the box is not a clash
    grid = empty_grid()
    grid[3][3] = 7
    assert is_valid_placement(grid, 7, (2, 2))


def test_find_empty_cell_is_row_major(puzzle, solution):
    assert find_empty_cell(puzzle) == (0, 0)
    puzzle[0][0] = 5
    assert find_empty_cell(puzzle) == (0, 2)
    assert find_empty_cell(solution) is None


def test_is_solved_grid(solution, puzzle):
    assert is_solved_grid(solution)
    assert not is_solved_grid(puzzle)
    solution[0][0], solution[0][1] = solution[0][1], solution[0][0]
    assert not is_solved_grid(solution)


def test_find_duplicates_reports_units_and_overwritten_givens(puzzle):
    current = clone_grid(puzzle)
    assert find_duplicates(puzzle, current) == {"ok": True, "issues": []}

    current[0][1] = 6  # overwrite the given 3
    report = find_duplicates(puzzle, current)
    assert not report["ok"]
    kinds = {issue["type"] for issue in report["issues"]}
    assert kinds == {"given_overwritten", "duplicate"}
    over = [i for i in report["issues"] if i["type"] == "given_overwritten"][0]
    assert over["cells"] == [(0, 1)] and over["given"] == 3 and over["found"] == 6
    units = {i["unit"] for i in report["issues"] if i["type"] == "duplicate"}
    # 6 at r1c2 clashes with r2c1 (box 1) and r7c2 (column 2)
    assert units == {"c2", "b1"}

"""Single-player game session.

A ``GameSession`` owns the three boards of one game:

- ``solution``: the solved grid the puzzle was carved from (answer key),
- ``initial``: the carved puzzle as dealt; its non-zero cells are givens,
- ``board``: the play state the player edits.

``solution`` and ``initial`` are fixed once ``new_game`` returns; only
``apply_move`` and ``reset`` touch the play state. Accessors hand out copies
so callers cannot mutate session state behind its back.
"""

from __future__ import annotations

import logging
import random

from types_sudoku import BoardState, Cell, Grid

from .board_core import DIGITS, all_cells, clone_grid, find_duplicates, in_bounds, is_valid_placement
from .carver import carve_puzzle
from .config import DEFAULT_DIFFICULTY, DIFFICULTY_LEVELS, holes_for
from .exceptions import NoActiveGameError
from .generator import generate_solved_grid, make_rng

logger = logging.getLogger(__name__)

MSG_SOLVED = "Congratulations! You solved the puzzle!"
MSG_ERRORS = "Some answers are incorrect. Keep trying!"
MSG_OK_SO_FAR = "All your answers are correct so far! Keep going!"


class GameSession:
    def __init__(self, rng: random.Random | None = None, seed: int | None = None):
        self.rng = rng or make_rng(seed)
        self._solution: Grid | None = None
        self._initial: Grid | None = None
        self._board: Grid | None = None
        self.active = False

    # ---- lifecycle -------------------------------------------------------

    def new_game(self, holes: int = DIFFICULTY_LEVELS[DEFAULT_DIFFICULTY]) -> Grid:
        """Generate a solved grid, carve a puzzle with up to ``holes`` blanks
        and start playing it. Returns a copy of the dealt puzzle."""
        solution = generate_solved_grid(self.rng)
        puzzle = carve_puzzle(solution, holes, self.rng)
        self._solution = solution
        self._initial = clone_grid(puzzle)
        self._board = clone_grid(puzzle)
        self.active = True
        logger.info("new game: %d holes requested, %d carved", holes, self.holes)
        return clone_grid(puzzle)

    def new_game_for(self, difficulty: str, table: dict | None = None) -> Grid:
        return self.new_game(holes_for(difficulty, table))

    def reset(self) -> None:
        self._require_game()
        self._board = clone_grid(self._initial)
        self.active = True

    # ---- read-only views -------------------------------------------------

    @property
    def started(self) -> bool:
        return self._initial is not None

    @property
    def solution(self) -> Grid:
        self._require_game()
        return clone_grid(self._solution)

    @property
    def initial(self) -> Grid:
        self._require_game()
        return clone_grid(self._initial)

    @property
    def board(self) -> Grid:
        self._require_game()
        return clone_grid(self._board)

    @property
    def holes(self) -> int:
        self._require_game()
        return sum(1 for r, c in all_cells() if self._initial[r][c] == 0)

    def is_given(self, row: int, col: int) -> bool:
        self._require_game()
        return self._initial[row][col] != 0

    # ---- play ------------------------------------------------------------

    def apply_move(self, row: int, col: int, value: int) -> bool:
        """Set a user cell (0 clears it); returns whether the value was written.

        Given cells are never written. Once the board is solved the session
        goes inactive and every move is refused until ``reset`` or ``new_game``."""
        self._require_game()
        if not in_bounds(row, col):
            raise ValueError(f"cell ({row}, {col}) is outside the 9x9 board")
        if value != 0 and value not in DIGITS:
            raise ValueError(f"value must be 0..9, got {value}")
        if not self.active or self._initial[row][col] != 0:
            return False
        self._board[row][col] = value
        if self.check_complete():
            self.active = False
            logger.info("puzzle solved")
        return True

    def check_complete(self) -> bool:
        self._require_game()
        for r, c in all_cells():
            if self._board[r][c] == 0 or self._board[r][c] != self._solution[r][c]:
                return False
        return True

    def check_errors(self) -> set[Cell]:
        """User-filled cells whose value differs from the answer key."""
        self._require_game()
        return {
            (r, c)
            for r, c in all_cells()
            if self._initial[r][c] == 0 and self._board[r][c] != 0 and self._board[r][c] != self._solution[r][c]
        }

    def conflicts(self) -> set[Cell]:
        """User-filled cells that clash with a peer on the current board."""
        self._require_game()
        return {
            (r, c)
            for r, c in all_cells()
            if self._initial[r][c] == 0
            and self._board[r][c] != 0
            and not is_valid_placement(self._board, self._board[r][c], (r, c))
        }

    def check_answers(self) -> dict:
        errors = self.check_errors()
        complete = self.check_complete()
        if complete:
            message = MSG_SOLVED
        elif errors:
            message = MSG_ERRORS
        else:
            message = MSG_OK_SO_FAR
        return {"errors": sorted(errors), "complete": complete, "message": message}

    def sanity_report(self) -> dict:
        self._require_game()
        return find_duplicates(self._initial, self._board)

    def snapshot(self) -> BoardState:
        self._require_game()
        return {
            "board": clone_grid(self._board),
            "initial": clone_grid(self._initial),
            "given": [[v != 0 for v in row] for row in self._initial],
            "conflicts": sorted(self.conflicts()),
            "active": self.active,
        }

    def _require_game(self) -> None:
        if self._initial is None:
            raise NoActiveGameError("no game in progress; call new_game() first")

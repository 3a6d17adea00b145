class SudokuError(Exception):
    """Base exception for the puzzle engine."""
    pass


class UnsolvableGridError(SudokuError):
    """Raised when a grid has no valid completion."""
    pass


class UnknownDifficultyError(SudokuError, KeyError):
    """Raised when a difficulty name is missing from the difficulty table."""

    def __init__(self, difficulty, known=()):
        super().__init__(f"unknown difficulty {difficulty!r}; expected one of {sorted(known)}")
        self.difficulty = difficulty
        self.known = tuple(known)

    def __str__(self):
        return self.args[0]


class NoActiveGameError(SudokuError):
    """Raised when a session is queried before a game has been dealt."""
    pass

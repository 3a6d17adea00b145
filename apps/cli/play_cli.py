"""CLI front-end for the puzzle engine. Deals a new game for a difficulty, prints a JSON report (puzzle, answer key, carved hole count), optionally renders PNG boards, and can run a small text-mode game loop on stdin."""

# play_cli.py
# Usage:
#   python -m apps.cli.play_cli --difficulty hard --seed 7 --out play_export
#   python -m apps.cli.play_cli --holes 45 --interactive
#
# Interactive commands (rows/cols are 1-based on the prompt):
#   <row> <col> <digit>   place a digit (0 clears)
#   check | reset | show | quit
import argparse
import json
import logging
import sys
from pathlib import Path

from engine.carver import has_unique_solution
from engine.config import holes_for, load_difficulty_table
from engine.session import GameSession

from .board_renderer import save_board

logger = logging.getLogger(__name__)


def format_board(board) -> str:
    """Plain-text board with box separators; blanks print as '.'."""
    lines = []
    for r in range(9):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        cells = []
        for c in range(9):
            if c and c % 3 == 0:
                cells.append("|")
            v = board[r][c]
            cells.append("." if v == 0 else str(v))
        lines.append(" ".join(cells))
    return "\n".join(lines)


def build_report(game: GameSession, difficulty, holes_requested: int) -> dict:
    return {
        "difficulty": difficulty,
        "holes_requested": holes_requested,
        "holes": game.holes,
        "unique": has_unique_solution(game.initial),
        "puzzle": game.initial,
        "solution": game.solution,
    }


def export_images(game: GameSession, export_dir: Path) -> list[str]:
    export_dir.mkdir(parents=True, exist_ok=True)
    out = [
        save_board(export_dir / "puzzle.png", game.initial),
        save_board(export_dir / "solution.png", game.solution),
    ]
    for path in out:
        print(f"[write] {path}", file=sys.stderr)
    return out


def run_interactive(game: GameSession, stdin=None, stdout=None) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def say(msg=""):
        print(msg, file=stdout)

    say(format_board(game.board))
    for raw in stdin:
        line = raw.strip().lower()
        if not line:
            continue
        if line in ("q", "quit", "exit"):
            break
        if line == "show":
            say(format_board(game.board))
            continue
        if line == "reset":
            game.reset()
            say("Puzzle has been reset")
            say(format_board(game.board))
            continue
        if line == "check":
            result = game.check_answers()
            say(result["message"])
            for r, c in result["errors"]:
                say(f"  wrong: r{r + 1}c{c + 1}")
            continue
        parts = line.split()
        if len(parts) != 3 or not all(p.isdigit() for p in parts):
            say("expected '<row> <col> <digit>', check, reset, show or quit")
            continue
        r, c, v = (int(p) for p in parts)
        try:
            applied = game.apply_move(r - 1, c - 1, v)
        except ValueError as e:
            say(f"[error] {e}")
            continue
        if not applied:
            say("cell is fixed" if game.active else "puzzle already solved; reset to play again")
            continue
        if (r - 1, c - 1) in game.conflicts():
            say(f"r{r}c{c}={v} clashes with its row, column or box")
        if game.check_complete():
            say(format_board(game.board))
            say(game.check_answers()["message"])
            break


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Deal and play a Sudoku puzzle.")
    ap.add_argument("--difficulty", type=str, default="medium")
    ap.add_argument("--holes", type=non_negative_int, default=None, help="Override the difficulty's hole count")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--config", type=str, default=None, help="YAML difficulty table")
    ap.add_argument("--out", type=str, default=None, help="Directory for rendered PNG boards")
    ap.add_argument("--json", type=str, default=None)
    ap.add_argument("--interactive", action="store_true")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def main(args=None) -> None:
    if args is None:
        args = build_parser().parse_args()

    level = logging.DEBUG if args.verbose >= 2 else logging.INFO if args.verbose == 1 else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s")

    if args.holes is not None:
        holes = args.holes
    else:
        holes = holes_for(args.difficulty, load_difficulty_table(args.config))

    game = GameSession(seed=args.seed)
    game.new_game(holes)
    logger.info("dealt %s puzzle with %d holes", args.difficulty, game.holes)

    if args.interactive:
        run_interactive(game)
        return

    payload = build_report(game, None if args.holes is not None else args.difficulty, holes)
    if args.out:
        payload["images"] = export_images(game, Path(args.out))

    if args.json:
        Path(args.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"[ok] wrote {args.json}", file=sys.stderr)
    else:
        print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()

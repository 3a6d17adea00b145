# sudoku_game_api.py
# FastAPI wrapper around a single in-memory game session.
# Run with: uvicorn apps.api.sudoku_game_api:app --reload
from typing import Annotated

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel, Field, model_validator

from engine.board_core import is_valid_placement
from engine.config import load_difficulty_table
from engine.exceptions import UnknownDifficultyError
from engine.session import GameSession

Digit = Annotated[int, Field(ge=0, le=9)]
Index = Annotated[int, Field(ge=0, le=8)]


class NewGameRequest(BaseModel):
    difficulty: str | None = None
    holes: int | None = Field(default=None, ge=0, le=81)
    seed: int | None = None

    @model_validator(mode="after")
    def _one_of(self):
        if self.difficulty is not None and self.holes is not None:
            raise ValueError("give either 'difficulty' or 'holes', not both")
        return self


class MoveRequest(BaseModel):
    row: Index
    col: Index
    value: Digit


class PlacementRequest(BaseModel):
    grid: list[list[int]] = Field(min_length=9, max_length=9)
    value: int = Field(ge=1, le=9)
    row: Index
    col: Index

    @model_validator(mode="after")
    def _shape(self):
        for row in self.grid:
            if len(row) != 9 or any(v < 0 or v > 9 for v in row):
                raise ValueError("grid must be 9 rows of 9 digits in 0..9")
        return self


app = FastAPI(title="Sudoku Game API")


def init_state(app: FastAPI, seed: int | None = None, difficulty_config: str | None = None) -> FastAPI:
    """Give ``app`` a fresh game session and difficulty table."""
    app.state.session = GameSession(seed=seed)
    app.state.difficulties = load_difficulty_table(difficulty_config)
    return app


init_state(app)


def _session(request: Request) -> GameSession:
    return request.app.state.session


def _started(request: Request) -> GameSession:
    game = _session(request)
    if not game.started:
        raise HTTPException(status_code=409, detail="no game in progress; POST /new_game first")
    return game


@app.post("/new_game")
def api_new_game(req: NewGameRequest, request: Request):
    if req.seed is not None:
        request.app.state.session = GameSession(seed=req.seed)
    game = _session(request)
    difficulties = request.app.state.difficulties
    if req.holes is not None:
        holes = req.holes
    else:
        try:
            holes = difficulties[req.difficulty or "medium"]
        except KeyError:
            err = UnknownDifficultyError(req.difficulty, difficulties.keys())
            raise HTTPException(status_code=400, detail=str(err))
    game.new_game(holes)
    return {"holes": game.holes, **game.snapshot()}


@app.get("/state")
def api_state(request: Request):
    return _started(request).snapshot()


@app.post("/move")
def api_move(req: MoveRequest, request: Request):
    game = _started(request)
    applied = game.apply_move(req.row, req.col, req.value)
    return {"applied": applied, "complete": game.check_complete(), "state": game.snapshot()}


@app.post("/reset")
def api_reset(request: Request):
    game = _started(request)
    game.reset()
    return game.snapshot()


@app.get("/check")
def api_check(request: Request):
    return _started(request).check_answers()


@app.get("/difficulties")
def api_difficulties(request: Request):
    return dict(request.app.state.difficulties)


@app.post("/is_valid_placement")
def api_placement(req: PlacementRequest):
    return {"valid": is_valid_placement(req.grid, req.value, (req.row, req.col))}

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict
import yaml

from .exceptions import UnknownDifficultyError

# Holes carved per difficulty when no YAML table is supplied.
DIFFICULTY_LEVELS = {
    "easy": 30,
    "medium": 40,
    "hard": 50,
    "expert": 60,
}
DEFAULT_DIFFICULTY = "medium"
CONFIG_ENV = "SUDOKU_DIFFICULTY_CONFIG"


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_difficulty_table(path: str | Path | None = None) -> DotDict:
    """Difficulty name -> hole count. Built-in levels are overridden by the
    YAML file at ``path`` (or ``$SUDOKU_DIFFICULTY_CONFIG`` when set)."""
    table = DotDict(DIFFICULTY_LEVELS)
    path = path or os.environ.get(CONFIG_ENV)
    if not path:
        return table
    data = load_yaml(path)
    for name, holes in data.items():
        if not isinstance(holes, int) or isinstance(holes, bool) or holes < 0:
            raise ValueError(f"{path}: hole count for {name!r} must be a non-negative int, got {holes!r}")
    return DotDict(merge_overrides(table, **data))


def holes_for(difficulty: str, table: Dict[str, int] | None = None) -> int:
    table = DIFFICULTY_LEVELS if table is None else table
    try:
        return table[difficulty]
    except KeyError:
        raise UnknownDifficultyError(difficulty, table.keys()) from None

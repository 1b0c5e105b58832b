# src/connect4/config.py

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

ROWS = 6
COLS = 7

# Plies examined per computer decision, counting the computer's own move.
SEARCH_DEPTH = 5

# Terminal score for the computer; the human's win scores -WIN_SCORE.
WIN_SCORE = 1000

# Profiling defaults
PROFILE_RESULTS_DIR = "data/results"
PROFILE_PATTERN = "search_profile_*.csv"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    rows: int = ROWS
    columns: int = COLS
    search_depth: int = SEARCH_DEPTH

    def __post_init__(self) -> None:
        for f in fields(self):
            v = getattr(self, f.name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{f.name} must be an integer, got {v!r}.")
            if v < 1:
                raise ValueError(f"{f.name} must be >= 1, got {v}.")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}. Known: {sorted(known)}")
        return cls(**dict(data))

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal

from connect4.core.board import Board
from connect4.game.results import Outcome, ONGOING
from connect4.types import COMPUTER, HUMAN, Player

Phase = Literal["awaiting_human", "awaiting_computer", "terminal"]


@dataclass(slots=True)
class GameState:
    board: Board
    phase: Phase = "awaiting_human"
    outcome: Outcome = field(default=ONGOING)
    last_status: str = "Human (X) starts."

    @property
    def current(self) -> Player:
        return COMPUTER if self.phase == "awaiting_computer" else HUMAN

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from connect4.types import Player

Status = Literal["ongoing", "win", "draw"]


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls("win", player)

    @property
    def is_terminal(self) -> bool:
        return self.status != "ongoing"

    def __str__(self) -> str:
        if self.status == "win":
            return f"Player {self.winner} wins!"
        if self.status == "draw":
            return "Draw game."
        return "In progress."


ONGOING = Outcome("ongoing")
DRAW = Outcome("draw")

from __future__ import annotations

import logging
from typing import Optional

from connect4.ai.minimax_agent import MinimaxAgent
from connect4.config import EngineConfig
from connect4.core.board import Board
from connect4.errors import InvariantViolation
from connect4.game.actions import MoveResult, Placed
from connect4.game.engine import (
    attempt_human_move,
    computer_move,
    new_game,
    query_outcome,
    reset_game,
)
from connect4.game.results import ONGOING
from connect4.game.state import GameState, Phase
from connect4.types import Move

logger = logging.getLogger(__name__)


class GameSession:
    """
    One human-vs-computer game.

    awaiting_human -> (legal placement) -> terminal | awaiting_computer
    awaiting_computer -> (computer move) -> terminal | awaiting_human
    terminal stays terminal until reset().
    """

    def __init__(self, config: Optional[EngineConfig] = None, agent: Optional[MinimaxAgent] = None) -> None:
        self.config = config or EngineConfig()
        self.agent = agent or MinimaxAgent(depth=self.config.search_depth)
        self.state = GameState(board=new_game(self.config))

    @property
    def board(self) -> Board:
        return self.state.board

    def human_move(self, col: int) -> MoveResult:
        if self.state.phase != "awaiting_human":
            raise InvariantViolation(f"Human move not allowed in phase {self.state.phase!r}.")

        res = attempt_human_move(self.state.board, col)
        if not isinstance(res, Placed):
            self.state.last_status = res.reason
            return res

        self.state.last_status = f"Player X chose {col + 1}"
        self._advance("awaiting_computer")
        return res

    def computer_turn(self) -> Move:
        if self.state.phase != "awaiting_computer":
            raise InvariantViolation(f"Computer move not allowed in phase {self.state.phase!r}.")

        col = computer_move(self.state.board, self.agent)
        self.state.last_status = f"{self.agent.name} chose {int(col) + 1}"
        self._advance("awaiting_human")
        return col

    def reset(self) -> None:
        reset_game(self.state.board)
        self.state.phase = "awaiting_human"
        self.state.outcome = ONGOING
        self.state.last_status = "Human (X) starts."
        logger.debug("Session reset")

    def _advance(self, next_phase: Phase) -> None:
        outcome = query_outcome(self.state.board)
        self.state.outcome = outcome
        if outcome.is_terminal:
            self.state.phase = "terminal"
            self.state.last_status = str(outcome)
            logger.info("Game over: %s", outcome)
        else:
            self.state.phase = next_phase
        logger.debug("Phase -> %s", self.state.phase)

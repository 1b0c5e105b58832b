from __future__ import annotations
from typing import Optional

from connect4.ai.minimax_agent import MinimaxAgent
from connect4.config import EngineConfig
from connect4.core.board import Board
from connect4.core.rules import check_winner
from connect4.errors import IllegalMove, InvariantViolation
from connect4.game.actions import MoveResult, Placed, Rejected
from connect4.game.results import DRAW, ONGOING, Outcome
from connect4.types import COMPUTER, HUMAN, Move


def new_game(config: Optional[EngineConfig] = None) -> Board:
    cfg = config or EngineConfig()
    return Board(cfg.rows, cfg.columns)


def attempt_human_move(board: Board, col: int) -> MoveResult:
    """
    Drop a human piece into `col`. Illegal columns are rejected and the
    board is left untouched.
    """
    try:
        r = board.drop(Move(col), HUMAN)
    except IllegalMove as e:
        return Rejected(col, e.reason)
    return Placed(r, col)


def query_outcome(board: Board) -> Outcome:
    w = check_winner(board)
    if w is not None:
        return Outcome.win(w)
    if board.is_full():
        return DRAW
    return ONGOING


def computer_move(board: Board, agent: Optional[MinimaxAgent] = None) -> Move:
    """
    Pick the computer's column with `agent` (default depth if omitted) and
    play it. Only valid while the outcome is still ongoing.
    """
    if query_outcome(board).is_terminal:
        raise InvariantViolation("computer_move called on a finished game.")
    agent = agent or MinimaxAgent()
    col = agent.best_move(board)
    board.drop(col, COMPUTER)
    return col


def reset_game(board: Board) -> None:
    board.reset()

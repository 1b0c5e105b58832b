from __future__ import annotations

from connect4.config import WIN_SCORE
from connect4.core.board import Board
from connect4.types import COMPUTER, HUMAN


def evaluate(board: Board) -> int:
    """
    Terminal-only evaluation from the computer's side:
    +WIN_SCORE if the computer has four in a row, -WIN_SCORE if the human
    has, 0 otherwise. There is no positional scoring.
    """
    if board.has_four_in_row(COMPUTER):
        return WIN_SCORE
    if board.has_four_in_row(HUMAN):
        return -WIN_SCORE
    return 0


def is_decisive(score: int) -> bool:
    return score == WIN_SCORE or score == -WIN_SCORE

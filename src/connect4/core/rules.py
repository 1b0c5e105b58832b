from __future__ import annotations
from typing import Optional, List, Tuple

from connect4.types import COMPUTER, HUMAN, Player
from connect4.core.board import Board, Coord


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, List[Coord]]]:
    # Live play stops at the first four, so at most one player can hold one.
    for p in (HUMAN, COMPUTER):
        line = board.find_line(p)
        if line is not None:
            return p, line
    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None

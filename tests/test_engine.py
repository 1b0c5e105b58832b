"""Tests for the public engine calls."""

from __future__ import annotations

import pytest

from connect4.ai.minimax_agent import MinimaxAgent
from connect4.config import EngineConfig
from connect4.core.board import Board
from connect4.core.rules import check_winner, check_winner_with_line, is_draw
from connect4.errors import InvariantViolation
from connect4.game.actions import Placed, Rejected
from connect4.game.engine import (
    attempt_human_move,
    computer_move,
    new_game,
    query_outcome,
    reset_game,
)
from connect4.game.results import DRAW, ONGOING, Outcome


def test_new_game_default_and_configured():
    b = new_game()
    assert (b.rows, b.cols) == (6, 7)
    assert str(b) == str(Board())

    small = new_game(EngineConfig(rows=4, columns=5))
    assert (small.rows, small.cols) == (4, 5)


def test_human_move_is_placed_at_bottom():
    b = new_game()
    assert attempt_human_move(b, 3) == Placed(row=5, col=3)
    assert attempt_human_move(b, 3) == Placed(row=4, col=3)
    assert b.grid[5][3] == b.grid[4][3] == "X"


def test_full_column_is_rejected(make_board):
    b = make_board(
        "..O....",
        "..X....",
        "..O....",
        "..X....",
        "..O....",
        "..X....",
    )
    before = [row[:] for row in b.grid]
    res = attempt_human_move(b, 2)
    assert isinstance(res, Rejected)
    assert res.reason == "Column is full."
    assert b.grid == before


@pytest.mark.parametrize("col", [-1, 7])
def test_out_of_range_is_rejected(col):
    b = new_game()
    res = attempt_human_move(b, col)
    assert isinstance(res, Rejected)
    assert res.col == col
    assert res.reason == "Column out of range."
    assert str(b) == str(Board())


def test_query_outcome(make_board, draw_board):
    assert query_outcome(new_game()) == ONGOING

    won = make_board(".......", ".......", ".......", ".......", ".......", "XXXX...")
    assert query_outcome(won) == Outcome.win("X")
    assert query_outcome(won).is_terminal

    assert query_outcome(draw_board) == DRAW
    assert str(query_outcome(draw_board)) == "Draw game."


def test_rules_helpers(make_board, draw_board):
    b = make_board(".......", ".......", "O......", "O......", "O......", "OXXX...")
    assert check_winner(b) == "O"
    player, line = check_winner_with_line(b)
    assert player == "O"
    assert line == [(2, 0), (3, 0), (4, 0), (5, 0)]
    assert not is_draw(b)
    assert is_draw(draw_board)
    assert check_winner(draw_board) is None


def test_computer_move_plays_o(make_board):
    b = make_board(
        ".......",
        ".......",
        ".......",
        ".......",
        "..XX...",
        "X.OOO.X",
    )
    col = computer_move(b, MinimaxAgent(depth=1))
    assert col == 1
    assert b.grid[5][1] == "O"
    assert query_outcome(b) == Outcome.win("O")


def test_computer_move_on_finished_game_raises(make_board, draw_board):
    won = make_board(".......", ".......", ".......", ".......", ".......", "XXXX...")
    before = [row[:] for row in won.grid]
    with pytest.raises(InvariantViolation):
        computer_move(won, MinimaxAgent(depth=1))
    assert won.grid == before

    with pytest.raises(InvariantViolation):
        computer_move(draw_board)


def test_reset_game(draw_board):
    reset_game(draw_board)
    assert query_outcome(draw_board) == ONGOING
    assert draw_board.valid_moves() == list(range(7))

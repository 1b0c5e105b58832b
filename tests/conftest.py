from __future__ import annotations

import pytest

from connect4.core.board import Board


@pytest.fixture
def make_board():
    """Build a 6x7 board from six strings, top row first."""

    def _make(*rows: str) -> Board:
        return Board.from_rows(rows)

    return _make


# Full board, no four in a row for either side.
DRAW_ROWS = (
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
)


@pytest.fixture
def draw_board() -> Board:
    return Board.from_rows(DRAW_ROWS)

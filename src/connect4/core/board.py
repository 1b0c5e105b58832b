# src/connect4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from connect4.config import ROWS, COLS
from connect4.errors import IllegalMove
from connect4.types import Cell, Player, Move

Coord = Tuple[int, int]  # (row, col)

_SYMBOLS = {"X": "X", "O": "O", ".": None}


@dataclass(slots=True)
class Board:
    """
    Row 0 is the TOP of the board, row rows-1 the BOTTOM.
    Occupied cells in a column are always contiguous from the bottom up.
    """

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from strings of X, O and '.', top row first.
        No gravity check is done; fixtures may describe any layout.
        """
        lines = [r.strip() for r in rows]
        if not lines or any(len(r) != len(lines[0]) for r in lines):
            raise ValueError("Rows must be non-empty and of equal length.")
        grid: List[List[Cell]] = []
        for line in lines:
            try:
                grid.append([_SYMBOLS[ch] for ch in line])
            except KeyError as e:
                raise ValueError(f"Unknown cell symbol {e.args[0]!r}.") from None
        return cls(len(lines), len(lines[0]), grid)

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def in_range(self, col: int) -> bool:
        return 0 <= col < self.cols

    def is_legal(self, col: Move) -> bool:
        # Range is the caller's job.
        return self.grid[0][col] is None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def landing_row(self, col: Move) -> Optional[int]:
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def place(self, row: int, col: Move, player: Player) -> None:
        self.grid[row][col] = player

    def clear(self, row: int, col: Move) -> None:
        self.grid[row][col] = None

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if not self.in_range(c):
            raise IllegalMove(c, "Column out of range.")
        r = self.landing_row(Move(c))
        if r is None:
            raise IllegalMove(c, "Column is full.")
        self.grid[r][c] = player
        return r

    def reset(self) -> None:
        for row in self.grid:
            for c in range(self.cols):
                row[c] = None

    def find_line(self, player: Player) -> Optional[List[Coord]]:
        g = self.grid
        rows, cols = self.rows, self.cols

        # Horizontal
        for r in range(rows):
            for c in range(cols - 3):
                if player == g[r][c] == g[r][c + 1] == g[r][c + 2] == g[r][c + 3]:
                    return [(r, c + i) for i in range(4)]

        # Vertical
        for c in range(cols):
            for r in range(rows - 3):
                if player == g[r][c] == g[r + 1][c] == g[r + 2][c] == g[r + 3][c]:
                    return [(r + i, c) for i in range(4)]

        # Diagonal up-right
        for r in range(3, rows):
            for c in range(cols - 3):
                if player == g[r][c] == g[r - 1][c + 1] == g[r - 2][c + 2] == g[r - 3][c + 3]:
                    return [(r - i, c + i) for i in range(4)]

        # Diagonal down-right
        for r in range(rows - 3):
            for c in range(cols - 3):
                if player == g[r][c] == g[r + 1][c + 1] == g[r + 2][c + 2] == g[r + 3][c + 3]:
                    return [(r + i, c + i) for i in range(4)]

        return None

    def has_four_in_row(self, player: Player) -> bool:
        return self.find_line(player) is not None

    def __str__(self) -> str:
        return "\n".join("".join(p if p else "." for p in row) for row in self.grid)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
import logging
import time

from connect4.config import SEARCH_DEPTH
from connect4.core.board import Board
from connect4.core.scoring import evaluate, is_decisive
from connect4.errors import InvariantViolation
from connect4.game.state import GameState
from connect4.types import COMPUTER, HUMAN, Move

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Plain fixed-depth minimax for the computer side.

    No pruning, no move ordering, no transposition table: every legal
    column is expanded at every node down to the depth limit. Columns are
    scanned left to right and the first column reaching the best score is
    kept, so results are deterministic.

    The board is borrowed for the duration of a decision. Every
    hypothetical piece is retracted before returning.
    """

    name: str = "Minimax AI"
    depth: int = SEARCH_DEPTH

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"depth must be >= 1, got {self.depth}.")

    def choose_move(self, state: GameState) -> Move:
        return self.best_move(state.board)

    def best_move(self, board: Board) -> Move:
        moves = board.valid_moves()
        if not moves:
            raise InvariantViolation("best_move called on a full board.")
        if is_decisive(evaluate(board)):
            raise InvariantViolation("best_move called on a decided board.")

        start = time.perf_counter()
        self._nodes = 0

        best_col = moves[0]
        best_score: Optional[int] = None

        for c in moves:
            r = board.landing_row(c)
            board.place(r, c, COMPUTER)
            score = self.minimax(board, self.depth - 1, False)
            board.clear(r, c)

            # Strict '>' keeps the lowest column on ties.
            if best_score is None or score > best_score:
                best_score = score
                best_col = c

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": self._nodes,
            "eval": best_score,
            "move_col": int(best_col) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug(
            "%s chose column %d (eval=%s, nodes=%d, %dms)",
            self.name, best_col, best_score, self._nodes, self.last_info["time_ms"],
        )
        return best_col

    def minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        self._nodes += 1

        score = evaluate(board)
        if is_decisive(score) or depth == 0 or board.is_full():
            return score

        player = COMPUTER if maximizing else HUMAN
        best: Optional[int] = None

        for c in range(board.cols):
            if not board.is_legal(c):
                continue

            r = board.landing_row(c)
            board.place(r, c, player)
            v = self.minimax(board, depth - 1, not maximizing)
            board.clear(r, c)

            if best is None:
                best = v
            elif maximizing:
                best = max(best, v)
            else:
                best = min(best, v)

        # No legal column: fall back to the static score.
        return score if best is None else best

# src/connect4/errors.py

from __future__ import annotations


class Connect4Error(Exception):
    """Base class for engine errors."""


class IllegalMove(Connect4Error, ValueError):
    """Column is full or out of range."""

    def __init__(self, col: int, reason: str) -> None:
        super().__init__(reason)
        self.col = col
        self.reason = reason


class InvariantViolation(Connect4Error, RuntimeError):
    """
    A caller broke an engine precondition, e.g. asked for a computer move
    on a board that is already full or decided.
    """

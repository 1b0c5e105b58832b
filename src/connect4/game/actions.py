from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Placed:
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class Rejected:
    col: int
    reason: str


MoveResult = Union[Placed, Rejected]

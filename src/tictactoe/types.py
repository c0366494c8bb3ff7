# src/tictactoe/types.py

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from tictactoe.config import SIZE, FIRST_LABEL, SECOND_LABEL


class Cell(Enum):
    EMPTY = 0
    MARK_A = 1
    MARK_B = 2


class Player(Enum):
    FIRST = 1
    SECOND = 2

    @property
    def mark(self) -> Cell:
        return Cell.MARK_A if self is Player.FIRST else Cell.MARK_B

    @property
    def label(self) -> str:
        return FIRST_LABEL if self is Player.FIRST else SECOND_LABEL

    def other(self) -> "Player":
        return Player.SECOND if self is Player.FIRST else Player.FIRST

    @classmethod
    def owning(cls, mark: Cell) -> "Player":
        """Player whose mark this is. EMPTY belongs to nobody."""
        if mark is Cell.MARK_A:
            return cls.FIRST
        if mark is Cell.MARK_B:
            return cls.SECOND
        raise ValueError(f"No player owns {mark!r}.")


@dataclass(frozen=True, slots=True)
class CellAddress:
    """User-facing board coordinate, 1-based on both axes."""

    row: int
    col: int

    def in_bounds(self) -> bool:
        return 1 <= self.row <= SIZE and 1 <= self.col <= SIZE

    def __str__(self) -> str:
        return f"{self.row}{self.col}"

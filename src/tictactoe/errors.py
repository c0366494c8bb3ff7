# src/tictactoe/errors.py

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tictactoe.types import CellAddress


class GameError(Exception):
    pass


class ParseError(GameError, ValueError):
    """Raw input could not be turned into a command."""


class InvalidSyntax(ParseError):
    def __init__(self, raw: str) -> None:
        super().__init__("Invalid command. Try again!")
        self.raw = raw


class MoveRejected(GameError, ValueError):
    """Well-formed move that the rules do not allow."""


class CellOccupied(MoveRejected):
    def __init__(self, address: "CellAddress") -> None:
        super().__init__("Position already played. Please try again with different coordinates!")
        self.address = address


class OutOfBoundsError(GameError, IndexError):
    """
    An address outside 1..3 reached the board.
    The parser filters these out, so this is a defect, never user input.
    """

    def __init__(self, address: "CellAddress") -> None:
        super().__init__(f"Cell address {address.row},{address.col} is outside the board.")
        self.address = address


class GameStateError(GameError, RuntimeError):
    """A finished game was asked to take another turn."""

from __future__ import annotations

from tictactoe.core.board import Board
from tictactoe.errors import CellOccupied, OutOfBoundsError
from tictactoe.types import CellAddress


def validate(board: Board, address: CellAddress) -> None:
    """
    Raise CellOccupied if a mark may not go at `address`.
    Addresses are expected to come from the parser; anything outside the
    board is a bug and raises OutOfBoundsError.
    """
    if not address.in_bounds():
        raise OutOfBoundsError(address)
    if board.is_occupied(address):
        raise CellOccupied(address)

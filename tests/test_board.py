import pytest

from tictactoe.core.board import Board
from tictactoe.errors import OutOfBoundsError
from tictactoe.types import Cell, CellAddress

ALL_ADDRESSES = [CellAddress(r, c) for r in range(1, 4) for c in range(1, 4)]


def test_new_board_is_empty():
    board = Board()
    assert all(board.cell_at(a) is Cell.EMPTY for a in ALL_ADDRESSES)
    assert board.has_empty_cell()
    assert len(board.empty_cells()) == 9


@pytest.mark.parametrize("address", ALL_ADDRESSES, ids=str)
def test_place_only_touches_one_cell(address):
    board = Board()
    board.place(address, Cell.MARK_B)

    assert board.cell_at(address) is Cell.MARK_B
    assert board.is_occupied(address)
    for other in ALL_ADDRESSES:
        if other != address:
            assert board.cell_at(other) is Cell.EMPTY


def test_place_uses_one_based_coordinates():
    board = Board()
    board.place(CellAddress(1, 3), Cell.MARK_A)
    assert board.grid[0][2] is Cell.MARK_A


def test_full_board_has_no_empty_cell():
    board = Board.from_rows(["OXO", "XOX", "XOX"])
    assert not board.has_empty_cell()
    assert board.empty_cells() == []


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.place(CellAddress(2, 2), Cell.MARK_A)
    assert board.cell_at(CellAddress(2, 2)) is Cell.EMPTY


def test_from_rows_reads_symbols():
    board = Board.from_rows(["O.X", " x ", "..."])
    assert board.cell_at(CellAddress(1, 1)) is Cell.MARK_A
    assert board.cell_at(CellAddress(1, 3)) is Cell.MARK_B
    assert board.cell_at(CellAddress(2, 2)) is Cell.MARK_B
    assert board.cell_at(CellAddress(2, 1)) is Cell.EMPTY


def test_from_rows_rejects_bad_shapes_and_symbols():
    with pytest.raises(ValueError):
        Board.from_rows(["OX", "...", "..."])
    with pytest.raises(ValueError):
        Board.from_rows(["OXZ", "...", "..."])


@pytest.mark.parametrize("address", [CellAddress(0, 1), CellAddress(1, 4), CellAddress(4, 4), CellAddress(-1, 2)])
def test_out_of_bounds_is_loud(address):
    board = Board()
    with pytest.raises(OutOfBoundsError):
        board.is_occupied(address)
    with pytest.raises(OutOfBoundsError):
        board.place(address, Cell.MARK_A)
    with pytest.raises(OutOfBoundsError):
        board.cell_at(address)

# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

from tictactoe.config import SIZE, MARK_A_SYMBOL, MARK_B_SYMBOL
from tictactoe.errors import OutOfBoundsError
from tictactoe.types import Cell, CellAddress


@dataclass(slots=True)
class Board:
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[Cell.EMPTY for _ in range(SIZE)] for _ in range(SIZE)]
        if len(self.grid) != SIZE or any(len(row) != SIZE for row in self.grid):
            raise ValueError(f"Board must be {SIZE}x{SIZE}.")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from strings such as ["OX.", ".O.", "..X"].
        'O' and 'X' are the two marks; '.' or ' ' is an empty cell.
        """
        symbols = {MARK_A_SYMBOL: Cell.MARK_A, MARK_B_SYMBOL: Cell.MARK_B, ".": Cell.EMPTY, " ": Cell.EMPTY}
        try:
            grid = [[symbols[ch] for ch in row.upper()] for row in rows]
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r}.") from None
        return cls(grid)

    def _index(self, address: CellAddress) -> Tuple[int, int]:
        if not address.in_bounds():
            raise OutOfBoundsError(address)
        return address.row - 1, address.col - 1

    def copy(self) -> "Board":
        return Board([row[:] for row in self.grid])

    def cell_at(self, address: CellAddress) -> Cell:
        r, c = self._index(address)
        return self.grid[r][c]

    def is_occupied(self, address: CellAddress) -> bool:
        return self.cell_at(address) is not Cell.EMPTY

    def place(self, address: CellAddress, mark: Cell) -> None:
        # No legality check here; the validator owns that.
        r, c = self._index(address)
        self.grid[r][c] = mark

    def has_empty_cell(self) -> bool:
        return any(cell is Cell.EMPTY for row in self.grid for cell in row)

    def empty_cells(self) -> List[CellAddress]:
        return [
            CellAddress(r + 1, c + 1)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.grid[r][c] is Cell.EMPTY
        ]

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for row in self.grid:
            yield tuple(row)

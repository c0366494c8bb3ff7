from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from tictactoe.config import SIZE
from tictactoe.core.board import Board
from tictactoe.types import Cell, Player

Coord = Tuple[int, int]  # (row, col), zero-based
Line = Tuple[Coord, Coord, Coord]

# Rows, then columns, then the two diagonals.
LINES: List[Line] = (
    [tuple((r, c) for c in range(SIZE)) for r in range(SIZE)]
    + [tuple((r, c) for r in range(SIZE)) for c in range(SIZE)]
    + [
        tuple((i, i) for i in range(SIZE)),
        tuple((i, SIZE - 1 - i) for i in range(SIZE)),
    ]
)


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Won:
    player: Player


@dataclass(frozen=True, slots=True)
class Draw:
    pass


GameOutcome = Union[InProgress, Won, Draw]


def winning_line(board: Board) -> Optional[Tuple[Cell, Line]]:
    g = board.grid
    for line in LINES:
        (r0, c0), (r1, c1), (r2, c2) = line
        p = g[r0][c0]
        if p is not Cell.EMPTY and p == g[r1][c1] == g[r2][c2]:
            return p, line
    return None


def evaluate(board: Board) -> GameOutcome:
    # A single move can finish two lines, but only for the player who made it,
    # so the first line found names the winner.
    res = winning_line(board)
    if res is not None:
        return Won(Player.owning(res[0]))
    if not board.has_empty_cell():
        return Draw()
    return InProgress()

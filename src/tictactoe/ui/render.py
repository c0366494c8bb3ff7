from __future__ import annotations
import sys
from typing import Iterable, Optional, Set, TextIO, Tuple

from tictactoe.config import CLEAR_SCREEN, EMPTY_SYMBOL, MARK_A_SYMBOL, MARK_B_SYMBOL, SIZE, USE_COLOR
from tictactoe.core.board import Board
from tictactoe.types import Cell
from tictactoe.ui.colors import c, BOLD, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

Coord = Tuple[int, int]

HELP = "=> Enter `<row><col>` as coordinates on the board OR `q` to quit"


def symbol(cell: Cell) -> str:
    # Every Cell member must be listed; a new one fails here instead of drawing blank.
    if cell is Cell.EMPTY:
        return EMPTY_SYMBOL
    if cell is Cell.MARK_A:
        return MARK_A_SYMBOL
    if cell is Cell.MARK_B:
        return MARK_B_SYMBOL
    raise ValueError(f"No symbol for cell state {cell!r}.")


def _cell_color(cell: Cell) -> str:
    if cell is Cell.MARK_A:
        return FG_CYAN
    if cell is Cell.MARK_B:
        return FG_YELLOW
    return ""


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None, use_color: bool = USE_COLOR) -> list[str]:
    """
    Text art for the board, coordinates on all four sides:

            1   2   3
          #############
        1 # O # X #   # 1
          #############
    """
    hl: Set[Coord] = set(highlight) if highlight else set()

    header = "        " + "   ".join(str(i + 1) for i in range(SIZE))
    border = "      " + "#" * (4 * SIZE + 1)

    lines = [header]
    for r, row in enumerate(board.rows()):
        lines.append(border)
        parts = []
        for cidx, cell in enumerate(row):
            s = symbol(cell)
            code = _cell_color(cell)
            if code:
                s = c(s, code, use_color)
            if (r, cidx) in hl:
                s = c(s, REVERSE, use_color)
            parts.append(f"# {s} ")
        lines.append(f"    {r + 1} " + "".join(parts) + f"# {r + 1}")
    lines.append(border)
    lines.append(header)
    return lines


class ConsoleRenderer:
    def __init__(
        self,
        stream: Optional[TextIO] = None,
        use_color: bool = USE_COLOR,
        clear_screen: bool = CLEAR_SCREEN,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color
        self.clear_screen = clear_screen

    def _print(self, s: str = "") -> None:
        print(s, file=self.stream)

    def clear(self) -> None:
        if self.clear_screen:
            print("\033[2J\033[H", end="", file=self.stream)

    def render(
        self,
        board: Board,
        message: Optional[str] = None,
        highlight: Optional[Iterable[Coord]] = None,
        final: bool = False,
    ) -> None:
        self.clear()

        for line in board_lines(board, highlight, self.use_color):
            self._print(line)

        if final:
            if message:
                self._print(c(f"=> {message}", BOLD, self.use_color))
        else:
            if message:
                self._print(c(f"=> {message}", FG_RED, self.use_color))
            self._print(HELP)
        self.stream.flush()

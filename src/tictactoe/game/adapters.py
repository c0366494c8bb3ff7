from __future__ import annotations
from typing import Iterable, Optional, Protocol, Tuple

from tictactoe.core.board import Board

Coord = Tuple[int, int]


class InputAdapter(Protocol):
    def read_line(self, prompt: str) -> str:
        ...


class OutputAdapter(Protocol):
    def render(
        self,
        board: Board,
        message: Optional[str] = None,
        highlight: Optional[Iterable[Coord]] = None,
        final: bool = False,
    ) -> None:
        """
        Show the board plus `message` (if any). `final` marks the closing
        render once the game has ended; `highlight` holds zero-based cells.
        """
        ...

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.types import Player


class Phase(Enum):
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAW = "draw"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not Phase.AWAITING_MOVE


@dataclass(frozen=True, slots=True)
class GameState:
    """
    One snapshot of the turn engine.

    `current` is the player to move while AWAITING_MOVE and the winner once
    WON. `message` is shown once by the next render and then dropped.
    """

    board: Board = field(default_factory=Board)
    phase: Phase = Phase.AWAITING_MOVE
    current: Player = Player.FIRST
    message: Optional[str] = None

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.current if self.phase is Phase.WON else None

    def with_message(self, message: Optional[str]) -> "GameState":
        return replace(self, message=message)


def new_game() -> GameState:
    return GameState(board=Board(), phase=Phase.AWAITING_MOVE, current=Player.FIRST)

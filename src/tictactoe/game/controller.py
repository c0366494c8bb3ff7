from __future__ import annotations

import logging
from typing import Optional

from tictactoe.core.rules import winning_line
from tictactoe.game.adapters import InputAdapter, OutputAdapter
from tictactoe.game.engine import outcome_message, prompt_for, step
from tictactoe.game.state import GameState, Phase, new_game

logger = logging.getLogger(__name__)


def run_game(
    reader: InputAdapter,
    out: OutputAdapter,
    state: Optional[GameState] = None,
) -> GameState:
    """
    Drive one game to a terminal state and return it.

    Deciding what to do with the result (exit code, play again) is the
    caller's job; nothing here ends the process.
    """
    if state is None:
        state = new_game()
    logger.info("Game started, %s to move", state.current.label)

    while not state.is_over:
        out.render(state.board, state.message)
        state = state.with_message(None)

        raw = reader.read_line(prompt_for(state))
        state = step(state, raw)

    highlight = None
    if state.phase is Phase.WON:
        res = winning_line(state.board)
        highlight = res[1] if res else None

    out.render(state.board, outcome_message(state), highlight=highlight, final=True)
    logger.info("Game over: %s", state.phase.value)
    return state

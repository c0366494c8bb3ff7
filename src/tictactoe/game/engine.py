from __future__ import annotations

import logging
from dataclasses import replace

from tictactoe.core.commands import Play, Quit, parse_command
from tictactoe.core.rules import Draw, InProgress, Won, evaluate
from tictactoe.core.validator import validate
from tictactoe.errors import GameStateError, MoveRejected, ParseError
from tictactoe.game.state import GameState, Phase

logger = logging.getLogger(__name__)


def step(state: GameState, raw: str) -> GameState:
    """
    Apply one line of player input and return the next state.

    Never mutates `state` or its board. Bad syntax and occupied cells leave
    the same player to move with a message attached; everything else either
    hands the turn over or ends the game.
    """
    if state.is_over:
        raise GameStateError(f"Game already finished ({state.phase.value}).")

    try:
        command = parse_command(raw)
    except ParseError as e:
        logger.debug("Rejected input %r from %s", raw, state.current.label)
        return replace(state, message=str(e))

    if isinstance(command, Quit):
        logger.info("%s quit", state.current.label)
        return replace(state, phase=Phase.QUIT, message=None)

    if not isinstance(command, Play):
        raise TypeError(f"Unhandled command: {command!r}")

    try:
        validate(state.board, command.address)
    except MoveRejected as e:
        logger.debug("%s tried occupied cell %s", state.current.label, command.address)
        return replace(state, message=str(e))

    board = state.board.copy()
    board.place(command.address, state.current.mark)
    logger.info("%s played %s", state.current.label, command.address)

    outcome = evaluate(board)
    if isinstance(outcome, Won):
        logger.info("%s won", outcome.player.label)
        return GameState(board=board, phase=Phase.WON, current=outcome.player)
    if isinstance(outcome, Draw):
        logger.info("Draw")
        return GameState(board=board, phase=Phase.DRAW, current=state.current)
    if isinstance(outcome, InProgress):
        return GameState(board=board, phase=Phase.AWAITING_MOVE, current=state.current.other())

    raise TypeError(f"Unhandled outcome: {outcome!r}")


def prompt_for(state: GameState) -> str:
    return f"=> {state.current.label}: "


def outcome_message(state: GameState) -> str:
    if state.phase is Phase.WON:
        return f"{state.current.label} won!"
    if state.phase is Phase.DRAW:
        return "Draw! Try again :)"
    if state.phase is Phase.QUIT:
        return "Game quit."
    raise GameStateError("Game is still in progress.")

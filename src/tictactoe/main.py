from __future__ import annotations

import argparse
import logging

from tictactoe import config
from tictactoe.game.controller import run_game
from tictactoe.ui.console import ConsoleInput
from tictactoe.ui.render import ConsoleRenderer

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Two-player tic-tac-toe in the terminal.")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL,
        help="Logging level (logs go to stderr)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    renderer = ConsoleRenderer(
        use_color=config.USE_COLOR and not args.no_color,
        clear_screen=config.CLEAR_SCREEN and not args.no_clear,
    )

    try:
        final = run_game(ConsoleInput(), renderer)
    except KeyboardInterrupt:
        print()
        logger.info("Interrupted")
        return 130

    logger.debug("Exiting after %s", final.phase.value)
    # Quit, win and draw are all normal endings.
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

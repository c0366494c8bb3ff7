from __future__ import annotations

import logging

from tictactoe.config import QUIT_TOKEN

logger = logging.getLogger(__name__)


class ConsoleInput:
    def read_line(self, prompt: str) -> str:
        try:
            return input(prompt)
        except EOFError:
            # Closed stdin would otherwise re-prompt forever.
            print()
            logger.info("End of input, treating as quit")
            return QUIT_TOKEN

# src/tictactoe/config.py

from __future__ import annotations

SIZE = 3

QUIT_TOKEN = "q"

# Display symbols / labels
MARK_A_SYMBOL = "O"
MARK_B_SYMBOL = "X"
EMPTY_SYMBOL = " "
FIRST_LABEL = "Player1"
SECOND_LABEL = "Player2"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Logging goes to stderr so it never interleaves with the board on stdout
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

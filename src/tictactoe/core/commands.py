from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from tictactoe.config import QUIT_TOKEN
from tictactoe.errors import InvalidSyntax
from tictactoe.types import CellAddress

_DIGITS = "0123456789"


@dataclass(frozen=True, slots=True)
class Play:
    address: CellAddress


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Command = Union[Play, Quit]


def parse_command(raw: str) -> Command:
    """
    Accepted forms (case-insensitive, surrounding whitespace ignored):
      q     -> Quit
      <r><c> with r, c in 1..3 -> Play, coordinates kept 1-based
    Anything else raises InvalidSyntax.
    """
    s = raw.strip().lower()

    if len(s) == 1 and s == QUIT_TOKEN:
        return Quit()

    # str.isdigit() also accepts things like superscripts; stick to 0-9.
    if len(s) == 2 and s[0] in _DIGITS and s[1] in _DIGITS:
        address = CellAddress(int(s[0]), int(s[1]))
        if address.in_bounds():
            return Play(address)

    raise InvalidSyntax(raw)

from __future__ import annotations
from typing import List, Optional

import pytest

from tictactoe.core.board import Board


class ScriptedInput:
    """Feeds canned lines; running past the end is a test failure."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)
        self.prompts: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            pytest.fail(f"Unexpected extra input request: {prompt!r}")
        return self.lines.pop(0)


class RecordingOutput:
    def __init__(self) -> None:
        self.frames: List[dict] = []

    def render(self, board: Board, message: Optional[str] = None, highlight=None, final: bool = False) -> None:
        self.frames.append(
            {
                "board": board.copy(),
                "message": message,
                "highlight": list(highlight) if highlight else None,
                "final": final,
            }
        )

    @property
    def messages(self) -> List[Optional[str]]:
        return [f["message"] for f in self.frames]


@pytest.fixture
def out() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def scripted():
    return ScriptedInput

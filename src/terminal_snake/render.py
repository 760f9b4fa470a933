"""Text rendering of game snapshots."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Protocol, TextIO

import numpy as np

from terminal_snake.engine import GameStatus, win_threshold

if TYPE_CHECKING:
    from terminal_snake.engine import GameState

SNAKE_CHAR = "S"
FOOD_CHAR = "F"
EMPTY_CHAR = "."

END_MESSAGES: dict[GameStatus, str] = {
    GameStatus.LOST: "Game Over!",
    GameStatus.WON: "You won!",
}

_CLEAR = "\x1b[2J\x1b[H"


class Screen(Protocol):
    def clear(self) -> None: ...

    def write_line(self, text: str) -> None: ...


def format_threshold(threshold: float) -> str:
    """Show whole thresholds without a fractional part: 3, 7.5."""
    if threshold.is_integer():
        return str(int(threshold))
    return str(threshold)


def progress_line(state: GameState) -> str:
    threshold = format_threshold(win_threshold(state.field))
    return f"Snake length: {len(state.snake.body)}/{threshold}"


def render_grid(state: GameState) -> list[str]:
    """Draw the field row by row.

    Snake cells are painted after the food so an overlap shows ``S``.
    Segments outside the field are not drawn.
    """
    field = state.field
    cells = np.full((field.height, field.width), EMPTY_CHAR, dtype="<U1")
    cells[state.food.y, state.food.x] = FOOD_CHAR
    for x, y in state.snake.body:
        if field.is_inside(x, y):
            cells[y, x] = SNAKE_CHAR
    return ["".join(row) for row in cells.tolist()]


def render_frame(state: GameState) -> list[str]:
    """Return every line of one frame: progress, grid, end message."""
    lines = [progress_line(state), *render_grid(state)]
    message = END_MESSAGES.get(state.status)
    if message is not None:
        lines.append(message)
    return lines


class TerminalScreen:
    """Writes frames to a terminal stream using ANSI escapes."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        self.stream.write(_CLEAR)
        self.stream.flush()

    def write_line(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()

"""Real-time driver: input polling, rendering, and tick pacing."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from terminal_snake.engine import GameStatus
from terminal_snake.render import render_frame
from terminal_snake.snake import Direction
from terminal_snake.terminal import Key

if TYPE_CHECKING:
    from terminal_snake.engine import GameEngine, GameState
    from terminal_snake.render import Screen

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class KeySource(Protocol):
    def key_available(self) -> bool: ...

    def read_key(self) -> Key: ...


class GameLoop:
    """Runs an engine at a fixed tick interval until the game ends.

    The sleep function is injectable so the loop can run without
    wall-clock delays.
    """

    def __init__(
        self,
        engine: GameEngine,
        keys: KeySource,
        screen: Screen,
        tick_interval: float = 0.25,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.engine = engine
        self.keys = keys
        self.screen = screen
        self.tick_interval = tick_interval
        self._sleep = sleep

    def poll_direction(self) -> Direction | None:
        """Read at most one pending key; unmapped keys are ignored."""
        if not self.keys.key_available():
            return None
        key = self.keys.read_key()
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            logger.debug("Ignoring key %s.", key.name)
        return direction

    def tick(self) -> GameState:
        """Run one poll → step → render cycle without sleeping."""
        state = self.engine.step(self.poll_direction())
        self.draw(state)
        return state

    def draw(self, state: GameState) -> None:
        self.screen.clear()
        for line in render_frame(state):
            self.screen.write_line(line)

    def run(self) -> GameStatus:
        """Play until the game is won or lost and return the final status."""
        while self.engine.status is GameStatus.ONGOING:
            state = self.tick()
            if state.status is GameStatus.ONGOING:
                self._sleep(self.tick_interval)
        return self.engine.status

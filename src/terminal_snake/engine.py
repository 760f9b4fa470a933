"""Tick-based game engine composing field, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace

import numpy as np

from terminal_snake.food import Food, FoodSpawner
from terminal_snake.grid import GameField
from terminal_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)

# Share of the field the snake must cover to win.
WIN_RATIO = 0.3


class GameStatus(enum.Enum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


def win_threshold(field: GameField) -> float:
    """Snake length that wins the game on *field*.

    The product is not rounded. A snake only wins when its length equals
    it exactly, so fields whose product is fractional cannot be won.
    """
    return field.width * field.height * WIN_RATIO


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game after a given number of ticks.

    Snapshots are never mutated: :func:`step` copies the snake before
    moving it and returns a new snapshot.
    """

    field: GameField
    snake: Snake
    food: Food
    status: GameStatus = GameStatus.ONGOING
    tick: int = 0

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.ONGOING

    def to_dict(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "status": self.status.value,
            "field": self.field.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict(),
            "threshold": win_threshold(self.field),
        }


def step(
    state: GameState,
    spawner: FoodSpawner,
    direction: Direction | None = None,
) -> GameState:
    """Advance *state* by one tick and return the resulting snapshot.

    Finished games are returned unchanged.
    """
    if state.is_over:
        return state

    snake = state.snake.copy()
    if direction is not None:
        snake.direction = direction

    snake.move()

    food = state.food
    if snake.head == food.position:
        snake.grow()
        food = spawner.spawn(snake)

    status = GameStatus.ONGOING
    if not state.field.is_inside(*snake.head) or snake.is_self_eating():
        status = GameStatus.LOST
    elif len(snake.body) == win_threshold(state.field):
        status = GameStatus.WON

    return replace(
        state, snake=snake, food=food, status=status, tick=state.tick + 1,
    )


class GameEngine:
    """Single-snake game holding the current snapshot.

    Each call to :meth:`step` advances the game by one tick through the
    pure :func:`step` transition and keeps the result.
    """

    def __init__(self, state: GameState, spawner: FoodSpawner) -> None:
        self.state = state
        self.spawner = spawner

    @classmethod
    def new(
        cls,
        field: GameField,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        snake: Snake | None = None,
    ) -> GameEngine:
        """Start a game with a one-cell snake and the first food placed."""
        if rng is None:
            rng = np.random.default_rng(seed)
        if snake is None:
            snake = Snake(0, 0, Direction.RIGHT)
        if not field.is_inside(*snake.head):
            raise ValueError("Snake must start inside the field.")

        spawner = FoodSpawner(field, rng=rng)
        state = GameState(field=field, snake=snake, food=spawner.spawn(snake))
        logger.info(
            "New %dx%d game, win at length %s.",
            field.width, field.height, win_threshold(field),
        )
        return cls(state, spawner)

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def threshold(self) -> float:
        return win_threshold(self.state.field)

    def step(self, direction: Direction | None = None) -> GameState:
        """Advance the game by one tick and return the new snapshot."""
        if self.state.is_over:
            return self.state

        self.state = step(self.state, self.spawner, direction)
        if self.state.is_over:
            logger.info(
                "Game %s at tick %d with length %d.",
                self.state.status.value, self.state.tick,
                len(self.state.snake.body),
            )
        return self.state

    def get_state(self) -> dict:
        """Return the current snapshot as a serializable dict."""
        return self.state.to_dict()

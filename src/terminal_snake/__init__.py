"""Terminal Snake: a single-player snake game for the console."""

from terminal_snake.engine import GameEngine, GameState, GameStatus, step
from terminal_snake.food import Food, FoodSpawner
from terminal_snake.grid import GameField
from terminal_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "Food",
    "FoodSpawner",
    "GameEngine",
    "GameField",
    "GameState",
    "GameStatus",
    "Snake",
    "step",
]

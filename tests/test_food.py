"""Tests for food placement."""

import numpy as np
import pytest

from terminal_snake.food import Food, FoodSpawner
from terminal_snake.grid import GameField
from terminal_snake.snake import Snake


class TestFood:
    def test_position(self):
        food = Food(3, 4)
        assert food.position == (3, 4)
        assert food.to_dict() == {"x": 3, "y": 4}


class TestFoodSpawner:
    def test_spawn_inside_field(self):
        field = GameField(width=7, height=3)
        spawner = FoodSpawner(field, rng=np.random.default_rng(0))
        for _ in range(50):
            food = spawner.spawn(Snake(0, 0))
            assert field.is_inside(food.x, food.y)

    def test_never_on_snake(self):
        field = GameField(width=4, height=4)
        snake = Snake(0, 0)
        snake.body = [(x, y) for y in range(4) for x in range(4)][:-1]
        spawner = FoodSpawner(field, rng=np.random.default_rng(5))
        for _ in range(20):
            assert spawner.spawn(snake).position == (3, 3)

    def test_never_on_snake_random_shapes(self):
        field = GameField(width=6, height=6)
        rng = np.random.default_rng(11)
        spawner = FoodSpawner(field, rng=rng)
        cells = [(x, y) for y in range(6) for x in range(6)]
        for length in range(1, 30):
            picks = rng.choice(len(cells), size=length, replace=False)
            snake = Snake(0, 0)
            snake.body = [cells[i] for i in picks]
            food = spawner.spawn(snake)
            assert food.position not in snake.body

    def test_deterministic_with_seed(self):
        field = GameField(width=10, height=10)
        a = FoodSpawner(field, rng=np.random.default_rng(42))
        b = FoodSpawner(field, rng=np.random.default_rng(42))
        snake = Snake(0, 0)
        assert [a.spawn(snake) for _ in range(5)] == [
            b.spawn(snake) for _ in range(5)
        ]

    def test_full_field_raises(self):
        field = GameField(width=1, height=1)
        spawner = FoodSpawner(field)
        with pytest.raises(ValueError, match="No free cell"):
            spawner.spawn(Snake(0, 0))

"""Food placement logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from terminal_snake.grid import GameField
    from terminal_snake.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Food:
    """A single food cell. Eaten food is replaced, never moved."""

    x: int
    y: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


class FoodSpawner:
    """Places food on free cells of the field.

    Uses a NumPy RNG so placement is reproducible when seeded.
    """

    def __init__(
        self,
        field: GameField,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.field = field
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, snake: Snake) -> Food:
        """Draw random cells until one is not covered by *snake*.

        There is no attempt cap. A field with no free cell at all raises
        ``ValueError`` rather than drawing forever.
        """
        on_field = {seg for seg in snake.body if self.field.is_inside(*seg)}
        if len(on_field) >= self.field.cell_count:
            raise ValueError("No free cell left for food.")

        rejected = 0
        while True:
            x = int(self.rng.integers(0, self.field.width))
            y = int(self.rng.integers(0, self.field.height))
            if not snake.occupies(x, y):
                break
            rejected += 1

        if rejected:
            logger.debug("Placed food at (%d, %d) after %d rejected draws.",
                         x, y, rejected)
        return Food(x, y)

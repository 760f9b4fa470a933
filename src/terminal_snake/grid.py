"""Playing field bounds for the snake game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameField:
    """Fixed-size rectangular field.

    Coordinates use (x, y) ordering with the origin in the top-left corner;
    ``x`` grows to the right and ``y`` grows downward.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Field dimensions must be positive.")

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def is_inside(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the field."""
        return 0 <= x < self.width and 0 <= y < self.height

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}

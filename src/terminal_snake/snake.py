"""Snake representation and movement logic."""

from __future__ import annotations

import enum


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Snake:
    """A snake represented as an ordered list of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Growing duplicates
    the tail segment, so the two last entries may share a cell until the
    next move pulls them apart.
    """

    def __init__(
        self,
        start_x: int = 0,
        start_y: int = 0,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: list[tuple[int, int]] = [(start_x, start_y)]
        self.direction = direction

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        """Return the tail coordinate."""
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def move(self) -> None:
        """Shift the body one cell forward in the current direction.

        No bounds checking is done here; the caller decides whether the
        new head is still on the field.
        """
        dx, dy = self.direction.value
        x, y = self.head
        self.body.insert(0, (x + dx, y + dy))
        self.body.pop()

    def grow(self) -> None:
        """Append a copy of the tail segment."""
        self.body.append(self.body[-1])

    def interior(self) -> list[tuple[int, int]]:
        """Return the segments a head can collide with.

        Both the head and the tail are left out: a head that lands exactly
        on the tail cell is not a collision.
        """
        return self.body[1:-1]

    def is_self_eating(self) -> bool:
        """Check whether the head overlaps an interior body segment."""
        head = self.head
        return any(seg == head for seg in self.interior())

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def copy(self) -> Snake:
        """Return an independent snake with the same body and heading."""
        clone = Snake(direction=self.direction)
        clone.body = list(self.body)
        return clone

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }

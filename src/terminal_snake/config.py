"""Run configuration for a terminal game."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class GameConfig:
    """Settings for a single game session."""

    width: int
    height: int
    # Seconds between ticks.
    tick_interval: float = 0.25
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Field dimensions must be positive.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")

    def to_dict(self) -> dict:
        return asdict(self)

"""Command-line entry point for the terminal snake game."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminal-snake",
        description="Play Snake in the terminal with the arrow keys.",
    )
    parser.add_argument("width", help="Field width in cells.")
    parser.add_argument("height", help="Field height in cells.")
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement.",
    )
    parser.add_argument(
        "--tick-interval", type=float, default=0.25,
        help="Seconds between ticks.",
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def _parse_dimension(
    parser: argparse.ArgumentParser, name: str, raw: str,
) -> int:
    try:
        value = int(raw)
    except ValueError:
        parser.error(f"{name} must be an integer, got {raw!r}.")
    if value < 1:
        parser.error(f"{name} must be positive, got {value}.")
    return value


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``terminal-snake`` CLI."""
    from terminal_snake.config import GameConfig
    from terminal_snake.engine import GameEngine
    from terminal_snake.grid import GameField
    from terminal_snake.loop import GameLoop
    from terminal_snake.render import TerminalScreen
    from terminal_snake.terminal import KeyReader

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    print(f"x: {args.width} y: {args.height}")  # noqa: T201
    width = _parse_dimension(parser, "width", args.width)
    height = _parse_dimension(parser, "height", args.height)

    try:
        config = GameConfig(
            width=width, height=height,
            tick_interval=args.tick_interval, seed=args.seed,
        )
        engine = GameEngine.new(
            GameField(config.width, config.height), seed=config.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))
    logger.info("Starting game with %s", config.to_dict())

    try:
        with KeyReader() as keys:
            loop = GameLoop(
                engine, keys, TerminalScreen(),
                tick_interval=config.tick_interval,
            )
            loop.run()
    except KeyboardInterrupt:
        logger.info("Interrupted at tick %d.", engine.state.tick)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())

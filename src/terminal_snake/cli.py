"""CLI launcher for a terminal snake game."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from terminal_snake.config import GameConfig
from terminal_snake.loop import play
from terminal_snake.terminal import raw_terminal

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="terminal-snake",
        description=(
            "Steer a snake around a 40x20 board with W/A/S/D; eat food to "
            "grow and press Q to quit."
        ),
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``terminal-snake`` CLI."""
    # INFO and below would draw over the board.
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    _build_parser().parse_args(argv)
    config = GameConfig.from_env()

    with raw_terminal(sys.stdin, sys.stdout):
        try:
            score = asyncio.run(play(config, sys.stdin, sys.stdout))
        except KeyboardInterrupt:
            logger.info("Interrupted.")
            return 0
    logger.info("Exiting with final score %d.", score)
    return 0


if __name__ == "__main__":
    sys.exit(main())

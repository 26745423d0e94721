"""Terminal Snake: a real-time snake game played in the terminal."""

from terminal_snake.config import GameConfig
from terminal_snake.engine import (
    EndReason,
    GameEngine,
    GameStatus,
    Snapshot,
    StepOutcome,
)
from terminal_snake.grid import Grid, Point
from terminal_snake.keyboard import Command, InputSource, parse_key
from terminal_snake.loop import GameLoop, play
from terminal_snake.snake import Direction, Snake

__all__ = [
    "Command",
    "Direction",
    "EndReason",
    "GameConfig",
    "GameEngine",
    "GameLoop",
    "GameStatus",
    "Grid",
    "InputSource",
    "Point",
    "Snake",
    "Snapshot",
    "StepOutcome",
    "parse_key",
    "play",
]

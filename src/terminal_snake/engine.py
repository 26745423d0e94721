"""Step-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from terminal_snake.food import FoodSpawner
from terminal_snake.grid import Grid, Point
from terminal_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    RUNNING = "running"
    GAME_OVER = "game_over"


class EndReason(str, enum.Enum):
    """Why a game transitioned to ``GAME_OVER``."""

    WALL = "wall"
    SELF = "self"
    QUIT = "quit"
    BOARD_FULL = "board_full"


class StepOutcome(enum.Enum):
    """Result of a single :meth:`GameEngine.step` call."""

    MOVED = "moved"
    GREW = "grew"
    WALL = "wall"
    SELF = "self"
    IDLE = "idle"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers."""

    width: int
    height: int
    body: tuple[Point, ...]
    food: Point | None
    score: int
    tick: int
    game_over: bool
    end_reason: EndReason | None = None

    @property
    def head(self) -> Point:
        return self.body[0]


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the grid, snake, and food spawner; nothing else mutates
    them. Each call to :meth:`step` advances the game by one tick.
    """

    def __init__(
        self,
        width: int = 40,
        height: int = 20,
        initial_length: int = 3,
        seed: int | None = None,
    ) -> None:
        self.grid = Grid(width=width, height=height)
        self.rng = np.random.default_rng(seed)

        start = Point(width // 2, height // 2)
        self.snake = Snake(start, Direction.RIGHT, length=initial_length)
        if not all(self.grid.in_bounds(seg) for seg in self.snake.body):
            raise ValueError("initial_length does not fit the grid.")

        self.food_spawner = FoodSpawner(self.grid, rng=self.rng)
        self.food_spawner.spawn(self.snake)

        self.score = 0
        self.tick = 0
        self.status = GameStatus.RUNNING
        self.end_reason: EndReason | None = None

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def food(self) -> Point | None:
        return self.food_spawner.position

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def turn(self, direction: Direction) -> bool:
        """Apply a direction change now unless it reverses the snake."""
        if self.game_over:
            return False
        return self.snake.turn(direction)

    def quit(self) -> None:
        """End the game at the player's request, without stepping."""
        self._finish(EndReason.QUIT)

    def step(self) -> StepOutcome:
        """Advance the game by one tick."""
        if self.game_over:
            return StepOutcome.IDLE

        self.tick += 1
        new_head = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(new_head):
            self._finish(EndReason.WALL)
            return StepOutcome.WALL

        # --- self-collision check ---
        # The tail is still part of the body here even though it would move
        # away this tick; stepping into it counts as a collision.
        if self.snake.occupies(new_head):
            self._finish(EndReason.SELF)
            return StepOutcome.SELF

        # --- move ---
        if not self.food_spawner.is_at(new_head):
            self.snake.advance()
            return StepOutcome.MOVED

        self.snake.advance(grow=True)
        self.score += 1
        if self.food_spawner.spawn(self.snake) is None:
            self._finish(EndReason.BOARD_FULL)
        return StepOutcome.GREW

    def snapshot(self) -> Snapshot:
        """Return an immutable view of the current state."""
        return Snapshot(
            width=self.width,
            height=self.height,
            body=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            tick=self.tick,
            game_over=self.game_over,
            end_reason=self.end_reason,
        )

    def _finish(self, reason: EndReason) -> None:
        """Transition to game over exactly once."""
        if self.game_over:
            return
        self.status = GameStatus.GAME_OVER
        self.end_reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason.value, self.tick, self.score,
        )

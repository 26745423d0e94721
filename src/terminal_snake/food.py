"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from terminal_snake.grid import Grid, Point
    from terminal_snake.snake import Snake

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food item on a cell the snake does not occupy.

    Placement is rejection sampling over the whole board with a NumPy RNG,
    so a seeded generator gives reproducible positions. Expected draws grow
    as the snake fills the board; a completely full board is detected up
    front and yields no food.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: Point | None = None

    def spawn(self, snake: Snake) -> Point | None:
        """Move the food to a random free cell and return it.

        Returns ``None`` when the snake covers every cell.
        """
        if len(snake) >= self.grid.area:
            logger.warning("No free cells left for food spawning.")
            self.position = None
            return None

        while True:
            candidate = self.grid.random_point(self.rng)
            if not snake.occupies(candidate):
                self.position = candidate
                return candidate

    def is_at(self, point: Point) -> bool:
        """Check whether the food sits on *point*."""
        return self.position is not None and self.position == point

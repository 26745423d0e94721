"""Board geometry for the snake game."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """A board cell as (x, y); x grows rightwards, y grows downwards."""

    x: int
    y: int


class Grid:
    """Fixed-size board with bounds checking and uniform cell sampling.

    Coordinates use (x, y) ordering with the origin at the top-left corner.
    """

    def __init__(self, width: int = 40, height: int = 20) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height

    def in_bounds(self, point: Point) -> bool:
        """Check whether a point lies within the board."""
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def random_point(self, rng: np.random.Generator) -> Point:
        """Draw a uniformly random cell."""
        return Point(
            int(rng.integers(self.width)), int(rng.integers(self.height)),
        )

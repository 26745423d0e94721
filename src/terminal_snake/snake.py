"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from terminal_snake.grid import Point


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction that would cause a 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start: Point,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self.body: deque[Point] = deque(
            Point(start.x - dx * i, start.y - dy * i) for i in range(length)
        )
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Point:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Point:
        """Return the tail coordinate."""
        return self.body[-1]

    def turn(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        Returns True if the direction was accepted.
        """
        if new_direction is self.direction.opposite:
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> Point:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        return Point(self.head.x + dx, self.head.y + dy)

    def advance(self, grow: bool = False) -> Point | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        if grow:
            return None
        return self.body.pop()

    def occupies(self, point: Point) -> bool:
        """Check whether any segment, tail included, sits on *point*."""
        return point in self.body

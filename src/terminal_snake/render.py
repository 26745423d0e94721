"""Text rendering of game snapshots to a character stream."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

import numpy as np

if TYPE_CHECKING:
    from terminal_snake.engine import Snapshot

CLEAR_SCREEN = "\033[H\033[2J"

_END_MESSAGES: dict[str, str] = {
    "wall": "You hit the wall.",
    "self": "You ran into yourself.",
    "quit": "You quit.",
    "board_full": "You filled the board!",
}


@dataclass(frozen=True)
class Glyphs:
    """Characters used for each kind of cell."""

    empty: str = " "
    head: str = "■"
    body: str = "●"
    food: str = "♥"


class TextRenderer:
    """Draws a bordered board, score line, and control hint."""

    def __init__(self, stream: TextIO, glyphs: Glyphs | None = None) -> None:
        self.stream = stream
        self.glyphs = glyphs if glyphs is not None else Glyphs()

    def board_lines(self, snapshot: Snapshot) -> list[str]:
        """Return the bordered board as a list of lines."""
        g = self.glyphs
        board = np.full((snapshot.height, snapshot.width), g.empty, dtype="<U1")

        if snapshot.food is not None:
            board[snapshot.food.y, snapshot.food.x] = g.food

        # Body first so the head wins if the two ever overlap.
        for seg in snapshot.body[1:]:
            if 0 <= seg.x < snapshot.width and 0 <= seg.y < snapshot.height:
                board[seg.y, seg.x] = g.body
        head = snapshot.head
        if 0 <= head.x < snapshot.width and 0 <= head.y < snapshot.height:
            board[head.y, head.x] = g.head

        lines = ["┌" + "─" * snapshot.width + "┐"]
        lines.extend("│" + "".join(row) + "│" for row in board.tolist())
        lines.append("└" + "─" * snapshot.width + "┘")
        return lines

    def frame(self, snapshot: Snapshot) -> str:
        lines = self.board_lines(snapshot)
        lines.append(f"Score: {snapshot.score}")
        lines.append("Controls: W/A/S/D to move | Q to quit")
        return CLEAR_SCREEN + "\n".join(lines) + "\n"

    def render(self, snapshot: Snapshot) -> None:
        """Write one full frame."""
        self.stream.write(self.frame(snapshot))
        self.stream.flush()

    def render_summary(self, snapshot: Snapshot) -> None:
        """Write the game-over summary with the final score."""
        lines = ["", "Game Over!"]
        if snapshot.end_reason is not None:
            lines.append(_END_MESSAGES[snapshot.end_reason.value])
        lines.append(f"Final score: {snapshot.score}")
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()

"""Fixed-tick game loop merging keyboard events and timer ticks."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, TextIO

from terminal_snake.config import GameConfig
from terminal_snake.engine import GameEngine, Snapshot
from terminal_snake.keyboard import Command, InputSource, parse_key
from terminal_snake.render import TextRenderer
from terminal_snake.snake import Direction

logger = logging.getLogger(__name__)


class EventSource(Protocol):
    async def get(self) -> str: ...


class Renderer(Protocol):
    def render(self, snapshot: Snapshot) -> None: ...

    def render_summary(self, snapshot: Snapshot) -> None: ...


class GameLoop:
    """Drives a :class:`GameEngine` from a single asyncio task.

    Each iteration waits for whichever comes first: a character from the
    event source or the tick timer. Characters are applied as soon as they
    arrive; each timer firing performs exactly one engine step. When both
    are ready together the character is applied before the step.
    """

    def __init__(
        self,
        engine: GameEngine,
        events: EventSource,
        renderer: Renderer,
        tick_interval: float = 0.15,
        summary_delay: float = 3.0,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        self.engine = engine
        self.events = events
        self.renderer = renderer
        self.tick_interval = tick_interval
        self.summary_delay = summary_delay

    async def run(self) -> int:
        """Play until the game ends and return the final score."""
        key_task: asyncio.Task[str] | None = None
        tick_task: asyncio.Task[None] | None = None
        try:
            while not self.engine.game_over:
                if key_task is None:
                    key_task = asyncio.create_task(self.events.get())
                if tick_task is None:
                    tick_task = asyncio.create_task(
                        asyncio.sleep(self.tick_interval),
                    )

                done, _ = await asyncio.wait(
                    {key_task, tick_task},
                    return_when=asyncio.FIRST_COMPLETED,
                )

                if key_task in done:
                    char = key_task.result()
                    key_task = None
                    self._handle_key(char)
                    if self.engine.game_over:
                        break

                if tick_task in done:
                    # Restart the timer before stepping; late ticks are not
                    # made up.
                    tick_task = None
                    self.engine.step()
                    if not self.engine.game_over:
                        self.renderer.render(self.engine.snapshot())
        finally:
            for task in (key_task, tick_task):
                if task is not None and not task.done():
                    task.cancel()

        final = self.engine.snapshot()
        self.renderer.render_summary(final)
        if self.summary_delay > 0:
            await asyncio.sleep(self.summary_delay)
        return final.score

    def _handle_key(self, char: str) -> None:
        action = parse_key(char)
        if action is Command.QUIT:
            self.engine.quit()
        elif isinstance(action, Direction):
            self.engine.turn(action)


async def play(
    config: GameConfig,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """Wire engine, keyboard, and renderer together and run one game."""
    engine = GameEngine(
        width=config.width,
        height=config.height,
        initial_length=config.initial_length,
        seed=config.seed,
    )
    keyboard = InputSource(stdin, maxsize=config.input_buffer)
    keyboard.start()
    renderer = TextRenderer(stdout)
    renderer.render(engine.snapshot())

    loop = GameLoop(
        engine,
        keyboard,
        renderer,
        tick_interval=config.tick_interval,
        summary_delay=config.summary_delay,
    )
    score = await loop.run()
    logger.info("Session finished with score %d.", score)
    return score

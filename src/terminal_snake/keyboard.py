"""Keyboard input: a background reader feeding a bounded asyncio queue."""

from __future__ import annotations

import asyncio
import concurrent.futures
import enum
import logging
import threading
from typing import TextIO

from terminal_snake.snake import Direction

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Non-movement player commands."""

    QUIT = "quit"


KEY_BINDINGS: dict[str, Direction | Command] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "q": Command.QUIT,
}


def parse_key(char: str) -> Direction | Command | None:
    """Map a single character to a move or command, case-insensitively."""
    return KEY_BINDINGS.get(char.lower())


class InputSource:
    """Reads characters from *stream* on a daemon thread.

    Characters are pushed into a bounded :class:`asyncio.Queue` owned by the
    event loop that called :meth:`start`. A full queue blocks the reader until
    the loop drains it. On EOF or a read error the reader stops quietly and
    consumers simply stop receiving characters.
    """

    def __init__(self, stream: TextIO, maxsize: int = 10) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be at least 1.")
        self.stream = stream
        self.maxsize = maxsize
        self.queue: asyncio.Queue[str] | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the reader thread; must be called from a running loop."""
        if self._thread is not None:
            raise RuntimeError("InputSource already started.")
        loop = asyncio.get_running_loop()
        self.queue = asyncio.Queue(maxsize=self.maxsize)
        # Daemon: a reader blocked in read() is abandoned at process exit.
        self._thread = threading.Thread(
            target=self._pump, args=(loop, self.queue),
            name="input-source", daemon=True,
        )
        self._thread.start()

    async def get(self) -> str:
        """Wait for the next character."""
        if self.queue is None:
            raise RuntimeError("InputSource not started.")
        return await self.queue.get()

    def _pump(
        self,
        loop: asyncio.AbstractEventLoop,
        queue: asyncio.Queue[str],
    ) -> None:
        while True:
            try:
                char = self.stream.read(1)
            except (OSError, ValueError) as exc:
                logger.debug("Input stream failed, stopping reader: %s", exc)
                return
            if not char:
                logger.debug("Input stream closed, stopping reader.")
                return
            put = queue.put(char)
            try:
                asyncio.run_coroutine_threadsafe(put, loop).result()
            except (RuntimeError, concurrent.futures.CancelledError):
                put.close()
                logger.debug("Event loop gone, stopping reader.")
                return

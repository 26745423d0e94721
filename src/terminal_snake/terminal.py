"""Raw terminal mode and cursor visibility as a scoped resource."""

from __future__ import annotations

import logging
import termios
import tty
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

logger = logging.getLogger(__name__)

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"


@contextmanager
def raw_terminal(stdin: TextIO, stdout: TextIO) -> Iterator[None]:
    """Deliver keystrokes unbuffered and unechoed, with the cursor hidden.

    Cbreak mode is only applied when *stdin* is a TTY. The saved terminal
    attributes and cursor visibility are restored on every exit path.
    """
    fd: int | None = None
    saved: list | None = None
    if stdin.isatty():
        fd = stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
    else:
        logger.debug("stdin is not a TTY; leaving terminal mode unchanged.")

    stdout.write(HIDE_CURSOR)
    stdout.flush()
    try:
        yield
    finally:
        if fd is not None and saved is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        stdout.write(SHOW_CURSOR)
        stdout.flush()

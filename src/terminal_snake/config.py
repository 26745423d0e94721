"""Run configuration for a terminal snake game."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TERMINAL_SNAKE_CONFIG"


@dataclass(frozen=True)
class GameConfig:
    """Constants fixed for the lifetime of a single run.

    Supports JSON serialization so a run can be reproduced with a seed.
    """

    # Board
    width: int = 40
    height: int = 20
    initial_length: int = 3

    # Timing
    tick_interval_ms: int = 150
    summary_delay: float = 3.0

    # Input
    input_buffer: int = 10

    # Food placement
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError("width and height must each be at least 4.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        # The snake starts at the center and extends to the left.
        if self.initial_length > self.width // 2 + 1:
            raise ValueError(
                "initial_length does not fit the configured board; "
                "increase width or reduce initial_length."
            )
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if self.summary_delay < 0:
            raise ValueError("summary_delay must be >= 0.")
        if self.input_buffer < 1:
            raise ValueError("input_buffer must be at least 1.")

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GameConfig:
        """Load from the file named by ``TERMINAL_SNAKE_CONFIG``, if set."""
        env = os.environ if environ is None else environ
        path = env.get(CONFIG_ENV_VAR)
        if not path:
            return cls()
        logger.info("Loading config from %s", path)
        return cls.load(path)

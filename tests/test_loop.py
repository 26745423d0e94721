"""Tests for the game loop."""

import asyncio
import io

import pytest

from terminal_snake.config import GameConfig
from terminal_snake.engine import EndReason, GameEngine
from terminal_snake.grid import Point
from terminal_snake.loop import GameLoop, play

TICK = 0.005


class FakeEvents:
    """Event source backed by a plain asyncio queue."""

    def __init__(self, chars: str = "") -> None:
        self.queue: asyncio.Queue[str] = asyncio.Queue()
        for char in chars:
            self.queue.put_nowait(char)

    async def get(self) -> str:
        return await self.queue.get()


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames = []
        self.summaries = []

    def render(self, snapshot):
        self.frames.append(snapshot)

    def render_summary(self, snapshot):
        self.summaries.append(snapshot)


def _engine() -> GameEngine:
    # Head at (5, 5) moving right; food parked out of the way.
    engine = GameEngine(width=10, height=10, seed=0)
    engine.food_spawner.position = Point(0, 0)
    return engine


def _loop(engine, events, renderer) -> GameLoop:
    return GameLoop(
        engine, events, renderer, tick_interval=TICK, summary_delay=0,
    )


class TestGameLoopInit:
    def test_rejects_non_positive_tick(self):
        with pytest.raises(ValueError, match="positive"):
            GameLoop(_engine(), None, RecordingRenderer(), tick_interval=0)


class TestGameLoopQuit:
    @pytest.mark.asyncio
    async def test_quit_before_first_tick(self):
        engine = _engine()
        renderer = RecordingRenderer()
        score = await _loop(engine, FakeEvents("q"), renderer).run()
        assert score == 0
        assert engine.end_reason is EndReason.QUIT
        assert engine.tick == 0
        assert renderer.frames == []
        assert len(renderer.summaries) == 1
        assert renderer.summaries[0].game_over

    @pytest.mark.asyncio
    async def test_uppercase_quit(self):
        engine = _engine()
        await _loop(engine, FakeEvents("Q"), RecordingRenderer()).run()
        assert engine.end_reason is EndReason.QUIT

    @pytest.mark.asyncio
    async def test_quit_with_tick_ready_skips_step(self):
        engine = _engine()
        renderer = RecordingRenderer()
        loop = GameLoop(
            engine, FakeEvents("q"), renderer,
            tick_interval=1e-9, summary_delay=0,
        )
        await loop.run()
        assert engine.end_reason is EndReason.QUIT
        assert engine.tick == 0
        assert renderer.frames == []


class TestGameLoopTicks:
    @pytest.mark.asyncio
    async def test_runs_on_ticks_alone_until_wall(self):
        engine = _engine()
        renderer = RecordingRenderer()
        await _loop(engine, FakeEvents(), renderer).run()
        assert engine.end_reason is EndReason.WALL
        # Four moves (x = 6..9) then the colliding step.
        assert engine.tick == 5
        assert len(renderer.frames) == 4
        assert [f.head for f in renderer.frames] == [
            (6, 5), (7, 5), (8, 5), (9, 5),
        ]
        assert len(renderer.summaries) == 1

    @pytest.mark.asyncio
    async def test_one_step_per_tick(self):
        engine = _engine()
        renderer = RecordingRenderer()
        await _loop(engine, FakeEvents(), renderer).run()
        ticks = [f.tick for f in renderer.frames]
        assert ticks == list(range(1, len(ticks) + 1))

    @pytest.mark.asyncio
    async def test_turn_applied_before_step(self):
        engine = _engine()
        renderer = RecordingRenderer()
        await _loop(engine, FakeEvents("w"), renderer).run()
        assert renderer.frames[0].head == Point(5, 4)
        assert engine.end_reason is EndReason.WALL
        assert engine.snake.head == Point(5, 0)

    @pytest.mark.asyncio
    async def test_reversal_and_unknown_keys_ignored(self):
        engine = _engine()
        renderer = RecordingRenderer()
        await _loop(engine, FakeEvents("ax?"), renderer).run()
        assert renderer.frames[0].head == Point(6, 5)
        assert engine.snake.head == Point(9, 5)
        assert engine.end_reason is EndReason.WALL

    @pytest.mark.asyncio
    async def test_summary_delay(self):
        engine = _engine()
        loop = GameLoop(
            engine, FakeEvents("q"), RecordingRenderer(),
            tick_interval=TICK, summary_delay=0.05,
        )
        start = asyncio.get_running_loop().time()
        await loop.run()
        assert asyncio.get_running_loop().time() - start >= 0.04


class TestPlay:
    @pytest.mark.asyncio
    async def test_play_until_quit(self):
        config = GameConfig(
            width=10, height=10, tick_interval_ms=5, summary_delay=0, seed=1,
        )
        stdout = io.StringIO()
        score = await play(config, io.StringIO("q"), stdout)
        assert score == 0
        output = stdout.getvalue()
        assert "┌" + "─" * 10 + "┐" in output
        assert "Game Over!" in output
        assert "Final score: 0" in output

    @pytest.mark.asyncio
    async def test_play_survives_closed_input(self):
        config = GameConfig(
            width=10, height=10, tick_interval_ms=5, summary_delay=0, seed=1,
        )
        stdout = io.StringIO()
        # Moving right with no input always ends at the wall.
        await play(config, io.StringIO(""), stdout)
        assert "You hit the wall." in stdout.getvalue()

"""Tests for the CLI launcher."""

from contextlib import nullcontext
from unittest.mock import AsyncMock, patch

import pytest

from terminal_snake.cli import _build_parser, main


class TestCLIParser:
    def test_no_arguments(self):
        args = _build_parser().parse_args([])
        assert vars(args) == {}

    def test_help_exits_zero(self):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0


class TestCLIMain:
    def test_runs_game_and_exits_zero(self):
        with patch(
            "terminal_snake.cli.play", new=AsyncMock(return_value=7),
        ) as play, patch(
            "terminal_snake.cli.raw_terminal", return_value=nullcontext(),
        ) as raw:
            assert main([]) == 0
        play.assert_awaited_once()
        raw.assert_called_once()

    def test_keyboard_interrupt_exits_zero(self):
        with patch(
            "terminal_snake.cli.play",
            new=AsyncMock(side_effect=KeyboardInterrupt),
        ), patch(
            "terminal_snake.cli.raw_terminal", return_value=nullcontext(),
        ):
            assert main([]) == 0

"""
Tests for GameConfig.
"""

import pytest

from snek.config import GameConfig
from snek.domain.board import Board


class TestGameConfigDefaults:
    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height, config.size) == (250, 250, 10)
        assert config.tick_interval_ms == 200
        assert config.snake_length == 1
        assert config.start == (200, 200)
        assert config.board() == Board(250, 250, 10)

    def test_small_board_starts_in_the_middle(self):
        """A start cell off the board falls back to the centre cell."""
        config = GameConfig(width=100, height=60)
        assert config.start == (50, 30)

    def test_invalid_geometry(self):
        with pytest.raises(ValueError):
            GameConfig(width=255)

    def test_invalid_speed(self):
        with pytest.raises(ValueError):
            GameConfig(tick_interval_ms=0)

    def test_invalid_length(self):
        with pytest.raises(ValueError):
            GameConfig(snake_length=0)

    def test_length_must_fit_in_a_row(self):
        """The initial body is a straight line, so it cannot outgrow a row."""
        assert GameConfig(snake_length=25).snake_length == 25
        with pytest.raises(ValueError, match="does not fit"):
            GameConfig(snake_length=26)

    def test_tiny_board_is_rejected(self):
        """Boards under five cells a side leave no room to respawn food."""
        with pytest.raises(ValueError, match="at least 5 cells"):
            GameConfig(width=20, height=10)
        assert GameConfig(width=50, height=50).board().cell_count == 25

    def test_with_overrides_ignores_none(self):
        config = GameConfig().with_overrides(width=None, tick_interval_ms=100)
        assert config.width == 250
        assert config.tick_interval_ms == 100


class TestGameConfigFromEnv:
    def test_reads_overrides(self):
        config = GameConfig.from_env({
            "SNEK_BOARD_WIDTH": "300",
            "SNEK_BOARD_HEIGHT": "200",
            "SNEK_CELL_SIZE": "20",
            "SNEK_TICK_MS": "150",
            "SNEK_SNAKE_LENGTH": "3",
            "SNEK_LOG_LEVEL": "debug",
        })

        assert (config.width, config.height, config.size) == (300, 200, 20)
        assert config.tick_interval_ms == 150
        assert config.snake_length == 3
        assert config.log_level == "DEBUG"

    def test_empty_environment_gives_defaults(self):
        assert GameConfig.from_env({}) == GameConfig()

    def test_blank_values_fall_back(self):
        config = GameConfig.from_env({"SNEK_TICK_MS": "  "})
        assert config.tick_interval_ms == 200

    def test_bad_integer_names_the_variable(self):
        with pytest.raises(ValueError, match="SNEK_TICK_MS"):
            GameConfig.from_env({"SNEK_TICK_MS": "fast"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SNEK_TICK_MS", "120")
        assert GameConfig.from_env().tick_interval_ms == 120

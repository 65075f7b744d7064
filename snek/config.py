"""
Game configuration.

Defaults live in snek.domain.constants; any of them can be overridden
through environment variables (a local .env file is loaded first):

    SNEK_BOARD_WIDTH, SNEK_BOARD_HEIGHT, SNEK_CELL_SIZE,
    SNEK_TICK_MS, SNEK_SNAKE_LENGTH, SNEK_LOG_LEVEL
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from dotenv import load_dotenv

from snek.domain.board import Board, Cell
from snek.domain.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    CELL_SIZE,
    INITIAL_SNAKE_LENGTH,
    INITIAL_TICK_MS,
    MIN_BOARD_CELLS_PER_SIDE,
    START_CELL,
    START_DIRECTION,
)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class GameConfig:
    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    size: int = CELL_SIZE
    tick_interval_ms: int = INITIAL_TICK_MS
    snake_length: int = INITIAL_SNAKE_LENGTH
    start: Cell = START_CELL
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.tick_interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {self.tick_interval_ms}ms.")
        if self.snake_length < 1:
            raise ValueError(f"Snake length must be at least 1, got {self.snake_length}.")
        board = self.board()
        cols, rows = self.width // self.size, self.height // self.size
        if min(cols, rows) < MIN_BOARD_CELLS_PER_SIDE:
            raise ValueError(
                f"Board must be at least {MIN_BOARD_CELLS_PER_SIDE} cells on each side, "
                f"got {cols}x{rows}."
            )
        # The initial body is laid out in a straight line behind the head
        room = cols if START_DIRECTION[0] else rows
        if self.snake_length > room:
            raise ValueError(
                f"Snake length {self.snake_length} does not fit in a line of {room} cells."
            )
        if not board.contains(self.start):
            # Smaller boards start the snake in the middle instead
            middle = (
                (self.width // self.size // 2) * self.size,
                (self.height // self.size // 2) * self.size,
            )
            object.__setattr__(self, "start", middle)

    def board(self) -> Board:
        return Board(self.width, self.height, self.size)

    def with_overrides(self, **overrides) -> "GameConfig":
        """Copy with the given fields replaced; None values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            width=_int_setting(environ, "SNEK_BOARD_WIDTH", BOARD_WIDTH),
            height=_int_setting(environ, "SNEK_BOARD_HEIGHT", BOARD_HEIGHT),
            size=_int_setting(environ, "SNEK_CELL_SIZE", CELL_SIZE),
            tick_interval_ms=_int_setting(environ, "SNEK_TICK_MS", INITIAL_TICK_MS),
            snake_length=_int_setting(environ, "SNEK_SNAKE_LENGTH", INITIAL_SNAKE_LENGTH),
            log_level=environ.get("SNEK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

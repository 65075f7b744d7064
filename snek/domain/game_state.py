"""
GameState entity - a snapshot of the game at a point in time.
"""

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Cell


class GameStatus(enum.Enum):
    """Lifecycle of a game loop."""

    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        status: where the game loop is in its lifecycle
        ticks: number of ticks processed since start()
        tick_interval_ms: current tick interval
        last_observed_length: snake length at the last speed adjustment
        body: snake cells from tail to head
        direction: current (dx, dy) of the snake
        food: food position, if any
        food_lifespan: remaining lifespan of the food
        width, height, size: board geometry
    """

    status: GameStatus
    ticks: int
    tick_interval_ms: int
    last_observed_length: int
    body: Tuple[Cell, ...]
    direction: Tuple[int, int]
    food: Optional[Cell]
    food_lifespan: int
    width: int
    height: int
    size: int

    @property
    def head(self) -> Optional[Cell]:
        return self.body[-1] if self.body else None

    @property
    def length(self) -> int:
        return len(self.body)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is at the top, matching screen coordinates.
        """
        cols = self.width // self.size
        rows = self.height // self.size
        board = [['.' for _ in range(cols)] for _ in range(rows)]

        if self.food is not None:
            fx, fy = self.food
            board[fy // self.size][fx // self.size] = 'F'

        for x, y in self.body:
            board[y // self.size][x // self.size] = 'S'
        if self.body:
            hx, hy = self.head
            board[hy // self.size][hx // self.size] = 'H'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState status={self.status.value}, ticks={self.ticks}, "
            f"length={self.length}, interval={self.tick_interval_ms}ms, food={self.food}>"
        )

"""
Snake entity for the game engine.

The next head is wrapped onto the board before it is checked and placed,
so the head never sits past an edge, not even for a single tick.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Tuple

from .board import Board, Cell
from .constants import (
    INITIAL_SNAKE_LENGTH,
    SNAKE,
    START_CELL,
    START_DIRECTION,
    VALID_DIRECTIONS,
)
from .food import Food

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepResult:
    """Outcome of one snake step: Alive(grew) or Dead."""

    alive: bool
    grew: bool = False

    @classmethod
    def moved(cls, grew: bool) -> "StepResult":
        return cls(alive=True, grew=grew)

    @classmethod
    def dead(cls) -> "StepResult":
        return cls(alive=False, grew=False)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of (x, y) from the tail at index 0 to the head at the end
        direction: current (dx, dy) unit vector
    """

    def __init__(
        self,
        board: Board,
        food: Food,
        surface,
        start: Cell = START_CELL,
        length: int = INITIAL_SNAKE_LENGTH,
        direction: Tuple[int, int] = START_DIRECTION,
    ):
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Invalid direction {direction}.")
        if length > board.cell_count:
            raise ValueError(f"Snake of length {length} does not fit on {board!r}.")

        self._board = board
        self._food = food
        self._surface = surface
        self._direction = direction

        # Lay the initial body out behind the head, opposite to the heading
        dx, dy = direction
        hx, hy = start
        self._body = deque(
            board.wrap((hx - dx * board.size * i, hy - dy * board.size * i))
            for i in range(length - 1, -1, -1)
        )
        if len(set(self._body)) != length:
            raise ValueError(f"Snake of length {length} overlaps itself on {board!r}.")

    @property
    def head(self) -> Cell:
        """Return the head position (last element)."""
        return self._body[-1]

    @property
    def tail(self) -> Cell:
        """Return the tail position (first element)."""
        return self._body[0]

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self._body)

    @property
    def length(self) -> int:
        return len(self._body)

    @property
    def direction(self) -> Tuple[int, int]:
        return self._direction

    def occupies(self, cell: Cell) -> bool:
        return cell in self._body

    def next_head(self) -> Cell:
        """Where the head lands on the next step, after edge wrapping."""
        hx, hy = self.head
        dx, dy = self._direction
        size = self._board.size
        return self._board.wrap((hx + dx * size, hy + dy * size))

    def step(self) -> StepResult:
        """
        Advance the snake one cell.

          1) Compute the wrapped next head
          2) Running into the body is fatal; nothing is changed
          3) Otherwise push the new head
          4) Missed the food: drop the tail and age the food
          5) Hit the food: keep the tail (grow) and respawn the food
          6) Redraw the whole body
        """
        move = self.next_head()
        if move in self._body:
            return StepResult.dead()

        self._body.append(move)

        if move != self._food.position:
            prev = self._body.popleft()
            self._surface.clear_cell(prev[0], prev[1])
            if self._food.tick_expired():
                self._food.clear()
                self._food.spawn(self._body)
            grew = False
        else:
            self._food.spawn(self._body)
            grew = True

        for x, y in self._body:
            self._surface.draw_cell(x, y, SNAKE)
        return StepResult.moved(grew)

    def set_direction(self, requested: Tuple[int, int]) -> bool:
        """
        Turn the snake. Reversing straight into the neck is refused.

        Returns True if the direction was accepted.
        """
        if not isinstance(requested, tuple) or requested not in VALID_DIRECTIONS:
            logger.debug("Ignoring unknown direction %r", requested)
            return False
        dx, dy = self._direction
        if requested == (-dx, -dy):
            logger.debug("Refusing to reverse from %s to %s", self._direction, requested)
            return False
        self._direction = requested
        return True

    def __repr__(self):
        return f"<Snake head={self.head} length={self.length} direction={self._direction}>"

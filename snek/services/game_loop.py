"""
Game loop - the single owner of the snake and the food.

Two event sources feed the loop: the repeating tick job and a stream of
raw key identifiers. Both are dispatched from the same thread, one event
at a time, so a step and a direction change never interleave.

States:
    IDLE -> RUNNING -> RUNNING (faster) ... -> GAME_OVER
GAME_OVER is terminal until start() is called again.
"""

import logging
import math
import random
import time
from typing import Callable, Iterable, Optional

from snek.config import GameConfig
from snek.domain.constants import SPEEDUP_FRACTION, START_DIRECTION
from snek.domain.food import Food
from snek.domain.game_state import GameState, GameStatus
from snek.domain.snake import Snake, StepResult
from snek.players.base import direction_for_key
from snek.services.scheduler import CommandThrottle, TickScheduler
from snek.services.surface import RecordingSurface

logger = logging.getLogger(__name__)

LOOP_SLEEP_SECONDS = 0.005

KeySource = Callable[[], Iterable[str]]


class GameLoop:
    """
    Drives one game at a time.

    Args:
        config: board geometry, starting speed and snake length
        surface: drawing surface handed to the snake and food
        rng: random source for food placement and expiry
        ticks: tick source; a fresh TickScheduler by default
        clock: monotonic clock in seconds, used to throttle key commands
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        surface=None,
        rng: Optional[random.Random] = None,
        ticks: Optional[TickScheduler] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or GameConfig()
        self.board = self.config.board()
        self.surface = surface if surface is not None else RecordingSurface(self.config.size)
        self.rng = rng or random.Random()
        self._ticks = ticks or TickScheduler()
        self._throttle = CommandThrottle(clock)

        self.status = GameStatus.IDLE
        self.message: Optional[str] = None
        self.snake: Optional[Snake] = None
        self.food: Optional[Food] = None
        self.tick_interval_ms = self.config.tick_interval_ms
        self.last_observed_length = self.config.snake_length
        self.tick_count = 0

    @property
    def length(self) -> int:
        return self.snake.length if self.snake else 0

    @property
    def scheduler(self) -> TickScheduler:
        return self._ticks

    def start(self) -> None:
        """Reset the board, snake, food and speed, and begin ticking."""
        self._ticks.cancel()
        self._throttle.reset()
        self.message = None
        self.tick_count = 0

        self.surface.clear_region(0, 0, self.board.width, self.board.height)
        self.food = Food(self.board, self.surface, self.rng)
        self.snake = Snake(
            self.board,
            self.food,
            self.surface,
            start=self.config.start,
            length=self.config.snake_length,
        )
        self.food.spawn(self.snake.body)

        self.tick_interval_ms = self.config.tick_interval_ms
        self.last_observed_length = self.snake.length
        self.status = GameStatus.RUNNING
        self._ticks.start(self.tick_interval_ms, self.tick)

        logger.info(
            "Game started: board %sx%s, cell %s, speed %sms, length %s",
            self.board.width,
            self.board.height,
            self.board.size,
            self.tick_interval_ms,
            self.snake.length,
        )

    def tick(self) -> Optional[StepResult]:
        """
        Process one tick:
          1) If the game is not running, do nothing
          2) Step the snake
          3) Dead: game over, stop ticking
          4) Grew: speed up and restart the tick job at the new interval
        """
        if self.status is not GameStatus.RUNNING:
            return None

        result = self.snake.step()
        self.tick_count += 1

        if not result.alive:
            self.status = GameStatus.GAME_OVER
            self._ticks.cancel()
            self.message = f"Your snek ded, length {self.snake.length}"
            logger.info("%s (after %s ticks)", self.message, self.tick_count)
        elif result.grew and self.snake.length != self.last_observed_length:
            self._speed_up()

        return result

    def _speed_up(self) -> None:
        previous = self.tick_interval_ms
        self.tick_interval_ms -= math.floor(self.tick_interval_ms * SPEEDUP_FRACTION)
        self.last_observed_length = self.snake.length
        self._ticks.reschedule(self.tick_interval_ms)
        logger.info(
            "Length %s: speed %sms -> %sms",
            self.snake.length,
            previous,
            self.tick_interval_ms,
        )

    def handle_key(self, key: Optional[str]) -> bool:
        """
        Forward a raw key event to the snake.

        At most one key event is let through per tick interval; anything
        arriving inside the window is dropped, bound or not. Returns True if
        the snake changed direction.
        """
        if self.status is not GameStatus.RUNNING or key is None:
            return False
        if not self._throttle.allow(self.tick_interval_ms):
            logger.debug("Throttled key %r", key)
            return False
        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.snake.set_direction(direction)

    def stop(self) -> None:
        """Stop ticking. A running game ends without a death message."""
        self._ticks.cancel()
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.GAME_OVER
            logger.info("Game stopped at length %s", self.length)

    def run(self, key_source: Optional[KeySource] = None, max_ticks: Optional[int] = None) -> GameState:
        """
        Play the current game in real time until it is over.

        `key_source` is polled between ticks and returns the keys pressed
        since the last poll. Starts a game first if none is running.
        """
        if self.status is not GameStatus.RUNNING:
            self.start()
        try:
            while self.status is GameStatus.RUNNING:
                if max_ticks is not None and self.tick_count >= max_ticks:
                    self.stop()
                    break
                if key_source is not None:
                    for key in key_source():
                        self.handle_key(key)
                self._ticks.run_pending()
                time.sleep(LOOP_SLEEP_SECONDS)
        finally:
            self._ticks.cancel()
        return self.snapshot()

    def snapshot(self) -> GameState:
        snake = self.snake
        food = self.food
        return GameState(
            status=self.status,
            ticks=self.tick_count,
            tick_interval_ms=self.tick_interval_ms,
            last_observed_length=self.last_observed_length,
            body=snake.body if snake else (),
            direction=snake.direction if snake else START_DIRECTION,
            food=food.position if food else None,
            food_lifespan=food.lifespan if food else 0,
            width=self.board.width,
            height=self.board.height,
            size=self.board.size,
        )

"""
Food entity - the single item the snake hunts.
"""

import logging
import random
from typing import Collection, Optional

from .board import Board, Cell
from .constants import FOOD, FOOD_EXPIRY_CHANCE, FOOD_EXPIRY_THRESHOLD, FOOD_LIFESPAN

logger = logging.getLogger(__name__)


class Food:
    """
    A food item with a decaying lifespan.

    The food is created once per game and repositioned in place whenever it
    is eaten or expires. `surface` is any drawing surface (see
    snek.services.surface); it is told about every cell the food occupies
    or leaves.
    """

    def __init__(self, board: Board, surface, rng: Optional[random.Random] = None):
        self._board = board
        self._surface = surface
        self._rng = rng or random.Random()
        self._position: Optional[Cell] = None
        self.lifespan = FOOD_LIFESPAN

    @property
    def position(self) -> Optional[Cell]:
        return self._position

    @property
    def x(self) -> Optional[int]:
        return self._position[0] if self._position else None

    @property
    def y(self) -> Optional[int]:
        return self._position[1] if self._position else None

    def spawn(self, occupied: Collection[Cell]) -> Cell:
        """
        Move the food to a random cell outside `occupied` and draw it.

        Uses rejection sampling, so this never returns if `occupied` covers
        the whole board.
        """
        self.lifespan = FOOD_LIFESPAN
        occupied = set(occupied)
        while True:
            cell = self._board.random_cell(self._rng)
            if cell not in occupied:
                break
        self._position = cell
        self._surface.draw_cell(cell[0], cell[1], FOOD)
        logger.debug("Food spawned at %s", cell)
        return cell

    def clear(self) -> None:
        """Erase the food from the surface. The position is kept."""
        if self._position is None:
            return
        self._surface.clear_cell(self._position[0], self._position[1])

    def tick_expired(self) -> bool:
        """
        Age the food by one tick and report whether it should respawn.

        Once the lifespan has dropped below the threshold a fresh random
        draw is made every tick, so the chance of expiring compounds. The
        food always expires when the lifespan runs out.
        """
        before = self.lifespan
        self.lifespan -= 1
        if before < FOOD_EXPIRY_THRESHOLD and self._rng.random() < FOOD_EXPIRY_CHANCE:
            return True
        return self.lifespan == 0

    def __repr__(self):
        return f"<Food at={self._position} lifespan={self.lifespan}>"

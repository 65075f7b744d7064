"""
Base player interface for the game engine.

A player stands in for the keyboard: given the current game state it
returns the raw key identifier to press, or None to press nothing.
"""

from typing import Optional, Tuple

from snek.domain.constants import KEY_BINDINGS
from snek.domain.game_state import GameState

# One canonical key per direction, used by players that think in directions
KEY_FOR_DIRECTION = {
    (0, -1): "ArrowUp",
    (0, 1): "ArrowDown",
    (-1, 0): "ArrowLeft",
    (1, 0): "ArrowRight",
}


def direction_for_key(key: Optional[str]) -> Optional[Tuple[int, int]]:
    """Map a raw key identifier to a direction, or None if it is not bound."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a key for the snake given the
    current game state.
    """

    def get_key(self, game_state: GameState) -> Optional[str]:
        """
        Return the key to press given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A raw key identifier such as "w" or "ArrowLeft", or None
        """
        raise NotImplementedError

"""
Scripted player - replays a fixed list of keys.
"""

from typing import Iterable, Optional

from snek.domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Presses the given keys one per call, in order. None entries press
    nothing. Once the script runs out the player stays idle.
    """

    def __init__(self, keys: Iterable[Optional[str]]):
        self._keys = iter(list(keys))

    def get_key(self, game_state: GameState) -> Optional[str]:
        return next(self._keys, None)

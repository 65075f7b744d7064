"""
Player implementations for snek.

Players stand in for the keyboard: they produce the raw key identifiers
the game loop turns into direction changes.
"""

from .base import Player, direction_for_key, KEY_FOR_DIRECTION
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'direction_for_key',
    'KEY_FOR_DIRECTION',
    'RandomPlayer',
    'ScriptedPlayer',
]

"""
Domain entities for the snek game engine.

This module contains the core game entities that are independent of
infrastructure concerns (timers, drawing surfaces, key capture).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_DIRECTIONS, KEY_BINDINGS
from .board import Board, Cell
from .food import Food
from .snake import Snake, StepResult
from .game_state import GameState, GameStatus

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_DIRECTIONS', 'KEY_BINDINGS',
    'Board', 'Cell',
    'Food',
    'Snake', 'StepResult',
    'GameState', 'GameStatus',
]

"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snek.domain.board import Board
from snek.domain.constants import VALID_DIRECTIONS
from snek.domain.game_state import GameState
from .base import KEY_FOR_DIRECTION, Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction that avoids self-collisions.

    Edges wrap, so only the body is dangerous.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_key(self, game_state: GameState) -> Optional[str]:
        if not game_state.body:
            return None

        board = Board(game_state.width, game_state.height, game_state.size)
        head_x, head_y = game_state.head
        dx, dy = game_state.direction
        reverse = (-dx, -dy)
        # The tail is still in place when the step checks for collisions
        body = set(game_state.body)

        # Filter out moves that:
        # 1. Reverse into the neck (the snake refuses those anyway)
        # 2. Hit own body
        candidates = sorted(d for d in VALID_DIRECTIONS if d != reverse)
        safe: List[tuple] = []
        for direction in candidates:
            nx = head_x + direction[0] * game_state.size
            ny = head_y + direction[1] * game_state.size
            if board.wrap((nx, ny)) in body:
                continue
            safe.append(direction)

        # If no safe moves, just pick any (we'll die anyway)
        choice = self.rng.choice(safe or candidates)
        return KEY_FOR_DIRECTION[choice]

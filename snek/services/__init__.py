"""
Services around the snek domain: tick scheduling, the game loop and the
drawing surfaces it paints on.
"""

from .scheduler import TickScheduler, CommandThrottle, SimulatedClock
from .surface import DrawingSurface, RecordingSurface, ImageSurface
from .game_loop import GameLoop

__all__ = [
    'TickScheduler', 'CommandThrottle', 'SimulatedClock',
    'DrawingSurface', 'RecordingSurface', 'ImageSurface',
    'GameLoop',
]

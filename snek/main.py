#!/usr/bin/env python3
"""
Run a game of snek without a keyboard.

Usage:
    python -m snek.main
    python -m snek.main --keys s s a w --max-ticks 200
    python -m snek.main --seed 7 --gif ./snek.gif --print-board

Keys come from --keys when given, otherwise a random autopilot drives the
snake. Games run on a simulated clock (as fast as possible) unless
--realtime is passed.
"""

import argparse
import json
import logging
import random
from pathlib import Path
from typing import Any, Dict, Optional

from snek.config import GameConfig
from snek.domain.game_state import GameStatus
from snek.players import Player, RandomPlayer, ScriptedPlayer
from snek.services.game_loop import GameLoop
from snek.services.scheduler import SimulatedClock
from snek.services.surface import ImageSurface, RecordingSurface

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 1000


def summarize(loop: GameLoop) -> Dict[str, Any]:
    return {
        "status": loop.status.value,
        "length": loop.length,
        "ticks": loop.tick_count,
        "tick_interval_ms": loop.tick_interval_ms,
        "message": loop.message,
    }


def run_headless(
    loop: GameLoop,
    player: Player,
    max_ticks: int = DEFAULT_MAX_TICKS,
    clock: Optional[SimulatedClock] = None,
    capture_frames: bool = False,
) -> Dict[str, Any]:
    """
    Play one game on a simulated clock.

    Each round the player may press one key, the clock advances by the
    current tick interval and the loop ticks once. Captured frames last
    as long as the tick interval in force when they were taken. `clock` must be the
    clock the loop throttles keys with for the throttle to see time pass.

    Returns a summary dict (status, length, ticks, tick_interval_ms, message).
    """
    loop.start()
    surface = loop.surface
    if capture_frames and isinstance(surface, ImageSurface):
        surface.capture_frame(loop.tick_interval_ms)

    while loop.status is GameStatus.RUNNING and loop.tick_count < max_ticks:
        loop.handle_key(player.get_key(loop.snapshot()))
        if clock is not None:
            clock.advance(loop.tick_interval_ms)
        loop.tick()
        if capture_frames and isinstance(surface, ImageSurface):
            surface.capture_frame(loop.tick_interval_ms)

    if loop.status is GameStatus.RUNNING:
        loop.stop()
    return summarize(loop)


def run_realtime(loop: GameLoop, player: Player, max_ticks: int = DEFAULT_MAX_TICKS) -> Dict[str, Any]:
    """Play one game against the wall clock, one key poll per loop pass."""
    def poll():
        key = player.get_key(loop.snapshot())
        return [key] if key is not None else []

    loop.start()
    loop.run(poll, max_ticks=max_ticks)
    return summarize(loop)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a single-player game of snek.")
    parser.add_argument("--width", type=int, default=None, help="Board width in pixels (at least 5 cells)")
    parser.add_argument("--height", type=int, default=None, help="Board height in pixels (at least 5 cells)")
    parser.add_argument("--size", type=int, default=None, help="Cell size in pixels")
    parser.add_argument("--speed", type=int, default=None, help="Initial tick interval in ms")
    parser.add_argument("--length", type=int, default=None, help="Initial snake length")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Stop the game after this many ticks")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--keys", nargs="+", default=None,
                        help="Keys to press, one per tick (e.g. w a s d ArrowUp); "
                             "a random autopilot plays otherwise")
    parser.add_argument("--realtime", action="store_true",
                        help="Tick against the wall clock instead of a simulated one")
    parser.add_argument("--png", type=str, default=None, help="Save the final board as a PNG")
    parser.add_argument("--gif", type=str, default=None, help="Save the whole game as an animated GIF")
    parser.add_argument("--print-board", action="store_true", help="Print the final board as text")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = GameConfig.from_env().with_overrides(
            width=args.width,
            height=args.height,
            size=args.size,
            tick_interval_ms=args.speed,
            snake_length=args.length,
        )
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    rng = random.Random(args.seed)
    if args.png or args.gif:
        surface = ImageSurface(config.width, config.height, config.size)
    else:
        surface = RecordingSurface(config.size)

    if args.keys:
        player = ScriptedPlayer(args.keys)
    else:
        player = RandomPlayer(random.Random(rng.random()))

    if args.realtime:
        loop = GameLoop(config, surface, rng=rng)
        result = run_realtime(loop, player, max_ticks=args.max_ticks)
    else:
        clock = SimulatedClock()
        loop = GameLoop(config, surface, rng=rng, clock=clock)
        result = run_headless(loop, player, max_ticks=args.max_ticks, clock=clock,
                              capture_frames=bool(args.gif))

    if args.png:
        surface.save(Path(args.png))
    if args.gif:
        if not surface.frames:
            surface.capture_frame()
        surface.save_animation(Path(args.gif), frame_ms=config.tick_interval_ms)

    logger.info("Game finished after %s ticks at length %s", result["ticks"], result["length"])

    if args.print_board:
        print(loop.snapshot().print_board())

    if loop.message:
        print(loop.message)
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()

"""
Tick scheduling for the game loop.

The tick source is a single repeating job on a `schedule.Scheduler`.
Changing speed cancels that job and registers a new one at the new
interval. Key commands are throttled separately so that at most one is
accepted per tick interval.
"""

import logging
import time
from typing import Callable, Optional

import schedule

logger = logging.getLogger(__name__)


class TickScheduler:
    """A repeating tick source that can be restarted at a new interval."""

    def __init__(self, scheduler: Optional[schedule.Scheduler] = None):
        self._scheduler = scheduler or schedule.Scheduler()
        self._job: Optional[schedule.Job] = None
        self._callback: Optional[Callable[[], object]] = None
        self._interval_ms: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._job is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms

    @property
    def scheduler(self) -> schedule.Scheduler:
        return self._scheduler

    def start(self, interval_ms: int, callback: Callable[[], object]) -> None:
        """Begin calling `callback` every `interval_ms`, replacing any running job."""
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms}ms.")
        self.cancel()
        self._callback = callback
        self._interval_ms = interval_ms
        # Return values are dropped so a callback can never cancel the job by accident
        self._job = self._scheduler.every(interval_ms / 1000).seconds.do(self._fire)
        logger.debug("Tick job scheduled every %sms", interval_ms)

    def reschedule(self, interval_ms: int) -> None:
        """Cancel the current job and restart it at `interval_ms`."""
        if self._callback is None:
            raise RuntimeError("reschedule() called before start().")
        self.start(interval_ms, self._callback)

    def cancel(self) -> None:
        if self._job is None:
            return
        self._scheduler.cancel_job(self._job)
        self._job = None
        logger.debug("Tick job cancelled")

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def seconds_until_next_tick(self) -> Optional[float]:
        if self._job is None:
            return None
        return self._scheduler.idle_seconds

    def _fire(self) -> None:
        self._callback()


class CommandThrottle:
    """
    Leading-edge throttle: the first event opens a window, events inside
    the window are dropped.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._window_ends: Optional[float] = None

    def allow(self, window_ms: int) -> bool:
        now = self._clock()
        if self._window_ends is not None and now < self._window_ends:
            return False
        self._window_ends = now + window_ms / 1000
        return True

    def reset(self) -> None:
        self._window_ends = None


class SimulatedClock:
    """A manually advanced clock, in seconds, for headless runs and tests."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def __call__(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        self._now += ms / 1000

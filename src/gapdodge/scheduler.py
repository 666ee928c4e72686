"""
scheduler.py: Fixed-step recurring callbacks driven by the host frame clock.

The main loop measures how long each frame took and hands that to
`advance()`; every registered callback then runs once per whole interval
that has elapsed. Everything runs on the caller's thread.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict

logger = logging.getLogger(__name__)

# Tolerance for frame times that land a hair short of an interval
_EPSILON = 1e-9


@dataclass
class _Timer:
    interval: float          # seconds
    callback: Callable[[], None]
    elapsed: float = 0.0


class FixedStepScheduler:
    """Runs callbacks every N milliseconds of advanced time."""

    def __init__(self):
        self._timers: Dict[int, _Timer] = {}
        self._ids = itertools.count(1)

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def every(self, interval_ms: float, callback: Callable[[], None]) -> int:
        """Registers a recurring callback. Returns the handle to cancel it with."""
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        handle = next(self._ids)
        self._timers[handle] = _Timer(interval=interval_ms / 1000.0, callback=callback)
        logger.debug("Timer %d scheduled every %.2f ms", handle, interval_ms)
        return handle

    def cancel(self, handle: int):
        if self._timers.pop(handle, None) is None:
            logger.debug("Cancel ignored: timer %s is not active", handle)

    def is_active(self, handle: int) -> bool:
        return handle in self._timers

    def advance(self, elapsed: float) -> int:
        """
        Moves the clock forward by `elapsed` seconds and fires due callbacks.
        Returns the number of callbacks that ran.
        """
        fired = 0
        for handle in list(self._timers):
            timer = self._timers.get(handle)
            if timer is None:
                continue
            timer.elapsed += elapsed

            # A callback may cancel its own timer (or others) mid-loop
            while handle in self._timers and timer.elapsed + _EPSILON >= timer.interval:
                timer.elapsed -= timer.interval
                timer.callback()
                fired += 1
        return fired

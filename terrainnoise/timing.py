"""Wall-clock helpers: the current time, time since start-up, and a pausable timer.

Time points and durations are float seconds.
"""

from __future__ import annotations

import functools
import time


def now():
    """Current reading of the high-resolution clock, in seconds."""
    return time.perf_counter()


@functools.lru_cache(maxsize=None)
def _start_time():
    return now()


def elapsed_time():
    """Seconds since the first time the elapsed time was asked for."""
    start = _start_time()
    return now() - start


class Timer:
    """Measures accumulated wall-clock time across start/stop intervals."""

    def __init__(self, start_on_creation=True):
        self._started_at = 0.0
        self._elapsed = 0.0
        self._running = False
        if start_on_creation:
            self.start()

    @property
    def running(self):
        return self._running

    def start(self):
        """Start or resume the timer; raises RuntimeError if it is already running."""
        if self._running:
            raise RuntimeError("Timer already running")
        self._started_at = now()
        self._running = True

    def stop(self):
        """Pause the timer and return the total elapsed seconds."""
        if self._running:
            self._elapsed += now() - self._started_at
            self._running = False
        return self._elapsed

    def reset(self):
        """Clear the elapsed time and start again."""
        self._elapsed = 0.0
        self.start()
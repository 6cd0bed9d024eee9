"""Manually advanced implementation of Scheduler."""

import itertools
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ManualTimer:
    """Timer handle driven by a ManualScheduler."""

    def __init__(self, due: float, callback: Callable[[], None], interval: Optional[float], seq: int):
        self.due = due
        self.callback = callback
        self.interval = interval
        self.seq = seq
        self.cancelled = False

    @property
    def periodic(self) -> bool:
        return self.interval is not None

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    A virtual clock for deterministic tests and headless simulation.

    Time only moves when :meth:`advance` is called. Due callbacks fire in
    order of due time, then scheduling order, with ``now`` set to each
    callback's due time while it runs.
    """

    def __init__(self, start: float = 0.0):
        self.now = float(start)
        self._timers: list[ManualTimer] = []
        self._seq = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        return self._schedule(self.now + delay, callback, None)

    def call_every(self, interval: float, callback: Callable[[], None]) -> ManualTimer:
        if interval <= 0:
            raise ValueError("Interval must be positive")
        return self._schedule(self.now + interval, callback, interval)

    @property
    def pending(self) -> list[ManualTimer]:
        """Timers that have not fired (one-shot) or been cancelled."""
        return [t for t in self._timers if not t.cancelled]

    @property
    def periodic_timers(self) -> list[ManualTimer]:
        return [t for t in self.pending if t.periodic]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every callback that falls due."""
        if seconds < 0:
            raise ValueError("Cannot advance clock backwards")
        target = self.now + seconds

        while True:
            # Small tolerance so 0.35 + 0.65 lands exactly on 1.0
            due = [t for t in self.pending if t.due <= target + 1e-9]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due, t.seq))
            self.now = max(self.now, timer.due)
            if timer.periodic:
                timer.due += timer.interval
            else:
                timer.cancelled = True
            timer.callback()

        self.now = target
        self._timers = self.pending

    def _schedule(self, due: float, callback: Callable[[], None], interval: Optional[float]) -> ManualTimer:
        timer = ManualTimer(due, callback, interval, next(self._seq))
        self._timers.append(timer)
        return timer

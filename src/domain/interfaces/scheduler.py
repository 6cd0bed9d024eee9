"""Scheduler interface for deferred and periodic callbacks."""

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    """Handle for a scheduled callback."""

    def cancel(self) -> None:
        """Cancel the callback. Cancelling twice is a no-op."""
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Protocol for scheduling callbacks on the session's event loop.

    Implementations:
    - asyncio event loop (production)
    - manually advanced virtual clock (tests, headless simulation)
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once after ``delay`` seconds."""
        ...

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` every ``interval`` seconds until cancelled."""
        ...

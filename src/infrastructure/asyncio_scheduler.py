"""asyncio implementation of Scheduler."""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AsyncioScheduler:
    """
    Schedules session callbacks on an asyncio event loop.

    One-shot callbacks use ``loop.call_later``; periodic callbacks run in a
    task that sleeps between calls. Both return objects whose ``cancel()``
    is safe to call more than once.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)

    def call_every(self, interval: float, callback: Callable[[], None]) -> asyncio.Task:
        return self.loop.create_task(self._run_every(interval, callback))

    async def _run_every(self, interval: float, callback: Callable[[], None]) -> None:
        logger.debug(f"Periodic callback started every {interval}s")
        try:
            while True:
                await asyncio.sleep(interval)
                try:
                    callback()
                except Exception as e:
                    logger.error(f"Error in periodic callback: {e}", exc_info=True)
        except asyncio.CancelledError:
            logger.debug("Periodic callback cancelled")
            raise

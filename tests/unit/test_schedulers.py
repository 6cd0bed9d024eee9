"""Tests for the asyncio and manual Scheduler implementations."""

import asyncio

import pytest

from src.infrastructure.asyncio_scheduler import AsyncioScheduler
from src.infrastructure.manual_scheduler import ManualScheduler


class TestManualScheduler:
    """Tests for ManualScheduler."""

    def test_call_later_fires_once(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_later(0.5, lambda: calls.append(scheduler.now))

        scheduler.advance(0.4)
        assert calls == []

        scheduler.advance(1.0)
        assert calls == [0.5]
        assert scheduler.pending == []

    def test_call_every_repeats(self):
        scheduler = ManualScheduler()
        calls = []
        scheduler.call_every(1.0, lambda: calls.append(scheduler.now))

        scheduler.advance(3.5)

        assert calls == [1.0, 2.0, 3.0]
        assert scheduler.now == 3.5

    def test_cancel_stops_callbacks(self):
        scheduler = ManualScheduler()
        calls = []
        timer = scheduler.call_every(1.0, lambda: calls.append(1))

        scheduler.advance(1.0)
        timer.cancel()
        timer.cancel()
        scheduler.advance(5.0)

        assert calls == [1]
        assert scheduler.periodic_timers == []

    def test_callbacks_fire_in_due_order(self):
        scheduler = ManualScheduler()
        order = []
        scheduler.call_every(1.0, lambda: order.append("tick"))
        scheduler.call_later(0.35, lambda: order.append("feedback"))
        scheduler.call_later(1.0, lambda: order.append("later"))

        scheduler.advance(2.0)

        assert order == ["feedback", "tick", "later", "tick"]

    def test_callback_can_cancel_its_own_timer(self):
        scheduler = ManualScheduler()
        calls = []
        timer = None

        def callback():
            calls.append(1)
            timer.cancel()

        timer = scheduler.call_every(1.0, callback)
        scheduler.advance(5.0)

        assert calls == [1]

    def test_invalid_arguments(self):
        scheduler = ManualScheduler()

        with pytest.raises(ValueError):
            scheduler.call_every(0, lambda: None)
        with pytest.raises(ValueError):
            scheduler.advance(-1)


class TestAsyncioScheduler:
    """Tests for AsyncioScheduler."""

    @pytest.mark.asyncio
    async def test_call_later(self):
        scheduler = AsyncioScheduler()
        fired = asyncio.Event()

        scheduler.call_later(0.01, fired.set)

        await asyncio.wait_for(fired.wait(), timeout=1.0)

    @pytest.mark.asyncio
    async def test_call_later_cancel(self):
        scheduler = AsyncioScheduler()
        calls = []

        handle = scheduler.call_later(0.01, lambda: calls.append(1))
        handle.cancel()
        handle.cancel()
        await asyncio.sleep(0.05)

        assert calls == []

    @pytest.mark.asyncio
    async def test_call_every_repeats_until_cancelled(self):
        scheduler = AsyncioScheduler()
        calls = []

        handle = scheduler.call_every(0.01, lambda: calls.append(1))
        await asyncio.sleep(0.1)
        handle.cancel()
        await asyncio.sleep(0)
        count = len(calls)
        await asyncio.sleep(0.05)

        assert count >= 2
        assert len(calls) == count

    @pytest.mark.asyncio
    async def test_call_every_survives_callback_errors(self):
        scheduler = AsyncioScheduler()
        calls = []

        def callback():
            calls.append(1)
            raise RuntimeError("boom")

        handle = scheduler.call_every(0.01, callback)
        await asyncio.sleep(0.08)
        handle.cancel()

        assert len(calls) >= 2

    @pytest.mark.asyncio
    async def test_callback_can_cancel_its_own_task(self):
        scheduler = AsyncioScheduler()
        calls = []
        handle = None

        def callback():
            calls.append(1)
            handle.cancel()

        handle = scheduler.call_every(0.01, callback)
        await asyncio.sleep(0.08)

        assert calls == [1]
        assert handle.cancelled()

"""Tests for the turn countdown and its tick sources."""
import asyncio

import pytest
from skirmish.countdown import TurnCountdown, CountdownState, FrameTicker, AsyncTicker


@pytest.fixture
def expirations():
    return []


@pytest.fixture
def countdown(expirations):
    return TurnCountdown(on_expire=lambda: expirations.append(True))


class TestTicking:

    def test_tick_decrements(self, countdown):
        countdown.start(5)
        countdown.tick()
        assert countdown.state == CountdownState(remaining=4, running=True)

    def test_expires_once_on_reaching_zero(self, countdown, expirations):
        countdown.start(2)
        countdown.tick()
        assert expirations == []
        countdown.tick()
        assert expirations == [True]
        assert countdown.remaining == 0
        assert not countdown.running

        countdown.tick()
        countdown.tick()
        assert expirations == [True]

    def test_start_at_zero_expires_on_first_tick(self, countdown, expirations):
        countdown.start(0)
        assert expirations == []
        countdown.tick()
        assert expirations == [True]

    def test_negative_start_is_clamped(self, countdown):
        countdown.start(-3)
        assert countdown.remaining == 0

    def test_on_tick_reports_remaining(self):
        seen = []
        countdown = TurnCountdown(on_tick=seen.append)
        countdown.start(3)
        countdown.tick()
        countdown.tick()
        assert seen == [2, 1]


class TestResyncAndStop:

    def test_resync_applies_before_next_tick(self, countdown):
        countdown.start(10)
        countdown.tick()
        countdown.resync(20)
        countdown.tick()
        assert countdown.remaining == 19

    def test_resync_to_zero_expires_on_next_tick(self, countdown, expirations):
        countdown.start(10)
        countdown.resync(0)
        countdown.tick()
        assert expirations == [True]

    def test_resync_ignored_while_stopped(self, countdown):
        countdown.start(10)
        countdown.stop()
        countdown.resync(99)
        assert countdown.remaining == 10

    def test_stop_is_idempotent_and_releases_ticker(self, countdown, expirations):
        countdown.start(3)
        ticker = countdown.ticker
        countdown.stop()
        countdown.stop()
        assert countdown.ticker is None
        assert not ticker.active
        countdown.tick()
        assert countdown.remaining == 3
        assert expirations == []

    def test_restart_replaces_ticker(self, countdown):
        countdown.start(3)
        first = countdown.ticker
        countdown.start(8)
        assert not first.active
        assert countdown.ticker.active
        assert countdown.remaining == 8

    def test_context_manager_stops_on_error(self, countdown):
        with pytest.raises(RuntimeError):
            with countdown.running_from(5):
                assert countdown.running
                raise RuntimeError("popup crashed")
        assert not countdown.running
        assert countdown.ticker is None


class TestFrameTicker:

    def test_ticks_once_per_accumulated_interval(self):
        ticks = []
        ticker = FrameTicker(lambda: ticks.append(1), interval=1.0)
        ticker.start()
        ticker.advance(0.4)
        ticker.advance(0.4)
        assert ticks == []
        ticker.advance(0.4)
        assert ticks == [1]
        ticker.advance(2.0)
        assert len(ticks) == 3

    def test_inactive_ticker_ignores_time(self):
        ticks = []
        ticker = FrameTicker(lambda: ticks.append(1))
        ticker.advance(5.0)
        ticker.start()
        ticker.cancel()
        ticker.advance(5.0)
        assert ticks == []

    def test_large_frame_stops_at_expiry(self, countdown, expirations):
        countdown.start(2)
        countdown.advance(10.0)
        assert expirations == [True]
        assert countdown.remaining == 0


class TestAsyncTicker:

    def test_async_ticks_expire_countdown(self, expirations):
        async def run():
            countdown = TurnCountdown(
                on_expire=lambda: expirations.append(True),
                ticker_factory=lambda on_tick: AsyncTicker(on_tick, interval=0.01),
            )
            countdown.start(2)
            for _ in range(200):
                if not countdown.running:
                    break
                await asyncio.sleep(0.01)
            return countdown

        countdown = asyncio.run(run())
        assert expirations == [True]
        assert countdown.remaining == 0
        assert countdown.ticker is None

    def test_cancelled_async_ticker_never_fires(self):
        ticks = []

        async def run():
            ticker = AsyncTicker(lambda: ticks.append(1), interval=0.01)
            ticker.start()
            ticker.cancel()
            await asyncio.sleep(0.05)
            return ticker

        ticker = asyncio.run(run())
        assert ticks == []
        assert not ticker.active

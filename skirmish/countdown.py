"""Turn countdown for the attack popup.

The countdown mirrors the store's shared turn time: it starts from the
shared value, free-runs one unit per tick, and snaps back to the shared
value on every resync. Reaching zero expires it exactly once.

Ticks come from a Ticker owned by the countdown:
- FrameTicker: fed with frame dt from the pygame loop
- AsyncTicker: an asyncio task sleeping between ticks (network/headless)

Every exit path (stop, expiry, restart) cancels the ticker, so a stopped
countdown never holds a live tick source.
"""
import asyncio
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Callable, Iterator

from .constants import TICK_INTERVAL

logger = logging.getLogger(__name__)


TickCallback = Callable[[], None]


class Ticker:
    """Periodic tick source. Subclasses decide where time comes from."""

    def __init__(self, on_tick: TickCallback, interval: float = TICK_INTERVAL):
        self.on_tick = on_tick
        self.interval = interval
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def start(self):
        self._active = True

    def cancel(self):
        self._active = False

    def advance(self, dt: float):
        """Feed elapsed frame time. Ignored by tickers with their own clock."""


class FrameTicker(Ticker):
    """Ticks from accumulated frame time (pygame clock dt)."""

    def __init__(self, on_tick: TickCallback, interval: float = TICK_INTERVAL):
        super().__init__(on_tick, interval)
        self.elapsed = 0.0

    def start(self):
        self.elapsed = 0.0
        super().start()

    def cancel(self):
        super().cancel()
        self.elapsed = 0.0

    def advance(self, dt: float):
        if not self._active:
            return
        self.elapsed += dt
        # on_tick may cancel us (expiry), stop as soon as it does
        while self._active and self.elapsed >= self.interval:
            self.elapsed -= self.interval
            self.on_tick()


class AsyncTicker(Ticker):
    """Ticks from an asyncio task. start() needs a running event loop."""

    def __init__(self, on_tick: TickCallback, interval: float = TICK_INTERVAL):
        super().__init__(on_tick, interval)
        self._task: Optional[asyncio.Task] = None

    def start(self):
        self.cancel()
        super().start()
        self._task = asyncio.get_running_loop().create_task(self._tick_loop())

    def cancel(self):
        super().cancel()
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    async def _tick_loop(self):
        """Call on_tick every interval until cancelled."""
        while self._active:
            await asyncio.sleep(self.interval)
            if not self._active:
                break
            self.on_tick()


TickerFactory = Callable[[TickCallback], Ticker]


@dataclass(frozen=True)
class CountdownState:
    remaining: int
    running: bool


class TurnCountdown:
    """Cancellable, restartable countdown tied to the shared turn time.

    Args:
        on_expire: called once when the countdown reaches zero
        on_tick: called with the new remaining value after each decrement
        ticker_factory: builds the tick source; FrameTicker by default
    """

    def __init__(
        self,
        on_expire: Optional[Callable[[], None]] = None,
        on_tick: Optional[Callable[[int], None]] = None,
        ticker_factory: Optional[TickerFactory] = None,
    ):
        self.on_expire = on_expire
        self.on_tick = on_tick
        self.ticker_factory = ticker_factory or FrameTicker
        self.remaining = 0
        self.running = False
        self.expired = False
        self._ticker: Optional[Ticker] = None

    @property
    def state(self) -> CountdownState:
        return CountdownState(self.remaining, self.running)

    @property
    def ticker(self) -> Optional[Ticker]:
        return self._ticker

    def start(self, remaining: int):
        """Begin a fresh tick cycle from the shared value."""
        self.stop()
        self.remaining = max(0, int(remaining))
        self.running = True
        self.expired = False
        self._ticker = self.ticker_factory(self.tick)
        self._ticker.start()
        logger.debug(f"Countdown started at {self.remaining}s")

    def stop(self):
        """Cancel the tick source. Safe to call any number of times."""
        ticker, self._ticker = self._ticker, None
        if ticker is not None:
            ticker.cancel()
        self.running = False

    def resync(self, shared_remaining: int):
        """Mirror an external change of the shared turn time."""
        if not self.running:
            return
        self.remaining = max(0, int(shared_remaining))
        logger.debug(f"Countdown resynced to {self.remaining}s")

    def tick(self):
        """One elapsed unit of time."""
        if not self.running:
            return
        if self.remaining <= 0:
            self._expire()
            return

        self.remaining -= 1
        if self.on_tick:
            self.on_tick(self.remaining)
        if self.remaining == 0:
            self._expire()

    def advance(self, dt: float):
        """Feed frame time to a frame-driven ticker."""
        if self._ticker is not None:
            self._ticker.advance(dt)

    def _expire(self):
        self.stop()
        self.expired = True
        logger.info("Countdown expired")
        if self.on_expire:
            self.on_expire()

    @contextmanager
    def running_from(self, remaining: int) -> Iterator['TurnCountdown']:
        """Run the countdown for the duration of a with-block."""
        self.start(remaining)
        try:
            yield self
        finally:
            self.stop()

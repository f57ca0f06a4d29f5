"""
Repeating wall-clock ticker on the asyncio event loop.

The ticker owns at most one pending TimerHandle. Ticks run on the loop thread,
so they never interleave with other code scheduled on the same loop.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """Invoke `callback` every `interval_seconds` until stopped."""

    def __init__(self, callback: Callable[[], None], interval_seconds: float = 1.0):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self.callback = callback
        self.interval_seconds = interval_seconds
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self.tick_count = 0

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    @property
    def handle(self) -> Optional[asyncio.TimerHandle]:
        return self._handle

    def start(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """Start ticking. Any previous schedule is cancelled first."""
        self.stop()
        self._loop = loop or asyncio.get_running_loop()
        self._handle = self._loop.call_later(self.interval_seconds, self._fire)
        logger.debug("Ticker started (interval=%.3fs)", self.interval_seconds)

    def stop(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()
            logger.debug("Ticker stopped after %d ticks", self.tick_count)

    def _fire(self) -> None:
        # Schedule the next tick before running the callback, so a callback
        # that calls stop() cancels it.
        self._handle = self._loop.call_later(self.interval_seconds, self._fire)
        self.tick_count += 1
        self.callback()

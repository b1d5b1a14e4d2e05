"""Deferred callbacks that run after the current notification cycle returns."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque

logger = logging.getLogger(__name__)


class ScheduledCall:
    """Handle for a queued callback; cancelling drops it without running."""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class TickScheduler:
    """FIFO queue of callbacks drained explicitly by the script before rendering."""

    def __init__(self) -> None:
        self._queue: Deque[ScheduledCall] = deque()

    def __len__(self) -> int:
        return sum(1 for call in self._queue if not call.cancelled)

    def call_soon(self, callback: Callable[[], None]) -> ScheduledCall:
        """Queue ``callback`` for the next tick and return its handle."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        call = ScheduledCall(callback)
        self._queue.append(call)
        return call

    def run_pending(self) -> int:
        """Run queued callbacks in order, including ones queued while draining.

        A failing callback is logged and does not stop the rest of the queue.
        Returns the number of callbacks that ran.
        """
        ran = 0
        while self._queue:
            call = self._queue.popleft()
            if call.cancelled:
                continue
            try:
                call.callback()
            except Exception:
                logger.exception("Deferred callback %r failed", call.callback)
            ran += 1
        return ran

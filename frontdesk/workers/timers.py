"""Cancellable fixed-delay timers for highlights, toasts and dropdowns."""

import asyncio
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """A pending callback that can be cancelled."""

    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    """Runs a callback once after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


class AsyncioScheduler:
    """Scheduler backed by the running event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)


class TimerSlot:
    """
    Holds at most one pending timer.

    Starting a new timer cancels the one in the slot, so a superseded timer
    can never fire. The slot is emptied before the callback runs.
    """

    def __init__(self, scheduler: Scheduler, name: str = "timer"):
        """
        Initialize the slot.

        Args:
            scheduler: Scheduler the timers are placed on
            name: Slot name for logging
        """
        self.scheduler = scheduler
        self.name = name
        self._handle: Optional[TimerHandle] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self, delay: float, callback: Callable[[], None]) -> None:
        """Schedule `callback` after `delay` seconds, replacing any pending timer."""
        self.cancel()
        self._generation += 1
        generation = self._generation

        def fire() -> None:
            # A handle cancelled too late to stop the loop still must not run
            if generation != self._generation or self._handle is None:
                return
            self._handle = None
            callback()

        self._handle = self.scheduler.call_later(delay, fire)
        logger.debug(f"{self.name} scheduled", extra={"delay_seconds": delay, "timer": self.name})

    def cancel(self) -> None:
        """Cancel the pending timer, if any. Safe to call repeatedly."""
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        self._generation += 1
        logger.debug(f"{self.name} cancelled", extra={"timer": self.name})

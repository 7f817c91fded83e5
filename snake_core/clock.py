"""Cancellable tick timer on top of the asyncio event loop."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional


class TickTimer:
    """Fires ``callback`` once after a delay; re-armed by the owner every tick.

    Re-arming after each tick lets the interval change between ticks. The
    handle is dropped in :meth:`cancel`, so no tick can fire after it returns.
    """

    def __init__(self, callback: Callable[[], None], loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._callback = callback
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def schedule(self, delay_ms: float) -> None:
        """Arm the timer, replacing any pending tick."""

        self.cancel()
        self._handle = self._resolve_loop().call_later(delay_ms / 1000.0, self._fire)

    def cancel(self) -> None:
        """Drop the pending tick; safe when nothing is scheduled."""

        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self._callback()

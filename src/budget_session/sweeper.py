"""SessionSweeper: asyncio Task based periodic removal of expired sessions."""

from __future__ import annotations

import asyncio
import contextlib

import structlog

from .service import SessionService

logger = structlog.get_logger(__name__)


class SessionSweeper:
    """Calls SessionService.sweep_expired on a fixed interval.

    A failed sweep is logged and retried on the next tick.
    """

    def __init__(self, service: SessionService, interval_seconds: float = 3 * 60 * 60) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._service = service
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the sweep task. Calling start twice is a no-op."""
        if self._task is not None:
            return
        self._running = True
        self._task = asyncio.create_task(self._sweep_loop())

    async def stop(self) -> None:
        """Stop the sweep task and wait for it to finish."""
        self._running = False
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None

    async def sweep_once(self) -> int:
        """Run a single sweep and return the number of sessions removed."""
        return await self._service.sweep_expired()

    async def _sweep_loop(self) -> None:
        while self._running:
            try:
                await self.sweep_once()
            except Exception as e:
                logger.error("session_sweep_failed", error=str(e))
            await asyncio.sleep(self._interval)

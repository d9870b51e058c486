"""Cancellable delayed calls for coalescing rapid input."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Run an async callback once input has been quiet for `delay` seconds.

    Each trigger cancels the pending scheduled call and schedules a new one.
    Once the callback has started it is never cancelled by a later trigger.
    """

    def __init__(self, delay: float, callback: Callable[..., Awaitable[Any]]):
        self.delay = delay
        self.callback = callback
        self._task: asyncio.Task | None = None
        self._started = False

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done() and not self._started

    def trigger(self, *args: Any) -> None:
        """Schedule the callback, replacing any call still waiting for its delay."""
        self.cancel()
        self._started = False
        self._task = asyncio.get_running_loop().create_task(self._run(args))

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the scheduled call, if any, to finish."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            # only swallow the cancellation of the scheduled task itself
            if not task.cancelled():
                raise

    async def _run(self, args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self.delay)
        self._started = True
        try:
            await self.callback(*args)
        except Exception:
            logger.exception("Debounced call failed")

"""asyncio based step scheduler."""

import asyncio
from typing import Callable

from spinbox.spinbox_step_scheduler import SpinBoxScheduledCall, SpinBoxStepScheduler


class AsyncioSpinBoxScheduledCall(SpinBoxScheduledCall):
    """A pending `loop.call_later` callback."""

    def __init__(self) -> None:
        self._handle: asyncio.TimerHandle | None = None
        self._done = False

    def attach(self, handle: asyncio.TimerHandle) -> None:
        """Record the loop handle for this call."""
        self._handle = handle

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()

        self._done = True

    def is_active(self) -> bool:
        return not self._done and self._handle is not None and not self._handle.cancelled()

    def run(self, callback: Callable[[], None]) -> None:
        """Mark the call as finished and run the callback."""
        self._done = True
        callback()


class AsyncioSpinBoxStepScheduler(SpinBoxStepScheduler):
    """
    Schedules step callbacks on an asyncio event loop.

    This works with any loop, including a Qt-integrated one that drives the GUI.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        """
        Initialize the scheduler.

        Args:
            loop: Loop to schedule on; defaults to the running loop at schedule time
        """
        self._loop = loop

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> SpinBoxScheduledCall:
        loop = self._loop if self._loop is not None else asyncio.get_running_loop()
        call = AsyncioSpinBoxScheduledCall()
        call.attach(loop.call_later(delay_ms / 1000, call.run, callback))
        return call

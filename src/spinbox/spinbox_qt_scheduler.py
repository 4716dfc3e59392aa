"""Qt timer based step scheduler."""

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from spinbox.spinbox_step_scheduler import SpinBoxScheduledCall, SpinBoxStepScheduler


class QtSpinBoxScheduledCall(SpinBoxScheduledCall):
    """A pending single-shot QTimer."""

    def __init__(self, parent: QObject | None, delay_ms: int, callback: Callable[[], None]) -> None:
        """
        Create and start the timer.

        Args:
            parent: Optional owner of the timer
            delay_ms: Delay before the callback runs, in milliseconds
            callback: Function to call when the timer fires
        """
        self._callback = callback
        self._timer: QTimer | None = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(delay_ms)
        self._timer.timeout.connect(self._handle_timeout)
        self._timer.start()

    def cancel(self) -> None:
        if self._timer is None:
            return

        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _handle_timeout(self) -> None:
        """Release the timer and run the callback."""
        if self._timer is None:
            return

        self._timer.deleteLater()
        self._timer = None
        self._callback()


class QtSpinBoxStepScheduler(SpinBoxStepScheduler):
    """Schedules step callbacks with single-shot QTimers on the GUI thread."""

    def __init__(self, parent: QObject | None = None) -> None:
        """
        Initialize the scheduler.

        Args:
            parent: Optional owner of the timers (usually the spin box widget)
        """
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> SpinBoxScheduledCall:
        return QtSpinBoxScheduledCall(self._parent, delay_ms, callback)

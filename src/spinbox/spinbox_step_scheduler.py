"""Abstract scheduled-callback primitive used for auto-repeat."""

from abc import ABC, abstractmethod
from typing import Callable


class SpinBoxScheduledCall(ABC):
    """Handle for a callback that has been scheduled to run later."""

    @abstractmethod
    def cancel(self) -> None:
        """Cancel the call. Cancelling twice, or after the call has run, is a no-op."""

    @abstractmethod
    def is_active(self) -> bool:
        """Check whether the call is still pending."""


class SpinBoxStepScheduler(ABC):
    """
    Schedules one-shot callbacks on the controller's execution context.

    Callbacks must run on the same thread as every other controller operation
    so that no two mutations can race.
    """

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> SpinBoxScheduledCall:
        """
        Schedule a callback.

        Args:
            delay_ms: Delay before the callback runs, in milliseconds
            callback: Function to call

        Returns:
            Handle that can cancel the call
        """

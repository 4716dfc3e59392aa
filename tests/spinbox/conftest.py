"""Shared fixtures and utilities for spin box tests."""

from typing import Callable, List

import pytest

from spinbox.spinbox_controller import SpinBoxController
from spinbox.spinbox_settings import SpinBoxSettings
from spinbox.spinbox_step_scheduler import SpinBoxScheduledCall, SpinBoxStepScheduler


class ManualScheduledCall(SpinBoxScheduledCall):
    """Scheduled call that only runs when the test fires it."""

    def __init__(self, delay_ms: int, callback: Callable[[], None]):
        self.delay_ms = delay_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def is_active(self) -> bool:
        return not self.cancelled and not self.fired


class ManualStepScheduler(SpinBoxStepScheduler):
    """Deterministic scheduler for testing auto-repeat."""

    def __init__(self):
        self.calls: List[ManualScheduledCall] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> SpinBoxScheduledCall:
        call = ManualScheduledCall(delay_ms, callback)
        self.calls.append(call)
        return call

    def pending(self) -> List[ManualScheduledCall]:
        """Get calls that are still waiting to fire."""
        return [call for call in self.calls if call.is_active()]

    def fire_next(self) -> bool:
        """Fire the oldest pending call; returns False if nothing was pending."""
        pending = self.pending()
        if not pending:
            return False

        call = pending[0]
        call.fired = True
        call.callback()
        return True

    def fire_times(self, count: int) -> None:
        """Fire pending calls one after another."""
        for _ in range(count):
            if not self.fire_next():
                break


class ValueRecorder:
    """Collects values passed to a callback."""

    def __init__(self):
        self.values: List[float] = []

    def __call__(self, value: float) -> None:
        self.values.append(value)


@pytest.fixture
def scheduler():
    """Provide a manual step scheduler."""
    return ManualStepScheduler()


@pytest.fixture
def recorder():
    """Provide a value recorder."""
    return ValueRecorder()


@pytest.fixture
def make_controller(scheduler, recorder):
    """Factory for controllers wired to the manual scheduler and the recorder."""
    controllers: List[SpinBoxController] = []

    def _make(**kwargs) -> SpinBoxController:
        validator = kwargs.pop('validator', None)
        controller = SpinBoxController(
            SpinBoxSettings(**kwargs),
            scheduler,
            on_value_changed=recorder,
            validator=validator
        )
        controllers.append(controller)
        return controller

    yield _make

    for controller in controllers:
        controller.dispose()

"""Auto-repeat state machine for held step actions."""

import logging
from typing import Callable

from spinbox.spinbox_step_scheduler import SpinBoxScheduledCall, SpinBoxStepScheduler
from spinbox.spinbox_types import SpinBoxDirection, SpinBoxRepeatState


class SpinBoxStepRepeater:
    """
    Drives repeated steps while a step action is held.

    `begin()` performs one step straight away and then one more every
    `interval_ms` until `end()` is called. With an acceleration configured, the
    n-th repeat uses a magnitude of `step + acceleration * n`.

    Each repeat is a one-shot scheduled callback tagged with the session that
    scheduled it. A callback that fires after `end()` (or after a new session
    has begun) does nothing.
    """

    def __init__(
        self,
        scheduler: SpinBoxStepScheduler,
        step: float,
        interval_ms: int,
        acceleration: float | None,
        on_step: Callable[[float], bool]
    ) -> None:
        """
        Initialize the repeater.

        Args:
            scheduler: Scheduler used for the repeat callbacks
            step: Base step magnitude
            interval_ms: Time between repeats, in milliseconds
            acceleration: Magnitude added per repeat, or None for a constant step
            on_step: Called with a signed step amount; returns True if the value changed
        """
        self._logger = logging.getLogger("SpinBoxStepRepeater")
        self._scheduler = scheduler
        self._step = step
        self._interval_ms = interval_ms
        self._acceleration = acceleration
        self._on_step = on_step

        self._state = SpinBoxRepeatState.IDLE
        self._direction = SpinBoxDirection.UP
        self._repeat_count = 0
        self._session = 0
        self._pending: SpinBoxScheduledCall | None = None

    def state(self) -> SpinBoxRepeatState:
        """Get the current repeat state."""
        return self._state

    def direction(self) -> SpinBoxDirection:
        """Get the direction of the current (or last) repeat session."""
        return self._direction

    def repeat_count(self) -> int:
        """Get the number of automatic repeats performed in the current session."""
        return self._repeat_count

    def effective_step(self, repeat: int) -> float:
        """
        Get the step magnitude for a given repeat.

        Args:
            repeat: Repeat number; 0 is the initial step

        Returns:
            Step magnitude for that repeat
        """
        if not self._acceleration:
            return self._step

        return self._step + self._acceleration * repeat

    def step_once(self, direction: SpinBoxDirection) -> bool:
        """
        Perform a single step with the base magnitude.

        Args:
            direction: Direction to step in

        Returns:
            True if the value changed
        """
        return self._on_step(direction * self._step)

    def begin(self, direction: SpinBoxDirection) -> bool:
        """
        Start a repeat session.

        An already running session is ended first.

        Args:
            direction: Direction to step in

        Returns:
            True if the initial step changed the value
        """
        if self._state == SpinBoxRepeatState.STEPPING:
            self.end()

        self._session += 1
        self._state = SpinBoxRepeatState.STEPPING
        self._direction = direction
        self._repeat_count = 0
        self._logger.debug("Repeat session %d started, direction %s", self._session, direction.name)

        changed = self.step_once(direction)

        # The step callback may have ended the session
        if self._state == SpinBoxRepeatState.STEPPING:
            self._schedule_next()

        return changed

    def end(self) -> None:
        """End the current repeat session, cancelling any pending repeat."""
        if self._state == SpinBoxRepeatState.IDLE:
            return

        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

        self._state = SpinBoxRepeatState.IDLE
        self._logger.debug("Repeat session %d ended after %d repeats", self._session, self._repeat_count)

    def _schedule_next(self) -> None:
        """Schedule the next repeat for the current session."""
        session = self._session
        self._pending = self._scheduler.schedule(self._interval_ms, lambda: self._handle_repeat(session))

    def _handle_repeat(self, session: int) -> None:
        """Perform one automatic repeat if the session is still live."""
        if self._state != SpinBoxRepeatState.STEPPING or session != self._session:
            return

        self._pending = None
        self._repeat_count += 1
        self._on_step(self._direction * self.effective_step(self._repeat_count))

        # The commit above happens before the next repeat is scheduled
        if self._state == SpinBoxRepeatState.STEPPING and session == self._session:
            self._schedule_next()

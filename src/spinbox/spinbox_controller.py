"""Spin box controller that keeps a bounded value and its display text in sync."""

from dataclasses import replace
import logging
from types import TracebackType
from typing import Any, Callable, Dict, List, Tuple

from spinbox.spinbox_bounds import SpinBoxBounds
from spinbox.spinbox_exceptions import SpinBoxDisposedError
from spinbox.spinbox_formatter import SpinBoxFormatter
from spinbox.spinbox_input_filter import SpinBoxInputFilter
from spinbox.spinbox_qt_scheduler import QtSpinBoxStepScheduler
from spinbox.spinbox_selection import SpinBoxSelectionAdjuster
from spinbox.spinbox_settings import SpinBoxSettings
from spinbox.spinbox_step_repeater import SpinBoxStepRepeater
from spinbox.spinbox_step_scheduler import SpinBoxStepScheduler
from spinbox.spinbox_types import (
    SpinBoxDirection,
    SpinBoxEvent,
    SpinBoxKey,
    SpinBoxKeyboardHint,
    SpinBoxKeyEvent,
    SpinBoxKeyPhase,
    SpinBoxRepeatState,
    SpinBoxSelection,
)


class SpinBoxController:
    """
    Owns the value and display text of a numeric spin box.

    User edits flow text -> value: an accepted edit updates the live value
    straight away, without clamping, and clamping happens on `commit()`.
    Steps flow value -> text: the stepped value is clamped, formatted and
    written back to the text, and the selection is shifted so the caret stays
    on the same digit.

    The presentation layer forwards text edits, key events, focus changes and
    step button presses, and renders `text()`, `selection()`, `can_increment()`
    and `can_decrement()`.
    """

    def __init__(
        self,
        settings: SpinBoxSettings | None = None,
        scheduler: SpinBoxStepScheduler | None = None,
        on_value_changed: Callable[[float], None] | None = None,
        validator: Callable[[str], str | None] | None = None
    ) -> None:
        """
        Initialize the controller.

        Args:
            settings: Spin box configuration; defaults are used if not provided
            scheduler: Scheduler for auto-repeat; defaults to Qt timers
            on_value_changed: Optional callback for committed value changes
            validator: Optional function returning an error message for invalid text
        """
        self._logger = logging.getLogger("SpinBoxController")
        self._settings = settings if settings is not None else SpinBoxSettings()
        self._bounds = self._settings.bounds()
        self._formatter = SpinBoxFormatter(self._settings.decimals)
        self._input_filter = SpinBoxInputFilter(self._settings.decimals, self._bounds.allows_negative())
        self._selection_adjuster = SpinBoxSelectionAdjuster()
        self._scheduler = scheduler if scheduler is not None else QtSpinBoxStepScheduler()
        self._repeater = SpinBoxStepRepeater(
            self._scheduler,
            self._settings.step,
            self._settings.interval_ms,
            self._settings.acceleration,
            self._step_by
        )
        self._validator = validator
        self._disposed = False

        self._callbacks: Dict[SpinBoxEvent, List[Callable[..., None]]] = {
            event: [] for event in SpinBoxEvent
        }
        if on_value_changed is not None:
            self.register_callback(SpinBoxEvent.VALUE_CHANGED, on_value_changed)

        self._value, self._text = self._canonical(self._settings.value)
        self._selection = SpinBoxSelection.collapsed(len(self._text))

    def __enter__(self) -> "SpinBoxController":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None
    ) -> None:
        self.dispose()

    def dispose(self) -> None:
        """Cancel any pending repeat and drop all callbacks. Safe to call more than once."""
        if self._disposed:
            return

        self._repeater.end()
        for callbacks in self._callbacks.values():
            callbacks.clear()

        self._disposed = True

    def is_disposed(self) -> bool:
        """Check whether the controller has been disposed."""
        return self._disposed

    def register_callback(self, event: SpinBoxEvent, callback: Callable[..., None]) -> None:
        """
        Register a callback for a specific event.

        VALUE_CHANGED callbacks receive the new value; EDIT_REJECTED callbacks
        receive the rejected text.

        Args:
            event: The event type to listen for
            callback: The callback function to call when the event occurs
        """
        self._check_alive()
        if callback not in self._callbacks[event]:
            self._callbacks[event].append(callback)

    def unregister_callback(self, event: SpinBoxEvent, callback: Callable[..., None]) -> None:
        """
        Unregister a callback for a specific event.

        Args:
            event: The event type to stop listening for
            callback: The callback function to remove
        """
        if callback in self._callbacks[event]:
            self._callbacks[event].remove(callback)

    def settings(self) -> SpinBoxSettings:
        """Get the controller's settings."""
        return self._settings

    def bounds(self) -> SpinBoxBounds:
        """Get the value bounds."""
        return self._bounds

    def value(self) -> float:
        """Get the current value."""
        return self._value

    def text(self) -> str:
        """Get the current display text."""
        return self._text

    def selection(self) -> SpinBoxSelection:
        """Get the current selection in the display text."""
        return self._selection

    def set_selection(self, selection: SpinBoxSelection) -> None:
        """
        Record a caret or selection change made natively by the text field.

        Args:
            selection: New selection; offsets are clamped into the text
        """
        self._check_alive()
        self._selection = selection.clamped(len(self._text))

    def is_enabled(self) -> bool:
        """Check whether the control accepts edits and steps."""
        return self._settings.enabled and not self._bounds.is_disabled()

    def can_increment(self) -> bool:
        """Check whether the increment affordance should be enabled."""
        return self.is_enabled() and self._value < self._bounds.maximum

    def can_decrement(self) -> bool:
        """Check whether the decrement affordance should be enabled."""
        return self.is_enabled() and self._value > self._bounds.minimum

    def keyboard_hint(self) -> SpinBoxKeyboardHint:
        """Get the soft keyboard hint for this control."""
        return SpinBoxKeyboardHint(
            signed=self._bounds.allows_negative(),
            decimal=self._settings.decimals > 0
        )

    def error_text(self) -> str | None:
        """Get the validator's message for the current text, or None if it is valid."""
        if self._validator is None:
            return None

        return self._validator(self._text)

    def repeat_state(self) -> SpinBoxRepeatState:
        """Get the auto-repeat state."""
        return self._repeater.state()

    def set_from_text(self, raw_text: str, selection: SpinBoxSelection | None = None) -> bool:
        """
        Apply a user edit to the display text.

        The live value follows the parsed text without clamping so observers see
        intermediate typing states; `commit()` clamps it.

        Args:
            raw_text: Full content of the edit buffer after the edit
            selection: Caret/selection after the edit, if the text field reports it

        Returns:
            True if the edit was accepted, False if it was rejected and the
            keystroke should be suppressed
        """
        self._check_alive()
        if not self.is_enabled():
            self._logger.debug("Ignoring edit on disabled spin box")
            return False

        if not self._input_filter.accepts(raw_text):
            self._logger.debug("Rejected edit %r", raw_text)
            self._trigger_event(SpinBoxEvent.EDIT_REJECTED, raw_text)
            return False

        self._text = raw_text
        self._selection = (selection if selection is not None else self._selection).clamped(len(raw_text))

        value = self._formatter.parse(raw_text)
        if value != self._value:
            self._value = value
            self._trigger_event(SpinBoxEvent.VALUE_CHANGED, value)

        return True

    def commit(self) -> bool:
        """
        Clamp the live value and rewrite the text in canonical form.

        Returns:
            True if the committed value differs from the live value
        """
        self._check_alive()
        if not self.is_enabled():
            return False

        value, text = self._canonical(self._value)
        self._text = text
        self._selection = self._selection.clamped(len(text))
        if value == self._value:
            return False

        self._logger.debug("Committed %s as %s", self._value, value)
        self._value = value
        self._trigger_event(SpinBoxEvent.VALUE_CHANGED, value)
        return True

    def step(self, direction: SpinBoxDirection) -> bool:
        """
        Perform a single step.

        Args:
            direction: Direction to step in

        Returns:
            True if the value changed
        """
        self._check_alive()
        if not self.is_enabled():
            self._logger.debug("Ignoring step on disabled spin box")
            return False

        return self._repeater.step_once(direction)

    def begin_repeat(self, direction: SpinBoxDirection) -> bool:
        """
        Start auto-repeating steps, e.g. while a step button is held.

        Args:
            direction: Direction to step in

        Returns:
            True if the initial step changed the value
        """
        self._check_alive()
        if not self.is_enabled():
            self._logger.debug("Ignoring repeat on disabled spin box")
            return False

        return self._repeater.begin(direction)

    def end_repeat(self) -> None:
        """Stop auto-repeating steps."""
        self._check_alive()
        self._repeater.end()

    def handle_key(self, event: SpinBoxKeyEvent) -> bool:
        """
        Handle a key event.

        Up and down arrows step the value. Their release events are reported as
        handled so the host doesn't act on them.

        Args:
            event: Key event from the host

        Returns:
            True if the event was handled and the host should not process it
        """
        self._check_alive()
        if event.key == SpinBoxKey.ARROW_UP:
            direction = SpinBoxDirection.UP

        elif event.key == SpinBoxKey.ARROW_DOWN:
            direction = SpinBoxDirection.DOWN

        else:
            return False

        if event.phase == SpinBoxKeyPhase.UP:
            return True

        return self.step(direction)

    def on_focus_gained(self) -> None:
        """Select the whole text so the first keystroke replaces it."""
        self._check_alive()
        self._selection = SpinBoxSelection(0, len(self._text))

    def on_focus_lost(self) -> None:
        """Commit any in-progress edit."""
        self.commit()

    def reconfigure(self, settings: SpinBoxSettings) -> "SpinBoxController":
        """
        Replace this controller with one using new settings.

        The new controller starts from this controller's current value,
        re-clamped into the new bounds, and takes over the scheduler, validator
        and registered callbacks. This controller is disposed.

        Args:
            settings: New settings; their initial value is ignored

        Returns:
            The new controller
        """
        self._check_alive()
        controller = SpinBoxController(
            replace(settings, value=self._value),
            self._scheduler,
            validator=self._validator
        )
        for event, callbacks in self._callbacks.items():
            for callback in callbacks:
                controller.register_callback(event, callback)

        self.dispose()
        return controller

    def _canonical(self, value: float) -> Tuple[float, str]:
        """
        Clamp a value and round it to the displayed precision.

        Args:
            value: Candidate value

        Returns:
            Tuple of (committed value, display text)
        """
        text = self._formatter.format(self._bounds.clamp(value))

        # Rounding to the displayed precision can step just outside the bounds
        return self._bounds.clamp(self._formatter.parse(text)), text

    def _step_by(self, amount: float) -> bool:
        """
        Commit the current value plus a signed step amount.

        Args:
            amount: Signed amount to add

        Returns:
            True if the value changed
        """
        value, text = self._canonical(self._value + amount)
        if value == self._value:
            return False

        old_text = self._formatter.format(self._value)
        self._selection = self._selection_adjuster.adjust(self._selection, old_text, text)
        self._text = text
        self._value = value
        self._trigger_event(SpinBoxEvent.VALUE_CHANGED, value)
        return True

    def _trigger_event(self, event: SpinBoxEvent, *args: Any) -> None:
        """
        Trigger all callbacks registered for an event.

        Args:
            event: The event to trigger
            *args: Arguments to pass to callbacks
        """
        for callback in list(self._callbacks[event]):
            try:
                callback(*args)

            except Exception:
                self._logger.exception("Error in callback for %s", event)

    def _check_alive(self) -> None:
        """Raise if the controller has been disposed."""
        if self._disposed:
            raise SpinBoxDisposedError("Spin box controller used after dispose")

"""
Numeric spin box controller.

This package provides the toolkit-independent logic behind a numeric spin box:
a bounded value kept in sync with its editable text, keystroke filtering,
caret continuity across programmatic rewrites, and accelerating auto-repeat
for held step buttons.
"""

from spinbox.spinbox_asyncio_scheduler import AsyncioSpinBoxScheduledCall, AsyncioSpinBoxStepScheduler
from spinbox.spinbox_bounds import SpinBoxBounds
from spinbox.spinbox_controller import SpinBoxController
from spinbox.spinbox_exceptions import (
    SpinBoxConfigError,
    SpinBoxDisposedError,
    SpinBoxError,
)
from spinbox.spinbox_formatter import SpinBoxFormatter
from spinbox.spinbox_input_filter import SpinBoxInputFilter
from spinbox.spinbox_qt_keys import spinbox_key_from_qt
from spinbox.spinbox_qt_scheduler import QtSpinBoxScheduledCall, QtSpinBoxStepScheduler
from spinbox.spinbox_selection import SpinBoxSelectionAdjuster
from spinbox.spinbox_settings import SpinBoxSettings
from spinbox.spinbox_step_repeater import SpinBoxStepRepeater
from spinbox.spinbox_step_scheduler import SpinBoxScheduledCall, SpinBoxStepScheduler
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

__all__ = [
    # Exceptions
    'SpinBoxError',
    'SpinBoxConfigError',
    'SpinBoxDisposedError',
    # Types
    'SpinBoxDirection',
    'SpinBoxEvent',
    'SpinBoxKey',
    'SpinBoxKeyboardHint',
    'SpinBoxKeyEvent',
    'SpinBoxKeyPhase',
    'SpinBoxRepeatState',
    'SpinBoxSelection',
    # Configuration
    'SpinBoxSettings',
    'SpinBoxBounds',
    # Scheduling
    'SpinBoxScheduledCall',
    'SpinBoxStepScheduler',
    'QtSpinBoxScheduledCall',
    'QtSpinBoxStepScheduler',
    'AsyncioSpinBoxScheduledCall',
    'AsyncioSpinBoxStepScheduler',
    # Core classes
    'SpinBoxFormatter',
    'SpinBoxInputFilter',
    'SpinBoxSelectionAdjuster',
    'SpinBoxStepRepeater',
    'SpinBoxController',
    'spinbox_key_from_qt',
]

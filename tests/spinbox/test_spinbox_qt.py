"""Tests for the Qt integration: timer scheduler and key mapping."""

import time

import pytest

from PySide6.QtCore import QCoreApplication, Qt

from spinbox.spinbox_qt_keys import spinbox_key_from_qt
from spinbox.spinbox_qt_scheduler import QtSpinBoxStepScheduler
from spinbox.spinbox_types import SpinBoxKey


@pytest.fixture(scope="module")
def qt_app():
    """Provide a Qt application so timers can run."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])

    return app


def process_events_until(app, condition, timeout=1.0):
    """Process Qt events until the condition holds or the timeout expires."""
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        app.processEvents()
        time.sleep(0.001)


class TestQtSpinBoxStepScheduler:
    """Test scheduling with QTimers."""

    def test_callback_runs(self, qt_app):
        """Test that a scheduled callback runs once."""
        calls = []
        call = QtSpinBoxStepScheduler().schedule(1, lambda: calls.append("fired"))
        assert call.is_active()

        process_events_until(qt_app, lambda: calls)

        assert calls == ["fired"]
        assert not call.is_active()

    def test_cancel(self, qt_app):
        """Test that a cancelled timer never fires."""
        calls = []
        call = QtSpinBoxStepScheduler().schedule(1, lambda: calls.append("fired"))
        call.cancel()
        call.cancel()

        process_events_until(qt_app, lambda: False, timeout=0.05)

        assert calls == []
        assert not call.is_active()


class TestSpinBoxKeyFromQt:
    """Test mapping Qt key codes."""

    def test_arrow_keys(self):
        """Test that arrow keys map to spin box keys."""
        assert spinbox_key_from_qt(Qt.Key.Key_Up) == SpinBoxKey.ARROW_UP
        assert spinbox_key_from_qt(Qt.Key.Key_Down) == SpinBoxKey.ARROW_DOWN

    def test_integer_codes(self):
        """Test that plain integer key codes are mapped too."""
        assert spinbox_key_from_qt(Qt.Key.Key_Up.value) == SpinBoxKey.ARROW_UP

    def test_other_keys(self):
        """Test that other keys map to OTHER."""
        assert spinbox_key_from_qt(Qt.Key.Key_Left) == SpinBoxKey.OTHER
        assert spinbox_key_from_qt(Qt.Key.Key_5) == SpinBoxKey.OTHER

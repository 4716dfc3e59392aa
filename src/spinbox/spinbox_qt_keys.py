"""Mapping from Qt key codes to spin box keys."""

from PySide6.QtCore import Qt

from spinbox.spinbox_types import SpinBoxKey


# Keyed by integer code: QKeyEvent.key() returns a plain int
_QT_KEY_MAP = {
    Qt.Key.Key_Up.value: SpinBoxKey.ARROW_UP,
    Qt.Key.Key_Down.value: SpinBoxKey.ARROW_DOWN,
}


def spinbox_key_from_qt(key: Qt.Key | int) -> SpinBoxKey:
    """
    Map a Qt key code to the key the controller understands.

    Args:
        key: Value of `QKeyEvent.key()`

    Returns:
        Matching SpinBoxKey, or SpinBoxKey.OTHER for keys the controller ignores
    """
    code = key.value if isinstance(key, Qt.Key) else int(key)
    return _QT_KEY_MAP.get(code, SpinBoxKey.OTHER)

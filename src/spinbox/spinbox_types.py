"""Shared types for spin box operations."""

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class SpinBoxDirection(IntEnum):
    """Direction of a step command."""

    UP = 1
    DOWN = -1


class SpinBoxKey(Enum):
    """Keys the controller knows how to handle."""

    ARROW_UP = auto()
    ARROW_DOWN = auto()
    OTHER = auto()


class SpinBoxKeyPhase(Enum):
    """Whether a key event is a press or a release."""

    DOWN = auto()
    UP = auto()


@dataclass(frozen=True)
class SpinBoxKeyEvent:
    """Toolkit-independent key event passed to the controller."""

    key: SpinBoxKey
    phase: SpinBoxKeyPhase = SpinBoxKeyPhase.DOWN


@dataclass(frozen=True)
class SpinBoxSelection:
    """Caret/selection offsets into the display text."""

    start: int
    end: int

    @classmethod
    def collapsed(cls, offset: int) -> "SpinBoxSelection":
        """Create an empty selection (a caret) at the given offset."""
        return cls(offset, offset)

    def is_collapsed(self) -> bool:
        """Check whether the selection is just a caret."""
        return self.start == self.end

    def clamped(self, length: int) -> "SpinBoxSelection":
        """
        Clamp both offsets into [0, length].

        Args:
            length: Length of the text the selection refers to

        Returns:
            Selection with both offsets inside the text
        """
        return SpinBoxSelection(
            max(0, min(self.start, length)),
            max(0, min(self.end, length))
        )


class SpinBoxRepeatState(Enum):
    """State of the auto-repeat state machine."""

    IDLE = auto()
    STEPPING = auto()


class SpinBoxEvent(Enum):
    """Events raised by a spin box controller."""

    VALUE_CHANGED = auto()
    EDIT_REJECTED = auto()


@dataclass(frozen=True)
class SpinBoxKeyboardHint:
    """Hint for hosts that pick a soft keyboard layout."""

    signed: bool  # Negative values can be entered
    decimal: bool  # A decimal separator can be entered

"""Closed-interval bounds for spin box values."""

from dataclasses import dataclass
import math

from spinbox.spinbox_exceptions import SpinBoxConfigError


@dataclass(frozen=True)
class SpinBoxBounds:
    """
    The closed interval [minimum, maximum] a spin box value is kept in.

    A zero-width interval (minimum == maximum) means the control is disabled.
    """

    minimum: float
    maximum: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.minimum) or not math.isfinite(self.maximum):
            raise SpinBoxConfigError(
                "Spin box bounds must be finite",
                {'minimum': self.minimum, 'maximum': self.maximum}
            )

        if self.minimum > self.maximum:
            raise SpinBoxConfigError(
                f"Minimum {self.minimum} is greater than maximum {self.maximum}",
                {'minimum': self.minimum, 'maximum': self.maximum}
            )

    def clamp(self, value: float) -> float:
        """
        Clamp a value into the bounds.

        Args:
            value: Candidate value

        Returns:
            minimum if value is below it, maximum if value is above it,
            otherwise value unchanged
        """
        if value < self.minimum:
            return self.minimum

        if value > self.maximum:
            return self.maximum

        return value

    def is_disabled(self) -> bool:
        """Check whether the bounds leave no room to move."""
        return self.minimum == self.maximum

    def allows_negative(self) -> bool:
        """Check whether negative values can be entered."""
        return self.minimum < 0

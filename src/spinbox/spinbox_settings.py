from dataclasses import asdict, dataclass
import json
import math
from typing import Any, Dict

from spinbox.spinbox_bounds import SpinBoxBounds
from spinbox.spinbox_exceptions import SpinBoxConfigError


@dataclass(frozen=True)
class SpinBoxSettings:
    """
    Configuration for a spin box controller.

    Settings are fixed for the lifetime of a controller. This class also handles
    loading and saving settings to a JSON file.
    """
    minimum: float = 0.0
    maximum: float = 100.0
    step: float = 1.0
    value: float = 0.0  # Initial value, clamped into the bounds
    decimals: int = 0
    interval_ms: int = 100  # Auto-repeat interval while a step action is held
    acceleration: float | None = None  # None means a constant repeat step
    enabled: bool = True

    def __post_init__(self) -> None:
        # Raises SpinBoxConfigError for bad bounds
        self.bounds()

        if not math.isfinite(self.step) or self.step <= 0:
            raise SpinBoxConfigError(f"Step must be positive, got {self.step}", {'step': self.step})

        if self.decimals < 0:
            raise SpinBoxConfigError(
                f"Decimals must not be negative, got {self.decimals}",
                {'decimals': self.decimals}
            )

        if self.interval_ms <= 0:
            raise SpinBoxConfigError(
                f"Repeat interval must be positive, got {self.interval_ms}",
                {'interval_ms': self.interval_ms}
            )

        if self.acceleration is not None and (not math.isfinite(self.acceleration) or self.acceleration < 0):
            raise SpinBoxConfigError(
                f"Acceleration must be a finite, non-negative number, got {self.acceleration}",
                {'acceleration': self.acceleration}
            )

    def bounds(self) -> SpinBoxBounds:
        """Get the value bounds."""
        return SpinBoxBounds(self.minimum, self.maximum)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpinBoxSettings":
        """Create settings from a JSON-style dictionary; missing keys take defaults."""
        defaults = cls()
        acceleration = data.get("acceleration", defaults.acceleration)
        return cls(
            minimum=float(data.get("min", defaults.minimum)),
            maximum=float(data.get("max", defaults.maximum)),
            step=float(data.get("step", defaults.step)),
            value=float(data.get("value", defaults.value)),
            decimals=int(data.get("decimals", defaults.decimals)),
            interval_ms=int(data.get("intervalMs", defaults.interval_ms)),
            acceleration=None if acceleration is None else float(acceleration),
            enabled=bool(data.get("enabled", defaults.enabled))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a JSON-style dictionary."""
        fields = asdict(self)
        return {
            "min": fields["minimum"],
            "max": fields["maximum"],
            "step": fields["step"],
            "value": fields["value"],
            "decimals": fields["decimals"],
            "intervalMs": fields["interval_ms"],
            "acceleration": fields["acceleration"],
            "enabled": fields["enabled"],
        }

    @classmethod
    def load(cls, path: str) -> "SpinBoxSettings":
        """Load settings from a JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
            return cls.from_dict(data.get("spinBox", {}))

    def save(self, path: str) -> None:
        """Save settings to a JSON file."""
        data = {
            "spinBox": self.to_dict(),
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

"""Conversion between spin box values and display text."""

import math


class SpinBoxFormatter:
    """Formats values with a fixed number of decimals and parses them back."""

    def __init__(self, decimals: int = 0) -> None:
        """
        Initialize the formatter.

        Args:
            decimals: Number of fractional digits to render
        """
        self._decimals = decimals

    def decimals(self) -> int:
        """Get the number of fractional digits."""
        return self._decimals

    def format(self, value: float) -> str:
        """
        Render a value in fixed-point notation.

        Args:
            value: Value to render

        Returns:
            Text with exactly `decimals` fractional digits and a leading minus
            sign if the value is negative
        """
        # Negative zero renders without a sign
        if value == 0:
            value = 0.0

        return f"{value:.{self._decimals}f}"

    @staticmethod
    def parse(text: str) -> float:
        """
        Parse display text into a value.

        Parsing runs on every keystroke so partial input such as "-" or "." is
        expected; anything that isn't a finite number parses to 0.

        Args:
            text: Text to parse

        Returns:
            Parsed value, or 0.0 if the text is not a finite number
        """
        try:
            value = float(text)

        except ValueError:
            return 0.0

        if not math.isfinite(value):
            return 0.0

        return value

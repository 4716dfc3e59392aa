"""Keystroke filter that only admits partial numeric input."""

import re


class SpinBoxInputFilter:
    """
    Validates the shape of edited spin box text before it is committed.

    The filter checks shape only: an optional leading minus sign (when negative
    values are allowed), digits, and a single decimal point followed by at most
    `decimals` digits. Out-of-range numbers are accepted and clamped later, so a
    user can edit digits in the middle of a number without being locked out.
    """

    def __init__(self, decimals: int, allow_negative: bool) -> None:
        """
        Initialize the filter.

        Args:
            decimals: Maximum number of fractional digits
            allow_negative: True if a leading minus sign is allowed
        """
        self._decimals = decimals
        self._allow_negative = allow_negative

        sign = '-?' if allow_negative else ''
        fraction = rf'(\.\d{{0,{decimals}}})?' if decimals > 0 else ''
        self._pattern = re.compile(rf'{sign}\d*{fraction}')

    def accepts(self, text: str) -> bool:
        """
        Check whether text is valid (possibly partial) numeric input.

        Args:
            text: Proposed full content of the edit buffer

        Returns:
            True if the edit should be admitted
        """
        # Only ASCII digits are valid; \d would also match other scripts' digits
        if not text.isascii():
            return False

        return self._pattern.fullmatch(text) is not None

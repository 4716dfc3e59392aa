"""Caret continuity when spin box text is rewritten programmatically."""

from spinbox.spinbox_types import SpinBoxSelection


class SpinBoxSelectionAdjuster:
    """Keeps the caret on the same digit when a step adds or removes a sign."""

    @staticmethod
    def sign_width(text: str) -> int:
        """Get the number of characters taken by a leading sign."""
        return 1 if text.startswith('-') else 0

    def adjust(self, selection: SpinBoxSelection, old_text: str, new_text: str) -> SpinBoxSelection:
        """
        Shift a selection across a programmatic text replacement.

        Only used when a step rewrites the text; user keystrokes manage their
        own caret.

        Args:
            selection: Selection in the old text
            old_text: Formatted text before the step
            new_text: Formatted text after the step

        Returns:
            Selection shifted by the change in sign width and clamped into the
            new text
        """
        delta = self.sign_width(new_text) - self.sign_width(old_text)
        shifted = SpinBoxSelection(selection.start + delta, selection.end + delta)
        return shifted.clamped(len(new_text))

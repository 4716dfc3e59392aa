"""Tests for the spin box keystroke filter."""

import pytest

from spinbox.spinbox_input_filter import SpinBoxInputFilter


@pytest.fixture
def signed_filter():
    """Filter allowing negative values and two decimals."""
    return SpinBoxInputFilter(decimals=2, allow_negative=True)


@pytest.fixture
def unsigned_filter():
    """Filter allowing only non-negative values and two decimals."""
    return SpinBoxInputFilter(decimals=2, allow_negative=False)


@pytest.fixture
def integer_filter():
    """Filter allowing negative integers only."""
    return SpinBoxInputFilter(decimals=0, allow_negative=True)


class TestSpinBoxInputFilterAccepts:
    """Test input that should be admitted."""

    @pytest.mark.parametrize("text", ["", "-", "42", "-42", "12.", "12.3", "12.34", ".", ".5", "-.5", "007"])
    def test_signed_accepts(self, signed_filter, text):
        """Test partial and complete signed decimal input."""
        assert signed_filter.accepts(text)

    def test_out_of_range_accepted(self, unsigned_filter):
        """Test that the filter checks shape, not range."""
        assert unsigned_filter.accepts("999999")

    @pytest.mark.parametrize("text", ["", "0", "123"])
    def test_integer_accepts(self, integer_filter, text):
        """Test integer input."""
        assert integer_filter.accepts(text)


class TestSpinBoxInputFilterRejects:
    """Test input that should be rejected."""

    @pytest.mark.parametrize("text", ["1.2.3", "--5", "12.345", "5-", "1-2", "-1.-2"])
    def test_signed_rejects_bad_shape(self, signed_filter, text):
        """Test second separators, second signs and extra decimals."""
        assert not signed_filter.accepts(text)

    @pytest.mark.parametrize("text", ["a", "1a", "1,5", "+5", " 5", "1e5", "1_000"])
    def test_rejects_foreign_characters(self, signed_filter, text):
        """Test characters outside digits, sign and separator."""
        assert not signed_filter.accepts(text)

    def test_rejects_non_ascii_digits(self, signed_filter):
        """Test that digits from other scripts are rejected."""
        assert not signed_filter.accepts("١٢")

    @pytest.mark.parametrize("text", ["-", "-5", "-0.5"])
    def test_unsigned_rejects_sign(self, unsigned_filter, text):
        """Test that a sign is rejected when negative values are not allowed."""
        assert not unsigned_filter.accepts(text)

    @pytest.mark.parametrize("text", ["12.", ".", "1.0"])
    def test_integer_rejects_separator(self, integer_filter, text):
        """Test that no separator is allowed with zero decimals."""
        assert not integer_filter.accepts(text)

"""Tests for spin box exceptions."""

import pytest

from spinbox.spinbox_exceptions import SpinBoxConfigError, SpinBoxDisposedError, SpinBoxError


class TestSpinBoxError:
    """Test base SpinBoxError exception."""

    def test_create_simple_error(self):
        """Test creating an error without details."""
        error = SpinBoxError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.error_details is None

    def test_create_error_with_details(self):
        """Test creating an error with details."""
        error = SpinBoxError("Bad step", error_details={'step': 0})
        assert error.error_details == {'step': 0}

    @pytest.mark.parametrize("error_class", [SpinBoxConfigError, SpinBoxDisposedError])
    def test_subclasses(self, error_class):
        """Test that specific errors can be caught as SpinBoxError."""
        with pytest.raises(SpinBoxError) as exc_info:
            raise error_class("failed", {'reason': 'test'})

        assert exc_info.value.error_details['reason'] == 'test'

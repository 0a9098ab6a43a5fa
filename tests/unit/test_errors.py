"""Tests for the error hierarchy."""

import pytest

from wayfinder import errors
from wayfinder.safe_int import SafeIntError, WidthOverflow


class TestErrorCodes:
    """Tests for error codes and base classes."""

    @pytest.mark.parametrize("name", errors.__all__)
    def test_all_are_wayfinder_errors(self, name):
        assert issubclass(getattr(errors, name), errors.WayfinderError)

    def test_codes_unique(self):
        codes = [getattr(errors, name).code for name in errors.__all__]
        assert len(codes) == len(set(codes))

    def test_overflow_is_arithmetic(self):
        assert issubclass(errors.CalculationOverflow, ArithmeticError)
        assert issubclass(WidthOverflow, errors.CalculationOverflow)
        assert WidthOverflow.code == SafeIntError.code == "calculation_overflow"

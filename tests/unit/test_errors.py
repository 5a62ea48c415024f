"""Tests for error models and exact arithmetic."""

import pytest
from pydantic import ValidationError

from chronofields.core.temporal import (
    TEMPORAL_ERROR_CODES,
    ArithmeticOverflowError,
    ChronoField,
    ErrorDetail,
    InvalidConfigurationError,
    InvalidFieldValueError,
    ResolutionRejectedError,
    TemporalError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    ValueRange,
    get_error_description,
)
from chronofields.core.temporal.arithmetic import (
    INT_MAX,
    LONG_MAX,
    add_exact,
    multiply_exact,
    subtract_exact,
    to_int_exact,
    trunc_div,
)


class TestErrorDetail:
    """Tests for ErrorDetail."""

    def test_str(self) -> None:
        """Test display format."""
        detail = ErrorDetail(code="CHF-CFG-001", title="Invalid configuration", message="bad range")

        assert str(detail) == "[CHF-CFG-001] Invalid configuration - bad range"

    def test_code_pattern(self) -> None:
        """Test malformed codes are rejected."""
        with pytest.raises(ValidationError):
            ErrorDetail(code="BAD", title="x", message="y")

    def test_every_default_code_is_registered(self) -> None:
        """Test default codes of all error classes have descriptions."""
        for error_class in (
            TemporalError,
            InvalidConfigurationError,
            UnsupportedFieldError,
            UnsupportedUnitError,
            InvalidFieldValueError,
            ArithmeticOverflowError,
            ResolutionRejectedError,
        ):
            assert error_class.default_code in TEMPORAL_ERROR_CODES

        assert get_error_description("CHF-RES-002") == "Conflicting field values"
        assert get_error_description("CHF-XXX-999") is None


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Test all errors derive from TemporalError."""
        assert issubclass(ResolutionRejectedError, TemporalError)
        assert issubclass(ArithmeticOverflowError, ArithmeticError)

    def test_invalid_field_value_context(self) -> None:
        """Test the context carries field, value and range."""
        error = InvalidFieldValueError(
            "out of range",
            field=ChronoField.MONTH_OF_YEAR,
            value=13,
            valid_range=ValueRange.of(1, 12),
        )

        assert error.code == "CHF-VALUE-001"
        assert error.detail.context == {"field": "MonthOfYear", "value": 13, "valid_range": "1 - 12"}

    def test_unsupported_field_message(self) -> None:
        """Test the default message names the field."""
        error = UnsupportedFieldError(ChronoField.EPOCH_DAY)

        assert error.message == "Unsupported field: EpochDay"
        assert error.field_name == "EpochDay"

    def test_code_override(self) -> None:
        """Test explicit codes replace the default."""
        error = ResolutionRejectedError("conflict", code="CHF-RES-002")

        assert error.code == "CHF-RES-002"
        assert error.detail.title == "Resolution rejected"


class TestExactArithmetic:
    """Tests for 64-bit and 32-bit checked arithmetic."""

    def test_in_range(self) -> None:
        """Test ordinary results pass through."""
        assert add_exact(2, 3) == 5
        assert subtract_exact(2, 3) == -1
        assert multiply_exact(-4, 7) == -28
        assert to_int_exact(INT_MAX) == INT_MAX

    @pytest.mark.parametrize(
        "operation",
        [
            lambda: add_exact(LONG_MAX, 1),
            lambda: subtract_exact(-LONG_MAX, 2),
            lambda: multiply_exact(LONG_MAX, 2),
            lambda: to_int_exact(INT_MAX + 1),
        ],
    )
    def test_overflow(self, operation) -> None:
        """Test results outside the range raise."""
        with pytest.raises(ArithmeticOverflowError) as exc_info:
            operation()

        assert exc_info.value.code == "CHF-MATH-001"

    @pytest.mark.parametrize(("a", "b", "expected"), [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)])
    def test_trunc_div(self, a: int, b: int, expected: int) -> None:
        """Test division rounds toward zero."""
        assert trunc_div(a, b) == expected

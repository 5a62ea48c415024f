"""Tests for ValueRange."""

import pytest

from chronofields.core.temporal import (
    ChronoField,
    InvalidConfigurationError,
    InvalidFieldValueError,
    ValueRange,
)


class TestConstruction:
    """Tests for ValueRange.of."""

    def test_fixed_range(self) -> None:
        """Test two bounds give a fixed range."""
        value_range = ValueRange.of(1, 7)

        assert value_range.minimum == 1
        assert value_range.largest_minimum == 1
        assert value_range.smallest_maximum == 7
        assert value_range.maximum == 7
        assert value_range.is_fixed()

    def test_variable_maximum(self) -> None:
        """Test three bounds give a variable maximum."""
        value_range = ValueRange.of(1, 28, 31)

        assert value_range.minimum == 1
        assert value_range.smallest_maximum == 28
        assert value_range.maximum == 31
        assert not value_range.is_fixed()

    def test_variable_minimum_and_maximum(self) -> None:
        """Test four bounds."""
        value_range = ValueRange.of(0, 1, 52, 54)

        assert value_range.minimum == 0
        assert value_range.largest_minimum == 1
        assert value_range.smallest_maximum == 52
        assert value_range.maximum == 54

    def test_min_greater_than_max_rejected(self) -> None:
        """Test ValueRange.of(5, 1) fails."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ValueRange.of(5, 1)

        assert exc_info.value.code == "CHF-CFG-001"

    def test_unordered_maximum_rejected(self) -> None:
        """Test smallest maximum above largest maximum fails."""
        with pytest.raises(InvalidConfigurationError):
            ValueRange.of(1, 31, 28)

    def test_unordered_minimum_rejected(self) -> None:
        """Test smallest minimum above largest minimum fails."""
        with pytest.raises(InvalidConfigurationError):
            ValueRange.of(2, 1, 5, 6)

    def test_model_constructor_validates(self) -> None:
        """Test direct construction enforces the same ordering."""
        with pytest.raises(InvalidConfigurationError):
            ValueRange(min_smallest=3, min_largest=3, max_smallest=1, max_largest=1)

    def test_wrong_bound_count(self) -> None:
        """Test one or five bounds are a programming error."""
        with pytest.raises(TypeError):
            ValueRange.of(1)
        with pytest.raises(TypeError):
            ValueRange.of(1, 2, 3, 4, 5)

    def test_structural_equality(self) -> None:
        """Test ranges compare by value."""
        assert ValueRange.of(1, 28, 31) == ValueRange.of(1, 28, 31)
        assert ValueRange.of(1, 7) != ValueRange.of(1, 6)
        assert hash(ValueRange.of(1, 7)) == hash(ValueRange.of(1, 7))


class TestValidation:
    """Tests for value checks."""

    def test_is_valid_value_uses_outer_bounds(self) -> None:
        """Test validity spans minimum to maximum."""
        value_range = ValueRange.of(1, 28, 31)

        assert value_range.is_valid_value(1)
        assert value_range.is_valid_value(30)
        assert value_range.is_valid_value(31)
        assert not value_range.is_valid_value(0)
        assert not value_range.is_valid_value(32)

    def test_check_valid_value_returns_value(self) -> None:
        """Test a valid value is returned unchanged."""
        assert ValueRange.of(1, 7).check_valid_value(3) == 3

    def test_check_valid_value_error_carries_context(self) -> None:
        """Test the error names field, value and range."""
        with pytest.raises(InvalidFieldValueError) as exc_info:
            ValueRange.of(1, 7).check_valid_value(8, ChronoField.DAY_OF_WEEK)

        error = exc_info.value
        assert error.code == "CHF-VALUE-001"
        assert error.field_name == "DayOfWeek"
        assert error.value == 8
        assert error.valid_range == ValueRange.of(1, 7)
        assert "DayOfWeek" in error.message
        assert error.detail.context["valid_range"] == "1 - 7"

    def test_int_value_range(self) -> None:
        """Test 32-bit detection."""
        assert ValueRange.of(-(2**31), 2**31 - 1).is_int_value()
        assert not ValueRange.of(0, 2**31).is_int_value()

    def test_check_valid_int_value_rejects_long_range(self) -> None:
        """Test int checks fail on ranges wider than 32 bits."""
        wide = ValueRange.of(0, 2**40)

        assert wide.is_valid_value(5)
        assert not wide.is_valid_int_value(5)
        with pytest.raises(InvalidFieldValueError):
            wide.check_valid_int_value(5)


class TestFormatting:
    """Tests for string form."""

    @pytest.mark.parametrize(
        ("bounds", "expected"),
        [
            ((1, 7), "1 - 7"),
            ((1, 28, 31), "1 - 28/31"),
            ((0, 1, 52, 54), "0/1 - 52/54"),
        ],
    )
    def test_str(self, bounds: tuple[int, ...], expected: str) -> None:
        """Test ranges render like '1 - 28/31'."""
        assert str(ValueRange.of(*bounds)) == expected

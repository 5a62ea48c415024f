"""Tests for the unit and field catalogs."""

import pytest

from chronofields.core.temporal import (
    ChronoField,
    ChronoUnit,
    Duration,
    IsoDate,
    IsoField,
    IsoUnit,
    ValueRange,
)
from chronofields.core.temporal.units import SECONDS_PER_YEAR


class TestChronoUnit:
    """Tests for ChronoUnit."""

    def test_durations(self) -> None:
        """Test canonical durations."""
        assert ChronoUnit.NANOS.duration == Duration.of_nanos(1)
        assert ChronoUnit.HALF_DAYS.duration == Duration.of_seconds(43_200)
        assert ChronoUnit.DAYS.duration == Duration.of_seconds(86_400)
        assert ChronoUnit.WEEKS.duration == Duration.of_seconds(604_800)
        assert ChronoUnit.YEARS.duration == Duration.of_seconds(31_556_952)
        assert ChronoUnit.MONTHS.duration == Duration.of_seconds(31_556_952 // 12)

    def test_forever_is_max_duration(self) -> None:
        """Test FOREVER is the longest duration."""
        assert ChronoUnit.FOREVER.duration == Duration.of_seconds(2**63 - 1, 999_999_999)
        assert all(unit.duration <= ChronoUnit.FOREVER.duration for unit in ChronoUnit)

    def test_durations_increase_with_declaration_order(self) -> None:
        """Test units are declared from shortest to longest."""
        units = list(ChronoUnit)
        for shorter, longer in zip(units, units[1:]):
            assert shorter.duration < longer.duration

    @pytest.mark.parametrize("unit", [ChronoUnit.NANOS, ChronoUnit.SECONDS, ChronoUnit.HALF_DAYS])
    def test_time_based(self, unit: ChronoUnit) -> None:
        """Test units shorter than a day."""
        assert unit.is_time_based()
        assert not unit.is_date_based()
        assert not unit.is_duration_estimated()

    @pytest.mark.parametrize("unit", [ChronoUnit.DAYS, ChronoUnit.MONTHS, ChronoUnit.ERAS])
    def test_date_based(self, unit: ChronoUnit) -> None:
        """Test units from days to eras."""
        assert unit.is_date_based()
        assert not unit.is_time_based()
        assert unit.is_duration_estimated()

    def test_forever_is_neither(self) -> None:
        """Test FOREVER is estimated but neither date nor time based."""
        assert not ChronoUnit.FOREVER.is_date_based()
        assert not ChronoUnit.FOREVER.is_time_based()
        assert ChronoUnit.FOREVER.is_duration_estimated()

    def test_add_to_and_between_delegate(self) -> None:
        """Test units delegate arithmetic to the temporal."""
        date = IsoDate.of(2024, 1, 31)

        assert ChronoUnit.MONTHS.add_to(date, 1) == IsoDate.of(2024, 2, 29)
        assert ChronoUnit.WEEKS.between(date, IsoDate.of(2024, 3, 1)) == 4
        assert ChronoUnit.DAYS.is_supported_by(date)
        assert not ChronoUnit.HOURS.is_supported_by(date)

    def test_str(self) -> None:
        """Test display names."""
        assert str(ChronoUnit.HALF_DAYS) == "HalfDays"


class TestIsoUnit:
    """Tests for IsoUnit."""

    def test_durations(self) -> None:
        """Test estimated durations."""
        assert IsoUnit.WEEK_BASED_YEARS.duration == Duration.of_seconds(SECONDS_PER_YEAR)
        assert IsoUnit.QUARTER_YEARS.duration == Duration.of_seconds(SECONDS_PER_YEAR // 4)
        assert IsoUnit.QUARTER_YEARS.is_date_based()
        assert IsoUnit.QUARTER_YEARS.is_duration_estimated()
        assert not IsoUnit.WEEK_BASED_YEARS.is_time_based()

    def test_add_quarters(self) -> None:
        """Test quarters add as whole years plus months."""
        date = IsoDate.of(2023, 11, 30)

        assert IsoUnit.QUARTER_YEARS.add_to(date, 1) == IsoDate.of(2024, 2, 29)
        assert IsoUnit.QUARTER_YEARS.add_to(date, 5) == IsoDate.of(2025, 2, 28)
        assert IsoUnit.QUARTER_YEARS.add_to(date, -5) == IsoDate.of(2022, 8, 30)

    def test_quarters_between(self) -> None:
        """Test whole quarters between two dates."""
        start = IsoDate.of(2024, 1, 15)

        assert IsoUnit.QUARTER_YEARS.between(start, IsoDate.of(2024, 4, 14)) == 0
        assert IsoUnit.QUARTER_YEARS.between(start, IsoDate.of(2024, 4, 15)) == 1
        assert IsoUnit.QUARTER_YEARS.between(start, IsoDate.of(2023, 1, 15)) == -4

    def test_add_week_based_years_keeps_week(self) -> None:
        """Test adding week-based-years keeps week and day-of-week."""
        date = IsoDate.of(2008, 12, 29)  # 2009-W01-1
        moved = IsoUnit.WEEK_BASED_YEARS.add_to(date, 1)

        assert moved == IsoDate.of(2010, 1, 4)  # 2010-W01-1
        assert IsoUnit.WEEK_BASED_YEARS.between(date, moved) == 1

    def test_supported_by_dates(self) -> None:
        """Test IsoDate supports the ISO units."""
        date = IsoDate.of(2024, 1, 1)

        assert date.is_supported_unit(IsoUnit.QUARTER_YEARS)
        assert date.plus(2, IsoUnit.QUARTER_YEARS) == IsoDate.of(2024, 7, 1)
        assert date.until(IsoDate.of(2025, 1, 1), IsoUnit.QUARTER_YEARS) == 4


class TestChronoField:
    """Tests for ChronoField."""

    def test_units_and_ranges(self) -> None:
        """Test metadata of common fields."""
        assert ChronoField.DAY_OF_MONTH.base_unit is ChronoUnit.DAYS
        assert ChronoField.DAY_OF_MONTH.range_unit is ChronoUnit.MONTHS
        assert ChronoField.DAY_OF_MONTH.range() == ValueRange.of(1, 28, 31)
        assert ChronoField.DAY_OF_YEAR.range() == ValueRange.of(1, 365, 366)
        assert ChronoField.YEAR.range() == ValueRange.of(-999_999_999, 999_999_999)
        assert ChronoField.ALIGNED_WEEK_OF_MONTH.range() == ValueRange.of(1, 4, 5)
        assert ChronoField.YEAR_OF_ERA.range() == ValueRange.of(1, 999_999_999, 1_000_000_000)

    def test_date_and_time_partition(self) -> None:
        """Test every field is either date or time based, except the instant fields."""
        assert ChronoField.HOUR_OF_DAY.is_time_based()
        assert ChronoField.AMPM_OF_DAY.is_time_based()
        assert ChronoField.DAY_OF_WEEK.is_date_based()
        assert ChronoField.ERA.is_date_based()
        assert not ChronoField.INSTANT_SECONDS.is_date_based()
        assert not ChronoField.INSTANT_SECONDS.is_time_based()
        assert not ChronoField.OFFSET_SECONDS.is_date_based()

    def test_refined_range_comes_from_temporal(self) -> None:
        """Test range_refined_by asks the temporal."""
        assert ChronoField.DAY_OF_MONTH.range_refined_by(IsoDate.of(2023, 2, 1)) == ValueRange.of(1, 28)
        assert ChronoField.DAY_OF_MONTH.range_refined_by(IsoDate.of(2024, 2, 1)) == ValueRange.of(1, 29)

    def test_get_and_adjust_delegate(self) -> None:
        """Test intrinsic fields read and write through the temporal."""
        date = IsoDate.of(2024, 3, 15)

        assert ChronoField.DAY_OF_YEAR.get_from(date) == 75
        assert ChronoField.MONTH_OF_YEAR.adjust_into(date, 2) == IsoDate.of(2024, 2, 15)

    def test_resolve_is_noop(self) -> None:
        """Test intrinsic fields leave resolution to the chronology."""
        field_values = {ChronoField.YEAR: 2024}

        assert ChronoField.YEAR.resolve(field_values, None, None) is None
        assert field_values == {ChronoField.YEAR: 2024}

    def test_str(self) -> None:
        """Test display names."""
        assert str(ChronoField.ALIGNED_WEEK_OF_YEAR) == "AlignedWeekOfYear"


class TestIsoFieldMetadata:
    """Tests for IsoField metadata."""

    def test_units(self) -> None:
        """Test base and range units."""
        assert IsoField.QUARTER_OF_YEAR.base_unit is IsoUnit.QUARTER_YEARS
        assert IsoField.QUARTER_OF_YEAR.range_unit is ChronoUnit.YEARS
        assert IsoField.DAY_OF_QUARTER.range_unit is IsoUnit.QUARTER_YEARS
        assert IsoField.WEEK_OF_WEEK_BASED_YEAR.range_unit is IsoUnit.WEEK_BASED_YEARS
        assert IsoField.WEEK_BASED_YEAR.base_unit is IsoUnit.WEEK_BASED_YEARS
        assert IsoField.WEEK_BASED_YEAR.range_unit is ChronoUnit.FOREVER

    def test_nominal_ranges(self) -> None:
        """Test nominal ranges."""
        assert IsoField.DAY_OF_QUARTER.range() == ValueRange.of(1, 90, 92)
        assert IsoField.QUARTER_OF_YEAR.range() == ValueRange.of(1, 4)
        assert IsoField.WEEK_OF_WEEK_BASED_YEAR.range() == ValueRange.of(1, 52, 53)
        assert IsoField.WEEK_BASED_YEAR.range() == ChronoField.YEAR.range()

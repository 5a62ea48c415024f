"""Tests for temporal adjusters."""

import pytest

from chronofields.core.temporal import DayOfWeek, IsoDate, adjusters


class TestMonthAndYearBoundaries:
    """Tests for first/last day adjusters."""

    @pytest.mark.parametrize(
        ("adjuster", "source", "expected"),
        [
            (adjusters.first_day_of_month(), IsoDate.of(2024, 2, 29), IsoDate.of(2024, 2, 1)),
            (adjusters.last_day_of_month(), IsoDate.of(2023, 2, 10), IsoDate.of(2023, 2, 28)),
            (adjusters.last_day_of_month(), IsoDate.of(2024, 2, 10), IsoDate.of(2024, 2, 29)),
            (adjusters.first_day_of_next_month(), IsoDate.of(2024, 1, 31), IsoDate.of(2024, 2, 1)),
            (adjusters.first_day_of_year(), IsoDate.of(2024, 6, 15), IsoDate.of(2024, 1, 1)),
            (adjusters.last_day_of_year(), IsoDate.of(2024, 6, 15), IsoDate.of(2024, 12, 31)),
            (adjusters.first_day_of_next_year(), IsoDate.of(2024, 12, 31), IsoDate.of(2025, 1, 1)),
        ],
    )
    def test_boundaries(self, adjuster: adjusters.Adjuster, source: IsoDate, expected: IsoDate) -> None:
        """Test boundary adjusters."""
        assert source.with_adjuster(adjuster) == expected


class TestDayOfWeekInMonth:
    """Tests for ordinal day-of-week adjusters."""

    def test_last_friday(self) -> None:
        """Test the last Friday of February 2024."""
        assert IsoDate.of(2024, 2, 10).with_adjuster(adjusters.last_in_month(DayOfWeek.FRIDAY)) == IsoDate.of(
            2024, 2, 23
        )

    def test_first_tuesday_on_the_first(self) -> None:
        """Test the first day of the month can match."""
        assert IsoDate.of(2024, 10, 15).with_adjuster(adjusters.first_in_month(DayOfWeek.TUESDAY)) == IsoDate.of(
            2024, 10, 1
        )

    @pytest.mark.parametrize(
        ("ordinal", "day_of_week", "source", "expected"),
        [
            (2, DayOfWeek.MONDAY, IsoDate.of(2024, 9, 20), IsoDate.of(2024, 9, 9)),
            (0, DayOfWeek.MONDAY, IsoDate.of(2024, 9, 20), IsoDate.of(2024, 8, 26)),
            (5, DayOfWeek.MONDAY, IsoDate.of(2024, 2, 10), IsoDate.of(2024, 3, 4)),
            (-2, DayOfWeek.FRIDAY, IsoDate.of(2024, 2, 10), IsoDate.of(2024, 2, 16)),
        ],
    )
    def test_ordinals(self, ordinal: int, day_of_week: DayOfWeek, source: IsoDate, expected: IsoDate) -> None:
        """Test positive, zero, overflowing and negative ordinals."""
        assert source.with_adjuster(adjusters.day_of_week_in_month(ordinal, day_of_week)) == expected


class TestRelativeDayOfWeek:
    """Tests for next/previous adjusters, from Monday 2024-01-01."""

    MONDAY = IsoDate.of(2024, 1, 1)

    def test_next(self) -> None:
        """Test next skips the current day."""
        assert self.MONDAY.with_adjuster(adjusters.next_day_of_week(DayOfWeek.MONDAY)) == IsoDate.of(2024, 1, 8)
        assert self.MONDAY.with_adjuster(adjusters.next_day_of_week(DayOfWeek.WEDNESDAY)) == IsoDate.of(2024, 1, 3)

    def test_next_or_same(self) -> None:
        """Test next_or_same_day_of_week keeps a matching day."""
        assert self.MONDAY.with_adjuster(adjusters.next_or_same_day_of_week(DayOfWeek.MONDAY)) == self.MONDAY
        assert self.MONDAY.with_adjuster(adjusters.next_or_same_day_of_week("sunday")) == IsoDate.of(2024, 1, 7)

    def test_previous(self) -> None:
        """Test previous skips the current day."""
        assert self.MONDAY.with_adjuster(adjusters.previous_day_of_week(DayOfWeek.MONDAY)) == IsoDate.of(2023, 12, 25)
        assert self.MONDAY.with_adjuster(adjusters.previous_day_of_week(DayOfWeek.SUNDAY)) == IsoDate.of(2023, 12, 31)

    def test_previous_or_same(self) -> None:
        """Test previous_or_same_day_of_week keeps a matching day."""
        assert self.MONDAY.with_adjuster(adjusters.previous_or_same_day_of_week(DayOfWeek.MONDAY)) == self.MONDAY
        assert self.MONDAY.with_adjuster(adjusters.previous_or_same_day_of_week(DayOfWeek.TUESDAY)) == IsoDate.of(
            2023, 12, 26
        )


class TestDateOperator:
    """Tests for of_date_adjuster."""

    def test_wraps_function(self) -> None:
        """Test a plain function becomes an adjuster."""
        in_two_days = adjusters.of_date_adjuster(lambda d: d.plus_days(2))

        assert IsoDate.of(2024, 2, 28).with_adjuster(in_two_days) == IsoDate.of(2024, 3, 1)

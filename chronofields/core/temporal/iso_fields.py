"""
ISO-8601 composite fields and units.

Quarter fields:
- QUARTER_OF_YEAR: 1..4, derived from the month
- DAY_OF_QUARTER: 1..90/91/92, depending on quarter and leap year

Week-based fields (ISO-8601 week date):
- WEEK_BASED_YEAR: the year owning the week, may differ from YEAR near
  the start and end of a calendar year
- WEEK_OF_WEEK_BASED_YEAR: 1..52/53, weeks start on Monday and week 1
  is the week containing the first Thursday of the year

All fields require the ISO chronology.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .arithmetic import add_exact, multiply_exact, subtract_exact, trunc_div
from .chronology import ISO_CHRONOLOGY, chronology_of, ensure_iso, is_iso
from .errors import ResolutionRejectedError, UnsupportedFieldError
from .fields import ChronoField
from .models import DayOfWeek, Duration, ResolverStyle, ValueRange
from .units import SECONDS_PER_YEAR, ChronoUnit

if TYPE_CHECKING:
    from .accessor import Temporal, TemporalAccessor
    from .dates import IsoDate

# Days before the first day of each quarter, non-leap then leap
QUARTER_DAYS = (0, 90, 181, 273, 0, 91, 182, 274)


# =============================================================================
# Units
# =============================================================================


class IsoUnit(Enum):
    """Units that only make sense for the ISO calendar."""

    WEEK_BASED_YEARS = ("WeekBasedYears", Duration.of_seconds(SECONDS_PER_YEAR))
    QUARTER_YEARS = ("QuarterYears", Duration.of_seconds(SECONDS_PER_YEAR // 4))

    def __init__(self, display_name: str, duration: Duration) -> None:
        self.display_name = display_name
        self._duration = duration

    @property
    def duration(self) -> Duration:
        return self._duration

    def is_duration_estimated(self) -> bool:
        return True

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported(ChronoField.EPOCH_DAY)

    def add_to(self, temporal: Any, amount: int) -> Any:
        if self is IsoUnit.WEEK_BASED_YEARS:
            current = temporal.get(IsoField.WEEK_BASED_YEAR)
            return temporal.with_field(IsoField.WEEK_BASED_YEAR, add_exact(current, amount))
        # Remainder keeps the sign of the amount
        years = trunc_div(amount, 4)
        quarters = amount - years * 4
        return temporal.plus(years, ChronoUnit.YEARS).plus(quarters * 3, ChronoUnit.MONTHS)

    def between(self, start: Temporal, end: Temporal) -> int:
        if self is IsoUnit.WEEK_BASED_YEARS:
            return subtract_exact(
                end.get_long(IsoField.WEEK_BASED_YEAR),
                start.get_long(IsoField.WEEK_BASED_YEAR),
            )
        return trunc_div(start.until(end, ChronoUnit.MONTHS), 3)

    def __str__(self) -> str:
        return self.display_name


# =============================================================================
# Fields
# =============================================================================


class IsoField(Enum):
    """Quarter and ISO week-date fields."""

    DAY_OF_QUARTER = ("DayOfQuarter", ChronoUnit.DAYS, IsoUnit.QUARTER_YEARS, ValueRange.of(1, 90, 92))
    QUARTER_OF_YEAR = ("QuarterOfYear", IsoUnit.QUARTER_YEARS, ChronoUnit.YEARS, ValueRange.of(1, 4))
    WEEK_OF_WEEK_BASED_YEAR = (
        "WeekOfWeekBasedYear",
        ChronoUnit.WEEKS,
        IsoUnit.WEEK_BASED_YEARS,
        ValueRange.of(1, 52, 53),
    )
    WEEK_BASED_YEAR = (
        "WeekBasedYear",
        IsoUnit.WEEK_BASED_YEARS,
        ChronoUnit.FOREVER,
        ChronoField.YEAR.range(),
    )

    def __init__(
        self,
        display_name: str,
        base_unit: Any,
        range_unit: Any,
        value_range: ValueRange,
    ) -> None:
        self.display_name = display_name
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        if self is IsoField.DAY_OF_QUARTER:
            required = (ChronoField.DAY_OF_YEAR, ChronoField.MONTH_OF_YEAR, ChronoField.YEAR)
        elif self is IsoField.QUARTER_OF_YEAR:
            required = (ChronoField.MONTH_OF_YEAR,)
        else:
            required = (ChronoField.EPOCH_DAY,)
        return all(temporal.is_supported(field) for field in required) and is_iso(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        if self is IsoField.DAY_OF_QUARTER:
            self._check_supported(temporal)
            quarter = temporal.get_long(IsoField.QUARTER_OF_YEAR)
            if quarter == 1:
                year = temporal.get_long(ChronoField.YEAR)
                return ValueRange.of(1, 91 if ISO_CHRONOLOGY.is_leap_year(year) else 90)
            if quarter == 2:
                return ValueRange.of(1, 91)
            if quarter in (3, 4):
                return ValueRange.of(1, 92)
            return self.range()
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            self._check_supported(temporal)
            date = _to_date(temporal)
            return ValueRange.of(1, week_range(get_week_based_year(date)))
        return self.range()

    def get_from(self, temporal: TemporalAccessor) -> int:
        self._check_supported(temporal)
        if self is IsoField.DAY_OF_QUARTER:
            day_of_year = temporal.get(ChronoField.DAY_OF_YEAR)
            month = temporal.get(ChronoField.MONTH_OF_YEAR)
            year = temporal.get_long(ChronoField.YEAR)
            leap_offset = 4 if ISO_CHRONOLOGY.is_leap_year(year) else 0
            return day_of_year - QUARTER_DAYS[(month - 1) // 3 + leap_offset]
        if self is IsoField.QUARTER_OF_YEAR:
            return (temporal.get_long(ChronoField.MONTH_OF_YEAR) + 2) // 3
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return get_week(_to_date(temporal))
        return get_week_based_year(_to_date(temporal))

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        current = self.get_from(temporal)
        if self is IsoField.DAY_OF_QUARTER:
            self.range().check_valid_value(new_value, self)
            day_of_year = temporal.get_long(ChronoField.DAY_OF_YEAR)
            return temporal.with_field(ChronoField.DAY_OF_YEAR, day_of_year + (new_value - current))
        if self is IsoField.QUARTER_OF_YEAR:
            self.range().check_valid_value(new_value, self)
            month = temporal.get_long(ChronoField.MONTH_OF_YEAR)
            return temporal.with_field(ChronoField.MONTH_OF_YEAR, month + (new_value - current) * 3)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            self.range().check_valid_value(new_value, self)
            return temporal.plus(subtract_exact(new_value, current), ChronoUnit.WEEKS)
        return self._adjust_week_based_year(temporal, new_value)

    def _adjust_week_based_year(self, temporal: Any, new_value: int) -> Any:
        new_year = self.range().check_valid_int_value(new_value, self)
        date = _to_date(temporal)
        day_of_week = date.day_of_week.value
        week = get_week(date)
        if week == 53 and week_range(new_year) == 52:
            week = 52
        # January 4th is always in week 1
        anchor = ISO_CHRONOLOGY.date(new_year, 1, 4)
        days = (day_of_week - anchor.day_of_week.value) + (week - 1) * 7
        resolved = anchor.plus_days(days)
        return temporal.with_field(ChronoField.EPOCH_DAY, resolved.to_epoch_day())

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor | None,
        style: ResolverStyle,
    ) -> IsoDate | None:
        if self is IsoField.DAY_OF_QUARTER:
            return _resolve_day_of_quarter(field_values, partial_temporal, style)
        if self is IsoField.WEEK_OF_WEEK_BASED_YEAR:
            return _resolve_week_of_week_based_year(field_values, partial_temporal, style)
        return None

    def _check_supported(self, temporal: TemporalAccessor) -> None:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(self)

    def __str__(self) -> str:
        return self.display_name


# =============================================================================
# ISO week-date helpers
# =============================================================================


def week_range(week_based_year: int) -> int:
    """Number of weeks (52 or 53) in an ISO week-based-year."""
    first = ISO_CHRONOLOGY.first_day_of_year(week_based_year)
    if first is DayOfWeek.THURSDAY:
        return 53
    if first is DayOfWeek.WEDNESDAY and ISO_CHRONOLOGY.is_leap_year(week_based_year):
        return 53
    return 52


def get_week(date: IsoDate) -> int:
    """ISO week-of-week-based-year of a date."""
    dow0 = date.day_of_week.value - 1
    doy0 = date.day_of_year - 1
    doy_thursday0 = doy0 + (3 - dow0)
    aligned_week = doy_thursday0 // 7
    first_monday_doy0 = doy_thursday0 - aligned_week * 7 - 3
    if first_monday_doy0 < -3:
        first_monday_doy0 += 7
    if doy0 < first_monday_doy0:
        return week_range(date.year - 1)
    week = (doy0 - first_monday_doy0) // 7 + 1
    if week == 53:
        long_year = first_monday_doy0 == -3 or (first_monday_doy0 == -2 and date.is_leap_year())
        if not long_year:
            week = 1
    return week


def get_week_based_year(date: IsoDate) -> int:
    """ISO week-based-year of a date."""
    year = date.year
    day_of_year = date.day_of_year
    if day_of_year <= 3:
        dow0 = date.day_of_week.value - 1
        if day_of_year - dow0 < -2:
            year -= 1
    elif day_of_year >= 363:
        dow0 = date.day_of_week.value - 1
        day_of_year = day_of_year - 363 - (1 if date.is_leap_year() else 0)
        if day_of_year - dow0 >= 0:
            year += 1
    return year


def _to_date(temporal: TemporalAccessor) -> IsoDate:
    return chronology_of(temporal).date_from(temporal)


# =============================================================================
# Resolution
# =============================================================================


def _resolve_day_of_quarter(
    field_values: dict[Any, int],
    partial_temporal: TemporalAccessor | None,
    style: ResolverStyle,
) -> IsoDate | None:
    year_value = field_values.get(ChronoField.YEAR)
    quarter = field_values.get(IsoField.QUARTER_OF_YEAR)
    if year_value is None or quarter is None:
        return None
    ensure_iso(partial_temporal)
    year = ChronoField.YEAR.check_valid_int_value(year_value)
    day_of_quarter = field_values[IsoField.DAY_OF_QUARTER]

    if style is ResolverStyle.LENIENT:
        date = ISO_CHRONOLOGY.date(year, 1, 1).plus_months(multiply_exact(subtract_exact(quarter, 1), 3))
        date = date.plus_days(subtract_exact(day_of_quarter, 1))
    else:
        quarter = IsoField.QUARTER_OF_YEAR.range().check_valid_int_value(quarter, IsoField.QUARTER_OF_YEAR)
        date = ISO_CHRONOLOGY.date(year, (quarter - 1) * 3 + 1, 1)
        if day_of_quarter < 1 or day_of_quarter > 90:
            if style is ResolverStyle.STRICT:
                _check_strict(IsoField.DAY_OF_QUARTER, day_of_quarter, IsoField.DAY_OF_QUARTER.range_refined_by(date))
            else:
                IsoField.DAY_OF_QUARTER.range().check_valid_value(day_of_quarter, IsoField.DAY_OF_QUARTER)
        date = date.plus_days(day_of_quarter - 1)

    del field_values[IsoField.DAY_OF_QUARTER]
    del field_values[ChronoField.YEAR]
    del field_values[IsoField.QUARTER_OF_YEAR]
    return date


def _resolve_week_of_week_based_year(
    field_values: dict[Any, int],
    partial_temporal: TemporalAccessor | None,
    style: ResolverStyle,
) -> IsoDate | None:
    year_value = field_values.get(IsoField.WEEK_BASED_YEAR)
    day_of_week = field_values.get(ChronoField.DAY_OF_WEEK)
    if year_value is None or day_of_week is None:
        return None
    ensure_iso(partial_temporal)
    week_based_year = IsoField.WEEK_BASED_YEAR.range().check_valid_int_value(year_value, IsoField.WEEK_BASED_YEAR)
    week = field_values[IsoField.WEEK_OF_WEEK_BASED_YEAR]
    date = ISO_CHRONOLOGY.date(week_based_year, 1, 4)

    if style is ResolverStyle.LENIENT:
        # Day-of-week outside 1..7 spills into neighbouring weeks
        date = date.plus_weeks((day_of_week - 1) // 7)
        day_of_week = (day_of_week - 1) % 7 + 1
        date = date.plus_weeks(subtract_exact(week, 1))
    else:
        day_of_week = ChronoField.DAY_OF_WEEK.check_valid_int_value(day_of_week)
        if week < 1 or week > 52:
            if style is ResolverStyle.STRICT:
                _check_strict(
                    IsoField.WEEK_OF_WEEK_BASED_YEAR,
                    week,
                    IsoField.WEEK_OF_WEEK_BASED_YEAR.range_refined_by(date),
                )
            else:
                IsoField.WEEK_OF_WEEK_BASED_YEAR.range().check_valid_value(week, IsoField.WEEK_OF_WEEK_BASED_YEAR)
        date = date.plus_weeks(week - 1)
    date = date.with_field(ChronoField.DAY_OF_WEEK, day_of_week)

    del field_values[IsoField.WEEK_OF_WEEK_BASED_YEAR]
    del field_values[IsoField.WEEK_BASED_YEAR]
    del field_values[ChronoField.DAY_OF_WEEK]
    return date


def _check_strict(field: IsoField, value: int, refined: ValueRange) -> None:
    if not refined.is_valid_value(value):
        raise ResolutionRejectedError(
            f"Strict mode rejected resolved date as {field} {value} is outside {refined}",
            field=field,
            value=value,
            valid_range=refined,
        )

"""
Localized week definitions.

A WeekFields is defined by two parameters:
- first_day_of_week: the day a week starts on (Monday in ISO, Sunday in the US)
- minimal_days_in_first_week: how many days of a new month/year the first
  week must hold to count as week 1 (4 in ISO, 1 in the US)

From these it derives five localized fields that answer the usual week
questions: day-of-week, week-of-month, week-of-year, week-of-week-based-year
and week-based-year.

Worked example for WeekFields(MONDAY, 4), where 2008-12-31 is a Wednesday:

    Date        DayOfWeek  WeekOfYear  WeekOfWeekBasedYear  WeekBasedYear
    2008-12-28  7          52          52                   2008
    2008-12-29  1          53          1                    2009
    2009-01-01  4          1           1                    2009
    2009-01-04  7          1           1                    2009
    2009-01-05  1          2           2                    2009

Weeks that start before the first complete week of a month or year are
week 0. Week-of-year may therefore be 0 or 53 where week-of-week-based-year
is always 1..53.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from .arithmetic import add_exact, multiply_exact, subtract_exact, to_int_exact
from .chronology import chronology_of, put_field_value
from .errors import ResolutionRejectedError, UnsupportedFieldError
from .fields import ChronoField
from .iso_fields import IsoUnit
from .models import DayOfWeek, ResolverStyle, ValueRange
from .registry import get_registry, make_key, register_well_known
from .units import ChronoUnit

if TYPE_CHECKING:
    from .accessor import TemporalAccessor
    from .chronology import IsoChronology
    from .dates import IsoDate
    from .registry import WeekFieldsRegistry

DAY_OF_WEEK_RANGE = ValueRange.of(1, 7)
WEEK_OF_MONTH_RANGE = ValueRange.of(0, 1, 4, 6)
WEEK_OF_YEAR_RANGE = ValueRange.of(0, 1, 52, 54)
WEEK_OF_WEEK_BASED_YEAR_RANGE = ValueRange.of(1, 52, 53)


# =============================================================================
# Week engine
# =============================================================================


class ComputedDayOfField:
    """
    A localized field computed from a week definition.

    The field kind is selected by its range unit:
    - WEEKS: localized day-of-week
    - MONTHS: week-of-month
    - YEARS: week-of-year
    - WEEK_BASED_YEARS: week-of-week-based-year
    - FOREVER: week-based-year

    Instances are owned by one WeekFields and compare by identity.
    """

    def __init__(
        self,
        name: str,
        week_def: WeekFields,
        base_unit: Any,
        range_unit: Any,
        value_range: ValueRange,
    ) -> None:
        self.name = name
        self.week_def = week_def
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range
        self._getter: Callable[[TemporalAccessor], int] = {
            ChronoUnit.WEEKS: self._localized_day_of_week,
            ChronoUnit.MONTHS: self._localized_week_of_month,
            ChronoUnit.YEARS: self._localized_week_of_year,
            IsoUnit.WEEK_BASED_YEARS: self._localized_week_of_week_based_year,
            ChronoUnit.FOREVER: self._localized_week_based_year,
        }[range_unit]

    # -------------------------------------------------------------------------
    # Week arithmetic
    # -------------------------------------------------------------------------

    def start_of_week_offset(self, day: int, day_of_week: int) -> int:
        """
        Offset of the first day of week 1 relative to day 1 of the period.

        Args:
            day: Day-of-month or day-of-year of the temporal
            day_of_week: Localized day-of-week of that same day

        Returns:
            Offset in -6..6; negative when week 1 started in the previous
            period, positive when the days before it form week 0
        """
        week_start = (day - day_of_week) % 7
        offset = -week_start
        if week_start + 1 > self.week_def.minimal_days_in_first_week:
            # The first partial week is too short to be week 1
            offset = 7 - week_start
        return offset

    @staticmethod
    def compute_week(offset: int, day: int) -> int:
        return (7 + offset + (day - 1)) // 7

    def _localized_day_of_week_of(self, iso_day_of_week: int) -> int:
        return (iso_day_of_week - self.week_def.first_day_of_week.value) % 7 + 1

    def _localized_day_of_week(self, temporal: TemporalAccessor) -> int:
        return self._localized_day_of_week_of(temporal.get(ChronoField.DAY_OF_WEEK))

    def _localized_week_of_month(self, temporal: TemporalAccessor) -> int:
        day_of_week = self._localized_day_of_week(temporal)
        day_of_month = temporal.get(ChronoField.DAY_OF_MONTH)
        offset = self.start_of_week_offset(day_of_month, day_of_week)
        return self.compute_week(offset, day_of_month)

    def _localized_week_of_year(self, temporal: TemporalAccessor) -> int:
        day_of_week = self._localized_day_of_week(temporal)
        day_of_year = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(day_of_year, day_of_week)
        return self.compute_week(offset, day_of_year)

    def _new_year_week(self, temporal: TemporalAccessor, offset: int) -> int:
        # Week in which the next week-based-year starts
        year_length = temporal.range(ChronoField.DAY_OF_YEAR).maximum
        return self.compute_week(offset, year_length + self.week_def.minimal_days_in_first_week)

    def _localized_week_based_year(self, temporal: TemporalAccessor) -> int:
        day_of_week = self._localized_day_of_week(temporal)
        year = temporal.get(ChronoField.YEAR)
        day_of_year = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(day_of_year, day_of_week)
        week = self.compute_week(offset, day_of_year)
        if week == 0:
            return year - 1
        if week >= self._new_year_week(temporal, offset):
            return year + 1
        return year

    def _localized_week_of_week_based_year(self, temporal: TemporalAccessor) -> int:
        day_of_week = self._localized_day_of_week(temporal)
        day_of_year = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(day_of_year, day_of_week)
        week = self.compute_week(offset, day_of_year)
        if week == 0:
            # Same week as December 31st of the previous year
            previous_length, previous_offset = self._previous_year_offset(temporal, day_of_week, day_of_year)
            return self.compute_week(previous_offset, previous_length)
        if week > 50:
            new_year_week = self._new_year_week(temporal, offset)
            if week >= new_year_week:
                week = week - new_year_week + 1
        return week

    def _previous_year_offset(self, temporal: TemporalAccessor, day_of_week: int, day_of_year: int) -> tuple[int, int]:
        """Length and week-1 offset of the year before the temporal's year."""
        year = temporal.get(ChronoField.YEAR)
        length = chronology_of(temporal).length_of_year(year - 1)
        # Localized day-of-week of December 31st of that year
        last_day_of_week = (day_of_week - 1 - day_of_year) % 7 + 1
        return length, self.start_of_week_offset(length, last_day_of_week)

    def _next_year_offset(self, temporal: TemporalAccessor, day_of_week: int, day_of_year: int) -> tuple[int, int]:
        """Length and week-1 offset of the year after the temporal's year."""
        year = temporal.get(ChronoField.YEAR)
        chronology = chronology_of(temporal)
        remaining = chronology.length_of_year(year) - day_of_year
        # Localized day-of-week of January 1st of that year
        first_day_of_week = (day_of_week + remaining) % 7 + 1
        return chronology.length_of_year(year + 1), self.start_of_week_offset(1, first_day_of_week)

    def of_week_based_year(
        self,
        chronology: IsoChronology,
        year_of_week_based_year: int,
        week_of_week_based_year: int,
        day_of_week: int,
    ) -> IsoDate:
        """
        Date for a localized week date, clamping the week to the last one.

        Args:
            chronology: Calendar used to build the date
            year_of_week_based_year: Week-based-year
            week_of_week_based_year: Week, clamped to the weeks of that year
            day_of_week: Localized day-of-week 1..7
        """
        start = chronology.date(year_of_week_based_year, 1, 1)
        offset = self.start_of_week_offset(1, self._localized_day_of_week(start))
        year_length = chronology.length_of_year(year_of_week_based_year)
        new_year_week = self.compute_week(offset, year_length + self.week_def.minimal_days_in_first_week)
        week = min(week_of_week_based_year, new_year_week - 1)
        days = -offset + (day_of_week - 1) + (week - 1) * 7
        return start.plus_days(days)

    # -------------------------------------------------------------------------
    # Field protocol
    # -------------------------------------------------------------------------

    def range(self) -> ValueRange:
        return self._range

    def is_date_based(self) -> bool:
        return True

    def is_time_based(self) -> bool:
        return False

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        if not temporal.is_supported(ChronoField.DAY_OF_WEEK):
            return False
        if self.range_unit is ChronoUnit.WEEKS:
            return True
        if self.range_unit is ChronoUnit.MONTHS:
            return temporal.is_supported(ChronoField.DAY_OF_MONTH)
        if self.range_unit is ChronoUnit.YEARS or self.range_unit is IsoUnit.WEEK_BASED_YEARS:
            return temporal.is_supported(ChronoField.DAY_OF_YEAR)
        return temporal.is_supported(ChronoField.YEAR)

    def get_from(self, temporal: TemporalAccessor) -> int:
        if not self.is_supported_by(temporal):
            raise UnsupportedFieldError(self)
        return self._getter(temporal)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        if self.range_unit is ChronoUnit.WEEKS:
            return self._range
        if self.range_unit is ChronoUnit.MONTHS:
            return self._range_by_week(temporal, ChronoField.DAY_OF_MONTH)
        if self.range_unit is ChronoUnit.YEARS:
            return self._range_by_week(temporal, ChronoField.DAY_OF_YEAR)
        if self.range_unit is IsoUnit.WEEK_BASED_YEARS:
            return self._range_week_of_week_based_year(temporal)
        return ChronoField.YEAR.range()

    def _range_by_week(self, temporal: TemporalAccessor, field: ChronoField) -> ValueRange:
        day_of_week = self._localized_day_of_week(temporal)
        offset = self.start_of_week_offset(temporal.get(field), day_of_week)
        field_range = temporal.range(field)
        return ValueRange.of(
            self.compute_week(offset, field_range.minimum),
            self.compute_week(offset, field_range.maximum),
        )

    def _range_week_of_week_based_year(self, temporal: TemporalAccessor) -> ValueRange:
        if not temporal.is_supported(ChronoField.DAY_OF_YEAR):
            return WEEK_OF_YEAR_RANGE
        day_of_week = self._localized_day_of_week(temporal)
        day_of_year = temporal.get(ChronoField.DAY_OF_YEAR)
        offset = self.start_of_week_offset(day_of_year, day_of_week)
        week = self.compute_week(offset, day_of_year)
        minimal_days = self.week_def.minimal_days_in_first_week
        if week == 0:
            # Weeks of the previous week-based-year
            length, offset = self._previous_year_offset(temporal, day_of_week, day_of_year)
            return ValueRange.of(1, self.compute_week(offset, length + minimal_days) - 1)
        year_length = temporal.range(ChronoField.DAY_OF_YEAR).maximum
        new_year_week = self.compute_week(offset, year_length + minimal_days)
        if week >= new_year_week:
            # Weeks of the following week-based-year
            length, offset = self._next_year_offset(temporal, day_of_week, day_of_year)
            return ValueRange.of(1, self.compute_week(offset, length + minimal_days) - 1)
        return ValueRange.of(1, new_year_week - 1)

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        """
        Copy of the temporal with this field set to the new value.

        Week-based-year keeps the localized week and day-of-week (clamping a
        missing last week); every other field moves by whole base units.
        """
        new_value = self._range.check_valid_int_value(new_value, self)
        current = temporal.get(self)
        if new_value == current:
            return temporal
        if self.range_unit is ChronoUnit.FOREVER:
            week_def = self.week_def
            date = self.of_week_based_year(
                chronology_of(temporal),
                new_value,
                temporal.get(week_def.week_of_week_based_year),
                temporal.get(week_def.day_of_week),
            )
            return temporal.with_field(ChronoField.EPOCH_DAY, date.get_long(ChronoField.EPOCH_DAY))
        return temporal.plus(new_value - current, self.base_unit)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor | None,
        style: ResolverStyle,
    ) -> IsoDate | None:
        """
        Combine localized fields with intrinsic ones into a date.

        The localized day-of-week is first rewritten as the ISO DAY_OF_WEEK.
        A date is then built from one of:
        - YEAR + MONTH_OF_YEAR + week-of-month + DAY_OF_WEEK
        - YEAR + week-of-year + DAY_OF_WEEK
        - week-based-year + week-of-week-based-year + DAY_OF_WEEK

        Returns None when the map holds no complete combination yet.
        """
        value = to_int_exact(field_values[self])
        if self.range_unit is ChronoUnit.WEEKS:
            # Normalize the localized day-of-week to the ISO one
            checked = self._range.check_valid_value(value, self)
            start = self.week_def.first_day_of_week.value
            iso_day_of_week = (start - 1 + (checked - 1)) % 7 + 1
            del field_values[self]
            put_field_value(field_values, ChronoField.DAY_OF_WEEK, iso_day_of_week)
            return None

        if ChronoField.DAY_OF_WEEK not in field_values:
            return None
        iso_day_of_week = ChronoField.DAY_OF_WEEK.check_valid_int_value(field_values[ChronoField.DAY_OF_WEEK])
        day_of_week = self._localized_day_of_week_of(iso_day_of_week)
        chronology = chronology_of(partial_temporal)

        if ChronoField.YEAR in field_values:
            year = ChronoField.YEAR.check_valid_int_value(field_values[ChronoField.YEAR])
            if self.range_unit is ChronoUnit.MONTHS and ChronoField.MONTH_OF_YEAR in field_values:
                month = field_values[ChronoField.MONTH_OF_YEAR]
                return self._resolve_week_of_month(field_values, chronology, year, month, value, day_of_week, style)
            if self.range_unit is ChronoUnit.YEARS:
                return self._resolve_week_of_year(field_values, chronology, year, value, day_of_week, style)
        elif (
            self.range_unit is IsoUnit.WEEK_BASED_YEARS or self.range_unit is ChronoUnit.FOREVER
        ) and (
            self.week_def.week_based_year in field_values
            and self.week_def.week_of_week_based_year in field_values
        ):
            return self._resolve_week_based_year(field_values, chronology, day_of_week, style)
        return None

    def _resolve_week_of_month(
        self,
        field_values: dict[Any, int],
        chronology: IsoChronology,
        year: int,
        month: int,
        week_of_month: int,
        day_of_week: int,
        style: ResolverStyle,
    ) -> IsoDate:
        if style is ResolverStyle.LENIENT:
            date = chronology.date(year, 1, 1).plus_months(subtract_exact(month, 1))
            weeks = subtract_exact(week_of_month, self._localized_week_of_month(date))
            days = day_of_week - self._localized_day_of_week(date)
            date = date.plus_days(add_exact(multiply_exact(weeks, 7), days))
        else:
            month = ChronoField.MONTH_OF_YEAR.check_valid_int_value(month)
            date = chronology.date(year, month, 1)
            week_of_month = self._range.check_valid_int_value(week_of_month, self)
            weeks = week_of_month - self._localized_week_of_month(date)
            days = day_of_week - self._localized_day_of_week(date)
            date = date.plus_days(weeks * 7 + days)
            if style is ResolverStyle.STRICT and date.get_long(ChronoField.MONTH_OF_YEAR) != month:
                raise ResolutionRejectedError(
                    "Strict mode rejected resolved date as it is in a different month",
                    field=self,
                    value=week_of_month,
                )
        del field_values[self]
        del field_values[ChronoField.YEAR]
        del field_values[ChronoField.MONTH_OF_YEAR]
        del field_values[ChronoField.DAY_OF_WEEK]
        return date

    def _resolve_week_of_year(
        self,
        field_values: dict[Any, int],
        chronology: IsoChronology,
        year: int,
        week_of_year: int,
        day_of_week: int,
        style: ResolverStyle,
    ) -> IsoDate:
        date = chronology.date(year, 1, 1)
        if style is ResolverStyle.LENIENT:
            weeks = subtract_exact(week_of_year, self._localized_week_of_year(date))
            days = day_of_week - self._localized_day_of_week(date)
            date = date.plus_days(add_exact(multiply_exact(weeks, 7), days))
        else:
            week_of_year = self._range.check_valid_int_value(week_of_year, self)
            weeks = week_of_year - self._localized_week_of_year(date)
            days = day_of_week - self._localized_day_of_week(date)
            date = date.plus_days(weeks * 7 + days)
            if style is ResolverStyle.STRICT and date.get_long(ChronoField.YEAR) != year:
                raise ResolutionRejectedError(
                    "Strict mode rejected resolved date as it is in a different year",
                    field=self,
                    value=week_of_year,
                )
        del field_values[self]
        del field_values[ChronoField.YEAR]
        del field_values[ChronoField.DAY_OF_WEEK]
        return date

    def _resolve_week_based_year(
        self,
        field_values: dict[Any, int],
        chronology: IsoChronology,
        day_of_week: int,
        style: ResolverStyle,
    ) -> IsoDate:
        week_def = self.week_def
        year_field = week_def.week_based_year
        week_field = week_def.week_of_week_based_year
        year = year_field.range().check_valid_int_value(field_values[year_field], year_field)
        week = field_values[week_field]

        start = self.of_week_based_year(chronology, year, 1, day_of_week)
        if style is ResolverStyle.LENIENT:
            date = start.plus_weeks(subtract_exact(week, 1))
        else:
            # Nominal check only; smart lets week 53 roll into the next year
            week = week_field.range().check_valid_int_value(week, week_field)
            date = start.plus_weeks(week - 1)
            if style is ResolverStyle.STRICT and date.get_long(year_field) != year:
                raise ResolutionRejectedError(
                    "Strict mode rejected resolved date as it is in a different week-based-year",
                    field=week_field,
                    value=week,
                    valid_range=week_field.range_refined_by(start),
                )
        # self is one of the two week-based fields
        field_values.pop(self, None)
        field_values.pop(year_field, None)
        field_values.pop(week_field, None)
        del field_values[ChronoField.DAY_OF_WEEK]
        return date

    # -------------------------------------------------------------------------
    # Object protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name}[{self.week_def!r}]"

    def __repr__(self) -> str:
        return str(self)


# =============================================================================
# Week definition
# =============================================================================


class WeekFields:
    """
    Week definition and its five localized fields.

    Use WeekFields.of() to obtain cached instances; the constructor is meant
    for the registry.

    Usage:
        us_weeks = WeekFields.of(DayOfWeek.SUNDAY, 1)
        week = IsoDate.of(2009, 1, 1).get(us_weeks.week_of_year)
    """

    ISO: ClassVar[WeekFields]
    SUNDAY_START: ClassVar[WeekFields]
    WEEK_BASED_YEARS: ClassVar[IsoUnit] = IsoUnit.WEEK_BASED_YEARS

    def __init__(self, first_day_of_week: DayOfWeek, minimal_days_in_first_week: int) -> None:
        first, minimal_days = make_key(first_day_of_week, minimal_days_in_first_week)
        self._first_day_of_week = first
        self._minimal_days = minimal_days
        self._day_of_week = ComputedDayOfField(
            "DayOfWeek", self, ChronoUnit.DAYS, ChronoUnit.WEEKS, DAY_OF_WEEK_RANGE
        )
        self._week_of_month = ComputedDayOfField(
            "WeekOfMonth", self, ChronoUnit.WEEKS, ChronoUnit.MONTHS, WEEK_OF_MONTH_RANGE
        )
        self._week_of_year = ComputedDayOfField(
            "WeekOfYear", self, ChronoUnit.WEEKS, ChronoUnit.YEARS, WEEK_OF_YEAR_RANGE
        )
        self._week_of_week_based_year = ComputedDayOfField(
            "WeekOfWeekBasedYear",
            self,
            ChronoUnit.WEEKS,
            IsoUnit.WEEK_BASED_YEARS,
            WEEK_OF_WEEK_BASED_YEAR_RANGE,
        )
        self._week_based_year = ComputedDayOfField(
            "WeekBasedYear", self, IsoUnit.WEEK_BASED_YEARS, ChronoUnit.FOREVER, ChronoField.YEAR.range()
        )

    @classmethod
    def of(
        cls,
        first_day_of_week: DayOfWeek | int | str,
        minimal_days_in_first_week: int,
        *,
        registry: WeekFieldsRegistry | None = None,
    ) -> WeekFields:
        """
        Get the cached week definition for the given parameters.

        Raises:
            InvalidConfigurationError: If minimal days are outside 1..7
        """
        if registry is None:
            registry = get_registry()
        return registry.lookup(first_day_of_week, minimal_days_in_first_week)

    @classmethod
    def default(cls) -> WeekFields:
        """Week definition configured in the active settings."""
        from ..settings import get_settings

        return get_settings().week_fields()

    @property
    def first_day_of_week(self) -> DayOfWeek:
        return self._first_day_of_week

    @property
    def minimal_days_in_first_week(self) -> int:
        return self._minimal_days

    @property
    def day_of_week(self) -> ComputedDayOfField:
        """Localized day-of-week, 1 = first_day_of_week."""
        return self._day_of_week

    @property
    def week_of_month(self) -> ComputedDayOfField:
        return self._week_of_month

    @property
    def week_of_year(self) -> ComputedDayOfField:
        return self._week_of_year

    @property
    def week_of_week_based_year(self) -> ComputedDayOfField:
        return self._week_of_week_based_year

    @property
    def week_based_year(self) -> ComputedDayOfField:
        return self._week_based_year

    def fields(self) -> dict[str, ComputedDayOfField]:
        """The localized fields keyed by display name."""
        return {
            field.name: field
            for field in (
                self._day_of_week,
                self._week_of_month,
                self._week_of_year,
                self._week_of_week_based_year,
                self._week_based_year,
            )
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeekFields):
            return NotImplemented
        return (
            self._first_day_of_week is other._first_day_of_week
            and self._minimal_days == other._minimal_days
        )

    def __hash__(self) -> int:
        return (self._first_day_of_week.value - 1) * 7 + self._minimal_days

    def __repr__(self) -> str:
        return f"WeekFields[{self._first_day_of_week.name},{self._minimal_days}]"


WeekFields.ISO = register_well_known(WeekFields(DayOfWeek.MONDAY, 4))
WeekFields.SUNDAY_START = register_well_known(WeekFields(DayOfWeek.SUNDAY, 1))


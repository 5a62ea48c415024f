"""
Standard set of intrinsic date/time fields.

Intrinsic fields are read and written by the temporal itself; the field
object only carries the metadata (units, nominal range) and delegates.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .models import ValueRange
from .units import ChronoUnit

if TYPE_CHECKING:
    from .accessor import TemporalAccessor
    from .models import ResolverStyle

YEAR_MIN = -999_999_999
YEAR_MAX = 999_999_999

_NANOS, _MICROS, _MILLIS = ChronoUnit.NANOS, ChronoUnit.MICROS, ChronoUnit.MILLIS
_SECONDS, _MINUTES, _HOURS = ChronoUnit.SECONDS, ChronoUnit.MINUTES, ChronoUnit.HOURS
_HALF_DAYS, _DAYS, _WEEKS = ChronoUnit.HALF_DAYS, ChronoUnit.DAYS, ChronoUnit.WEEKS
_MONTHS, _YEARS, _ERAS = ChronoUnit.MONTHS, ChronoUnit.YEARS, ChronoUnit.ERAS
_FOREVER = ChronoUnit.FOREVER


class ChronoField(Enum):
    """
    Closed catalog of intrinsic fields.

    Declaration order matters: fields before DAY_OF_WEEK are time-based,
    fields from DAY_OF_WEEK to ERA are date-based.
    """

    NANO_OF_SECOND = ("NanoOfSecond", _NANOS, _SECONDS, ValueRange.of(0, 999_999_999))
    NANO_OF_DAY = ("NanoOfDay", _NANOS, _DAYS, ValueRange.of(0, 86_400 * 10**9 - 1))
    MICRO_OF_SECOND = ("MicroOfSecond", _MICROS, _SECONDS, ValueRange.of(0, 999_999))
    MICRO_OF_DAY = ("MicroOfDay", _MICROS, _DAYS, ValueRange.of(0, 86_400 * 10**6 - 1))
    MILLI_OF_SECOND = ("MilliOfSecond", _MILLIS, _SECONDS, ValueRange.of(0, 999))
    MILLI_OF_DAY = ("MilliOfDay", _MILLIS, _DAYS, ValueRange.of(0, 86_400 * 1_000 - 1))
    SECOND_OF_MINUTE = ("SecondOfMinute", _SECONDS, _MINUTES, ValueRange.of(0, 59))
    SECOND_OF_DAY = ("SecondOfDay", _SECONDS, _DAYS, ValueRange.of(0, 86_400 - 1))
    MINUTE_OF_HOUR = ("MinuteOfHour", _MINUTES, _HOURS, ValueRange.of(0, 59))
    MINUTE_OF_DAY = ("MinuteOfDay", _MINUTES, _DAYS, ValueRange.of(0, 24 * 60 - 1))
    HOUR_OF_AMPM = ("HourOfAmPm", _HOURS, _HALF_DAYS, ValueRange.of(0, 11))
    CLOCK_HOUR_OF_AMPM = ("ClockHourOfAmPm", _HOURS, _HALF_DAYS, ValueRange.of(1, 12))
    HOUR_OF_DAY = ("HourOfDay", _HOURS, _DAYS, ValueRange.of(0, 23))
    CLOCK_HOUR_OF_DAY = ("ClockHourOfDay", _HOURS, _DAYS, ValueRange.of(1, 24))
    AMPM_OF_DAY = ("AmPmOfDay", _HALF_DAYS, _DAYS, ValueRange.of(0, 1))
    DAY_OF_WEEK = ("DayOfWeek", _DAYS, _WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_MONTH = ("AlignedDayOfWeekInMonth", _DAYS, _WEEKS, ValueRange.of(1, 7))
    ALIGNED_DAY_OF_WEEK_IN_YEAR = ("AlignedDayOfWeekInYear", _DAYS, _WEEKS, ValueRange.of(1, 7))
    DAY_OF_MONTH = ("DayOfMonth", _DAYS, _MONTHS, ValueRange.of(1, 28, 31))
    DAY_OF_YEAR = ("DayOfYear", _DAYS, _YEARS, ValueRange.of(1, 365, 366))
    EPOCH_DAY = ("EpochDay", _DAYS, _FOREVER, ValueRange.of(-365_249_999_634, 365_249_999_634))
    ALIGNED_WEEK_OF_MONTH = ("AlignedWeekOfMonth", _WEEKS, _MONTHS, ValueRange.of(1, 4, 5))
    ALIGNED_WEEK_OF_YEAR = ("AlignedWeekOfYear", _WEEKS, _YEARS, ValueRange.of(1, 53))
    MONTH_OF_YEAR = ("MonthOfYear", _MONTHS, _YEARS, ValueRange.of(1, 12))
    PROLEPTIC_MONTH = (
        "ProlepticMonth",
        _MONTHS,
        _FOREVER,
        ValueRange.of(YEAR_MIN * 12, YEAR_MAX * 12 + 11),
    )
    YEAR_OF_ERA = ("YearOfEra", _YEARS, _FOREVER, ValueRange.of(1, YEAR_MAX, YEAR_MAX + 1))
    YEAR = ("Year", _YEARS, _FOREVER, ValueRange.of(YEAR_MIN, YEAR_MAX))
    ERA = ("Era", _ERAS, _FOREVER, ValueRange.of(0, 1))
    INSTANT_SECONDS = ("InstantSeconds", _SECONDS, _FOREVER, ValueRange.of(-(2**63), 2**63 - 1))
    OFFSET_SECONDS = ("OffsetSeconds", _SECONDS, _FOREVER, ValueRange.of(-18 * 3_600, 18 * 3_600))

    def __init__(
        self,
        display_name: str,
        base_unit: ChronoUnit,
        range_unit: ChronoUnit,
        value_range: ValueRange,
    ) -> None:
        self.display_name = display_name
        self.base_unit = base_unit
        self.range_unit = range_unit
        self._range = value_range

    @property
    def ordinal(self) -> int:
        return _FIELD_ORDER[self]

    def range(self) -> ValueRange:
        """Nominal range, valid for every temporal."""
        return self._range

    def is_date_based(self) -> bool:
        return _FIELD_ORDER[ChronoField.DAY_OF_WEEK] <= self.ordinal <= _FIELD_ORDER[ChronoField.ERA]

    def is_time_based(self) -> bool:
        return self.ordinal < _FIELD_ORDER[ChronoField.DAY_OF_WEEK]

    def check_valid_value(self, value: int) -> int:
        return self._range.check_valid_value(value, self)

    def check_valid_int_value(self, value: int) -> int:
        return self._range.check_valid_int_value(value, self)

    def is_supported_by(self, temporal: TemporalAccessor) -> bool:
        return temporal.is_supported(self)

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange:
        return temporal.range(self)

    def get_from(self, temporal: TemporalAccessor) -> int:
        return temporal.get_long(self)

    def adjust_into(self, temporal: Any, new_value: int) -> Any:
        return temporal.with_field(self, new_value)

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor | None,
        style: ResolverStyle,
    ) -> None:
        """Intrinsic fields are resolved by the chronology, never on their own."""
        return None

    def __str__(self) -> str:
        return self.display_name


_FIELD_ORDER: dict[ChronoField, int] = {field: index for index, field in enumerate(ChronoField)}

"""
ISO date collaborator.

IsoDate is an immutable date without time or zone, backed by the standard
library `datetime.date`. It implements the temporal capability set used by
fields and units, which makes it the reference temporal for the calculus.

Supported years are those of `datetime.date` (1 to 9999). Arithmetic that
leaves this span fails with ArithmeticOverflowError.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, date, timedelta
from functools import total_ordering
from typing import TYPE_CHECKING, Any

from .arithmetic import add_exact, multiply_exact, subtract_exact, trunc_div
from .chronology import ISO_CHRONOLOGY, check_valid_date
from .errors import (
    ArithmeticOverflowError,
    InvalidFieldValueError,
    UnsupportedFieldError,
    UnsupportedUnitError,
)
from .fields import YEAR_MAX, ChronoField
from .models import DayOfWeek, ValueRange
from .units import ChronoUnit

if TYPE_CHECKING:
    from .accessor import TemporalAccessor, TemporalField, TemporalUnit

EPOCH_ORDINAL = date(1970, 1, 1).toordinal()
SUPPORTED_YEARS = ValueRange.of(MINYEAR, MAXYEAR)
SUPPORTED_EPOCH_DAYS = ValueRange.of(
    date.min.toordinal() - EPOCH_ORDINAL,
    date.max.toordinal() - EPOCH_ORDINAL,
)


@total_ordering
class IsoDate:
    """A date in the ISO-8601 calendar, such as 2008-12-29."""

    __slots__ = ("_date",)

    chronology = ISO_CHRONOLOGY

    def __init__(self, value: date) -> None:
        self._date = value

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> IsoDate:
        """
        Create a date from year, month and day-of-month.

        Raises:
            InvalidFieldValueError: If a value is out of range or the date
                does not exist (e.g. February 30)
        """
        _check_supported_year(year)
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        ChronoField.DAY_OF_MONTH.check_valid_value(day)
        check_valid_date(year, month, day)
        return cls(date(year, month, day))

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> IsoDate:
        _check_supported_year(year)
        ChronoField.DAY_OF_YEAR.check_valid_value(day_of_year)
        if day_of_year == 366 and not ISO_CHRONOLOGY.is_leap_year(year):
            raise InvalidFieldValueError(
                f"Invalid date 'DayOfYear 366' as '{year}' is not a leap year",
                field=ChronoField.DAY_OF_YEAR,
                value=day_of_year,
                valid_range=ValueRange.of(1, 365),
                code="CHF-VALUE-002",
            )
        return cls(date(year, 1, 1) + timedelta(days=day_of_year - 1))

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> IsoDate:
        ChronoField.EPOCH_DAY.check_valid_value(epoch_day)
        SUPPORTED_EPOCH_DAYS.check_valid_value(epoch_day, ChronoField.EPOCH_DAY)
        return cls(date.fromordinal(epoch_day + EPOCH_ORDINAL))

    @classmethod
    def from_date(cls, value: date) -> IsoDate:
        return cls(value)

    @classmethod
    def from_temporal(cls, temporal: TemporalAccessor) -> IsoDate:
        """Obtain a date from any temporal exposing EPOCH_DAY."""
        if isinstance(temporal, IsoDate):
            return temporal
        if not temporal.is_supported(ChronoField.EPOCH_DAY):
            raise UnsupportedFieldError(
                ChronoField.EPOCH_DAY,
                message=f"Unable to obtain IsoDate from temporal {temporal!r}",
            )
        return cls.of_epoch_day(temporal.get_long(ChronoField.EPOCH_DAY))

    @classmethod
    def parse(cls, text: str) -> IsoDate:
        """Parse an ISO-8601 calendar date, e.g. '2008-12-29'."""
        try:
            return cls(date.fromisoformat(text.strip()))
        except ValueError:
            raise InvalidFieldValueError(
                f"Text '{text}' could not be parsed as an ISO date",
                code="CHF-VALUE-002",
            ) from None

    # -------------------------------------------------------------------------
    # Plain accessors
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_year(self) -> int:
        return self._date.timetuple().tm_yday

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek(self._date.isoweekday())

    def is_leap_year(self) -> bool:
        return ISO_CHRONOLOGY.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return ISO_CHRONOLOGY.length_of_month(self.year, self.month)

    def length_of_year(self) -> int:
        return ISO_CHRONOLOGY.length_of_year(self.year)

    def to_epoch_day(self) -> int:
        return self._date.toordinal() - EPOCH_ORDINAL

    def to_date(self) -> date:
        return self._date

    # -------------------------------------------------------------------------
    # Temporal capabilities
    # -------------------------------------------------------------------------

    def is_supported(self, field: TemporalField) -> bool:
        if isinstance(field, ChronoField):
            return field.is_date_based()
        return field is not None and field.is_supported_by(self)

    def is_supported_unit(self, unit: TemporalUnit) -> bool:
        if isinstance(unit, ChronoUnit):
            return unit.is_date_based()
        return unit is not None and unit.is_supported_by(self)

    def range(self, field: TemporalField) -> ValueRange:
        if not isinstance(field, ChronoField):
            return field.range_refined_by(self)
        if not self.is_supported(field):
            raise UnsupportedFieldError(field)
        if field is ChronoField.DAY_OF_MONTH:
            return ValueRange.of(1, self.length_of_month())
        if field is ChronoField.DAY_OF_YEAR:
            return ValueRange.of(1, self.length_of_year())
        if field is ChronoField.ALIGNED_WEEK_OF_MONTH:
            short_february = self.month == 2 and not self.is_leap_year()
            return ValueRange.of(1, 4 if short_february else 5)
        if field is ChronoField.YEAR_OF_ERA:
            return ValueRange.of(1, YEAR_MAX)
        return field.range()

    def get(self, field: TemporalField) -> int:
        """
        Get a field value that fits 32 bits.

        Raises:
            UnsupportedFieldError: If the field is not supported or its range
                does not fit 32 bits (use get_long)
            InvalidFieldValueError: If a computed value falls outside the range
        """
        value_range = self.range(field)
        if not value_range.is_int_value():
            raise UnsupportedFieldError(
                field,
                message=f"Invalid field {field} for get() method, use get_long() instead",
            )
        value = self.get_long(field)
        if not value_range.is_valid_value(value):
            raise InvalidFieldValueError(
                f"Invalid value for {field} (valid values {value_range}): {value}",
                field=field,
                value=value,
                valid_range=value_range,
            )
        return value

    def get_long(self, field: TemporalField) -> int:
        if not isinstance(field, ChronoField):
            return field.get_from(self)
        getter = _FIELD_GETTERS.get(field)
        if getter is None:
            raise UnsupportedFieldError(field)
        return getter(self)

    def with_field(self, field: TemporalField, new_value: int) -> IsoDate:
        """Copy of this date with the field set to the new value."""
        if not isinstance(field, ChronoField):
            return field.adjust_into(self, new_value)
        if not self.is_supported(field):
            raise UnsupportedFieldError(field)
        field.check_valid_value(new_value)

        if field in _RELATIVE_DAY_FIELDS:
            return self.plus_days(new_value - self.get_long(field))
        if field in _RELATIVE_WEEK_FIELDS:
            return self.plus_weeks(new_value - self.get_long(field))
        if field is ChronoField.DAY_OF_MONTH:
            return self.with_day_of_month(new_value)
        if field is ChronoField.DAY_OF_YEAR:
            return self.with_day_of_year(new_value)
        if field is ChronoField.EPOCH_DAY:
            return IsoDate.of_epoch_day(new_value)
        if field is ChronoField.MONTH_OF_YEAR:
            return self.with_month(new_value)
        if field is ChronoField.PROLEPTIC_MONTH:
            return self.plus_months(new_value - self.get_long(ChronoField.PROLEPTIC_MONTH))
        if field is ChronoField.YEAR_OF_ERA:
            return self.with_year(new_value if self.year >= 1 else 1 - new_value)
        if field is ChronoField.YEAR:
            return self.with_year(new_value)
        # ERA
        if self.get_long(ChronoField.ERA) == new_value:
            return self
        return self.with_year(1 - self.year)

    def with_adjuster(self, adjuster: Callable[[Any], Any]) -> Any:
        """Apply a temporal adjuster, e.g. adjusters.last_day_of_month()."""
        return adjuster(self)

    def plus(self, amount: int, unit: TemporalUnit) -> IsoDate:
        if not isinstance(unit, ChronoUnit):
            return unit.add_to(self, amount)
        if unit is ChronoUnit.DAYS:
            return self.plus_days(amount)
        if unit is ChronoUnit.WEEKS:
            return self.plus_weeks(amount)
        if unit is ChronoUnit.MONTHS:
            return self.plus_months(amount)
        if unit is ChronoUnit.YEARS:
            return self.plus_years(amount)
        if unit is ChronoUnit.DECADES:
            return self.plus_years(multiply_exact(amount, 10))
        if unit is ChronoUnit.CENTURIES:
            return self.plus_years(multiply_exact(amount, 100))
        if unit is ChronoUnit.MILLENNIA:
            return self.plus_years(multiply_exact(amount, 1_000))
        if unit is ChronoUnit.ERAS:
            return self.with_field(ChronoField.ERA, add_exact(self.get_long(ChronoField.ERA), amount))
        raise UnsupportedUnitError(unit)

    def minus(self, amount: int, unit: TemporalUnit) -> IsoDate:
        return self.plus(subtract_exact(0, amount), unit)

    def until(self, end: TemporalAccessor, unit: TemporalUnit) -> int:
        """Amount of whole units from this date (inclusive) to end (exclusive)."""
        end_date = IsoDate.from_temporal(end)
        if not isinstance(unit, ChronoUnit):
            return unit.between(self, end_date)
        if unit is ChronoUnit.DAYS:
            return end_date.to_epoch_day() - self.to_epoch_day()
        if unit is ChronoUnit.WEEKS:
            return trunc_div(end_date.to_epoch_day() - self.to_epoch_day(), 7)
        months = self._months_until(end_date)
        if unit is ChronoUnit.MONTHS:
            return months
        if unit is ChronoUnit.YEARS:
            return trunc_div(months, 12)
        if unit is ChronoUnit.DECADES:
            return trunc_div(months, 120)
        if unit is ChronoUnit.CENTURIES:
            return trunc_div(months, 1_200)
        if unit is ChronoUnit.MILLENNIA:
            return trunc_div(months, 12_000)
        if unit is ChronoUnit.ERAS:
            return end_date.get_long(ChronoField.ERA) - self.get_long(ChronoField.ERA)
        raise UnsupportedUnitError(unit)

    def _months_until(self, end: IsoDate) -> int:
        start_packed = self.get_long(ChronoField.PROLEPTIC_MONTH) * 32 + self.day
        end_packed = end.get_long(ChronoField.PROLEPTIC_MONTH) * 32 + end.day
        return trunc_div(end_packed - start_packed, 32)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def plus_days(self, days: int) -> IsoDate:
        if days == 0:
            return self
        ordinal = self._date.toordinal() + days
        if ordinal < 1 or ordinal > date.max.toordinal():
            raise ArithmeticOverflowError(
                f"Adding {days} days to {self} leaves the supported date range",
                context={"date": str(self), "days": days},
            )
        return IsoDate(date.fromordinal(ordinal))

    def plus_weeks(self, weeks: int) -> IsoDate:
        return self.plus_days(multiply_exact(weeks, 7))

    def plus_months(self, months: int) -> IsoDate:
        if months == 0:
            return self
        total = add_exact(self.year * 12 + (self.month - 1), months)
        year, month0 = divmod(total, 12)
        return self._resolve_previous_valid(_checked_year(year), month0 + 1, self.day)

    def plus_years(self, years: int) -> IsoDate:
        if years == 0:
            return self
        year = _checked_year(add_exact(self.year, years))
        return self._resolve_previous_valid(year, self.month, self.day)

    def minus_days(self, days: int) -> IsoDate:
        return self.plus_days(subtract_exact(0, days))

    def minus_weeks(self, weeks: int) -> IsoDate:
        return self.plus_weeks(subtract_exact(0, weeks))

    def minus_months(self, months: int) -> IsoDate:
        return self.plus_months(subtract_exact(0, months))

    def minus_years(self, years: int) -> IsoDate:
        return self.plus_years(subtract_exact(0, years))

    def with_year(self, year: int) -> IsoDate:
        if year == self.year:
            return self
        ChronoField.YEAR.check_valid_value(year)
        _check_supported_year(year)
        return self._resolve_previous_valid(year, self.month, self.day)

    def with_month(self, month: int) -> IsoDate:
        if month == self.month:
            return self
        ChronoField.MONTH_OF_YEAR.check_valid_value(month)
        return self._resolve_previous_valid(self.year, month, self.day)

    def with_day_of_month(self, day: int) -> IsoDate:
        if day == self.day:
            return self
        return IsoDate.of(self.year, self.month, day)

    def with_day_of_year(self, day_of_year: int) -> IsoDate:
        if day_of_year == self.day_of_year:
            return self
        return IsoDate.of_year_day(self.year, day_of_year)

    @staticmethod
    def _resolve_previous_valid(year: int, month: int, day: int) -> IsoDate:
        day = min(day, ISO_CHRONOLOGY.length_of_month(year, month))
        return IsoDate(date(year, month, day))

    # -------------------------------------------------------------------------
    # Object protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IsoDate):
            return NotImplemented
        return self._date == other._date

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, IsoDate):
            return NotImplemented
        return self._date < other._date

    def __hash__(self) -> int:
        return hash(self._date)

    def __repr__(self) -> str:
        return f"IsoDate('{self._date.isoformat()}')"

    def __str__(self) -> str:
        return self._date.isoformat()


def _check_supported_year(year: int) -> int:
    ChronoField.YEAR.check_valid_value(year)
    return SUPPORTED_YEARS.check_valid_value(year, ChronoField.YEAR)


def _checked_year(year: int) -> int:
    if not SUPPORTED_YEARS.is_valid_value(year):
        raise ArithmeticOverflowError(
            f"Year {year} is outside the supported range {SUPPORTED_YEARS}",
            context={"year": year},
        )
    return year


_RELATIVE_DAY_FIELDS = frozenset(
    {
        ChronoField.DAY_OF_WEEK,
        ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH,
        ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR,
    }
)

_RELATIVE_WEEK_FIELDS = frozenset(
    {
        ChronoField.ALIGNED_WEEK_OF_MONTH,
        ChronoField.ALIGNED_WEEK_OF_YEAR,
    }
)

_FIELD_GETTERS: dict[ChronoField, Callable[[IsoDate], int]] = {
    ChronoField.DAY_OF_WEEK: lambda d: d.day_of_week.value,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_MONTH: lambda d: (d.day - 1) % 7 + 1,
    ChronoField.ALIGNED_DAY_OF_WEEK_IN_YEAR: lambda d: (d.day_of_year - 1) % 7 + 1,
    ChronoField.DAY_OF_MONTH: lambda d: d.day,
    ChronoField.DAY_OF_YEAR: lambda d: d.day_of_year,
    ChronoField.EPOCH_DAY: lambda d: d.to_epoch_day(),
    ChronoField.ALIGNED_WEEK_OF_MONTH: lambda d: (d.day - 1) // 7 + 1,
    ChronoField.ALIGNED_WEEK_OF_YEAR: lambda d: (d.day_of_year - 1) // 7 + 1,
    ChronoField.MONTH_OF_YEAR: lambda d: d.month,
    ChronoField.PROLEPTIC_MONTH: lambda d: d.year * 12 + d.month - 1,
    ChronoField.YEAR_OF_ERA: lambda d: d.year if d.year >= 1 else 1 - d.year,
    ChronoField.YEAR: lambda d: d.year,
    ChronoField.ERA: lambda d: 1 if d.year >= 1 else 0,
}

"""
ISO calendar system.

The chronology knows leap years and month lengths, builds dates, and
resolves the plain chronological fields (year, month, day-of-month,
day-of-year, epoch-day, ...) left in a field-value map by a parser.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .arithmetic import subtract_exact
from .errors import InvalidFieldValueError, ResolutionRejectedError, TemporalError
from .fields import ChronoField
from .models import DayOfWeek, ResolverStyle, ValueRange

if TYPE_CHECKING:
    from .accessor import TemporalAccessor
    from .dates import IsoDate

logger = logging.getLogger(__name__)

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class IsoChronology:
    """The proleptic Gregorian calendar as defined by ISO-8601."""

    id = "ISO"

    def is_leap_year(self, year: int) -> bool:
        return (year & 3) == 0 and (year % 100 != 0 or year % 400 == 0)

    def length_of_month(self, year: int, month: int) -> int:
        if month == 2 and self.is_leap_year(year):
            return 29
        return _MONTH_LENGTHS[month - 1]

    def length_of_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def first_day_of_year(self, year: int) -> DayOfWeek:
        """Day of week of January 1st, valid for any proleptic year."""
        prior = year - 1
        # Gauss: 0 = Sunday
        sunday_based = (1 + 5 * (prior % 4) + 4 * (prior % 100) + 6 * (prior % 400)) % 7
        return DayOfWeek((sunday_based + 6) % 7 + 1)

    def range(self, field: ChronoField) -> ValueRange:
        return field.range()

    # -------------------------------------------------------------------------
    # Date factories
    # -------------------------------------------------------------------------

    def date(self, year: int, month: int, day: int) -> IsoDate:
        from .dates import IsoDate

        return IsoDate.of(year, month, day)

    def date_year_day(self, year: int, day_of_year: int) -> IsoDate:
        from .dates import IsoDate

        return IsoDate.of_year_day(year, day_of_year)

    def date_epoch_day(self, epoch_day: int) -> IsoDate:
        from .dates import IsoDate

        return IsoDate.of_epoch_day(epoch_day)

    def date_from(self, temporal: TemporalAccessor) -> IsoDate:
        from .dates import IsoDate

        return IsoDate.from_temporal(temporal)

    # -------------------------------------------------------------------------
    # Resolution of intrinsic fields
    # -------------------------------------------------------------------------

    def resolve_date(self, field_values: dict[Any, int], style: ResolverStyle) -> IsoDate | None:
        """
        Resolve intrinsic date fields into a date.

        Consumed fields are removed from the map. Returns None when the map
        does not hold a complete combination.

        Handled combinations:
        - EPOCH_DAY
        - PROLEPTIC_MONTH (normalized to YEAR + MONTH_OF_YEAR)
        - YEAR_OF_ERA with or without ERA (normalized to YEAR)
        - YEAR + MONTH_OF_YEAR + DAY_OF_MONTH
        - YEAR + DAY_OF_YEAR
        """
        if ChronoField.EPOCH_DAY in field_values:
            return self.date_epoch_day(field_values.pop(ChronoField.EPOCH_DAY))

        self._resolve_proleptic_month(field_values, style)
        self._resolve_year_of_era(field_values, style)

        if ChronoField.YEAR not in field_values:
            return None

        if ChronoField.MONTH_OF_YEAR in field_values and ChronoField.DAY_OF_MONTH in field_values:
            return self._resolve_ymd(field_values, style)
        if ChronoField.DAY_OF_YEAR in field_values:
            return self._resolve_yd(field_values, style)
        return None

    def _resolve_proleptic_month(self, field_values: dict[Any, int], style: ResolverStyle) -> None:
        if ChronoField.PROLEPTIC_MONTH not in field_values:
            return
        proleptic_month = field_values.pop(ChronoField.PROLEPTIC_MONTH)
        if style is not ResolverStyle.LENIENT:
            ChronoField.PROLEPTIC_MONTH.check_valid_value(proleptic_month)
        year, month0 = divmod(proleptic_month, 12)
        put_field_value(field_values, ChronoField.MONTH_OF_YEAR, month0 + 1)
        put_field_value(field_values, ChronoField.YEAR, year)

    def _resolve_year_of_era(self, field_values: dict[Any, int], style: ResolverStyle) -> None:
        year_of_era = field_values.get(ChronoField.YEAR_OF_ERA)
        if year_of_era is None:
            if ChronoField.ERA in field_values:
                ChronoField.ERA.check_valid_value(field_values[ChronoField.ERA])
            return
        if style is not ResolverStyle.LENIENT:
            ChronoField.YEAR_OF_ERA.check_valid_value(year_of_era)

        era = field_values.get(ChronoField.ERA)
        if era is None:
            if style is ResolverStyle.STRICT and ChronoField.YEAR not in field_values:
                # Strict mode cannot assume the current era
                return
            del field_values[ChronoField.YEAR_OF_ERA]
            current = field_values.get(ChronoField.YEAR)
            if current is not None and current <= 0:
                put_field_value(field_values, ChronoField.YEAR, subtract_exact(1, year_of_era))
            else:
                put_field_value(field_values, ChronoField.YEAR, year_of_era)
            return

        del field_values[ChronoField.YEAR_OF_ERA]
        del field_values[ChronoField.ERA]
        if era == 1:
            put_field_value(field_values, ChronoField.YEAR, year_of_era)
        elif era == 0:
            put_field_value(field_values, ChronoField.YEAR, subtract_exact(1, year_of_era))
        else:
            ChronoField.ERA.check_valid_value(era)

    def _resolve_ymd(self, field_values: dict[Any, int], style: ResolverStyle) -> IsoDate:
        year = ChronoField.YEAR.check_valid_int_value(field_values.pop(ChronoField.YEAR))
        month = field_values.pop(ChronoField.MONTH_OF_YEAR)
        day = field_values.pop(ChronoField.DAY_OF_MONTH)

        if style is ResolverStyle.LENIENT:
            months = subtract_exact(month, 1)
            days = subtract_exact(day, 1)
            return self.date(year, 1, 1).plus_months(months).plus_days(days)

        month = ChronoField.MONTH_OF_YEAR.check_valid_int_value(month)
        day = ChronoField.DAY_OF_MONTH.check_valid_int_value(day)
        if style is ResolverStyle.SMART:
            day = min(day, self.length_of_month(year, month))
        return self.date(year, month, day)

    def _resolve_yd(self, field_values: dict[Any, int], style: ResolverStyle) -> IsoDate:
        year = ChronoField.YEAR.check_valid_int_value(field_values.pop(ChronoField.YEAR))
        day_of_year = field_values.pop(ChronoField.DAY_OF_YEAR)

        if style is ResolverStyle.LENIENT:
            return self.date_year_day(year, 1).plus_days(subtract_exact(day_of_year, 1))

        day_of_year = ChronoField.DAY_OF_YEAR.check_valid_int_value(day_of_year)
        return self.date_year_day(year, day_of_year)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IsoChronology)

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return "IsoChronology"


ISO_CHRONOLOGY = IsoChronology()


def chronology_of(temporal: TemporalAccessor | None) -> IsoChronology:
    """Chronology of a temporal; temporals without one are ISO."""
    chronology = getattr(temporal, "chronology", None)
    return chronology if chronology is not None else ISO_CHRONOLOGY


def is_iso(temporal: TemporalAccessor | None) -> bool:
    return chronology_of(temporal) == ISO_CHRONOLOGY


def ensure_iso(temporal: TemporalAccessor | None) -> None:
    if not is_iso(temporal):
        raise TemporalError(
            "Resolve requires IsoChronology",
            code="CHF-CHR-001",
            title="Chronology mismatch",
        )


def put_field_value(field_values: dict[Any, int], field: ChronoField, value: int) -> None:
    """Insert a normalized field, rejecting a conflicting value already present."""
    existing = field_values.get(field)
    if existing is not None and existing != value:
        raise ResolutionRejectedError(
            f"Conflict found: {field} {existing} differs from {field} {value}",
            field=field,
            value=value,
            code="CHF-RES-002",
        )
    field_values[field] = value
    logger.debug("Normalized %s=%s", field, value)


def check_valid_date(year: int, month: int, day: int) -> None:
    """Reject day-of-month values beyond the month length."""
    length = ISO_CHRONOLOGY.length_of_month(year, month)
    if day > length:
        raise InvalidFieldValueError(
            f"Invalid date: {year:04d}-{month:02d}-{day:02d}",
            field=ChronoField.DAY_OF_MONTH,
            value=day,
            valid_range=ValueRange.of(1, length),
            code="CHF-VALUE-002",
        )

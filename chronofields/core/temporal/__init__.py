"""
Temporal field/unit calculus.

Provides fields, units, localized week numbering, ISO week-date and quarter
fields, and resolution of parsed field values into dates.

Usage:
    from chronofields.core.temporal import IsoDate, IsoField, WeekFields, resolve

    date = IsoDate.of(2008, 12, 29)
    date.get(IsoField.WEEK_BASED_YEAR)             # 2009
    date.get(WeekFields.SUNDAY_START.week_of_year)  # 53

    resolve({IsoField.WEEK_BASED_YEAR: 2009,
             IsoField.WEEK_OF_WEEK_BASED_YEAR: 1,
             ChronoField.DAY_OF_WEEK: 1})           # IsoDate('2008-12-29')
"""

from __future__ import annotations

from . import adjusters
from .accessor import Temporal, TemporalAccessor, TemporalField, TemporalUnit
from .catalog import get_field, get_unit
from .chronology import ISO_CHRONOLOGY, IsoChronology, chronology_of, ensure_iso
from .dates import IsoDate
from .errors import (
    TEMPORAL_ERROR_CODES,
    ArithmeticOverflowError,
    ErrorDetail,
    InvalidConfigurationError,
    InvalidFieldValueError,
    ResolutionRejectedError,
    TemporalError,
    UnsupportedFieldError,
    UnsupportedUnitError,
    get_error_description,
)
from .fields import ChronoField
from .iso_fields import IsoField, IsoUnit
from .models import DayOfWeek, Duration, ResolverStyle, ValueRange
from .registry import WeekFieldsRegistry, get_registry, reset_registry
from .resolver import Resolution, resolve, resolve_fields
from .units import ChronoUnit
from .week_fields import ComputedDayOfField, WeekFields

__all__ = [
    # Errors
    "TEMPORAL_ERROR_CODES",
    "ArithmeticOverflowError",
    "ErrorDetail",
    "InvalidConfigurationError",
    "InvalidFieldValueError",
    "ResolutionRejectedError",
    "TemporalError",
    "UnsupportedFieldError",
    "UnsupportedUnitError",
    "get_error_description",
    # Models
    "DayOfWeek",
    "Duration",
    "ResolverStyle",
    "ValueRange",
    # Capabilities
    "Temporal",
    "TemporalAccessor",
    "TemporalField",
    "TemporalUnit",
    # Catalogs
    "ChronoField",
    "ChronoUnit",
    "IsoField",
    "IsoUnit",
    "get_field",
    "get_unit",
    # Calendar
    "ISO_CHRONOLOGY",
    "IsoChronology",
    "IsoDate",
    "chronology_of",
    "ensure_iso",
    # Weeks
    "ComputedDayOfField",
    "WeekFields",
    "WeekFieldsRegistry",
    "get_registry",
    "reset_registry",
    # Resolution
    "Resolution",
    "resolve",
    "resolve_fields",
    # Adjusters
    "adjusters",
]

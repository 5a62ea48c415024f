"""
Temporal value models.

Core value types shared by units, fields and the week engine.

CRITICAL DESIGN DECISIONS:
- All models are frozen (immutable) and compare structurally
- ValueRange always satisfies min_smallest <= min_largest <= max_smallest <= max_largest
- Durations keep nanosecond precision (seconds + nanos), unlike timedelta
"""

from __future__ import annotations

from enum import Enum, IntEnum
from functools import total_ordering
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .arithmetic import INT_MAX, INT_MIN
from .errors import InvalidConfigurationError, InvalidFieldValueError

# =============================================================================
# Enums
# =============================================================================


class DayOfWeek(IntEnum):
    """ISO-8601 day of week, Monday = 1 to Sunday = 7."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def parse(cls, value: Any) -> DayOfWeek:
        """Accept a DayOfWeek, its ISO number or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls(int(text))
            return cls[text.upper()]
        return cls(value)

    def plus(self, days: int) -> DayOfWeek:
        """Day of week that is `days` later (or earlier, if negative)."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-days)


class ResolverStyle(Enum):
    """Strictness policy applied when resolving parsed field values."""

    STRICT = "strict"  # Instance-refined ranges, reject dates that drift
    SMART = "smart"  # Nominal ranges, allow rolling into the next period
    LENIENT = "lenient"  # No validation, raw arithmetic from an anchor

    @classmethod
    def parse(cls, value: Any) -> ResolverStyle:
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# =============================================================================
# Duration
# =============================================================================


@total_ordering
class Duration(BaseModel, frozen=True):
    """Exact amount of time stored as seconds plus nanoseconds."""

    seconds: int
    nanos: int = Field(default=0, ge=0, le=999_999_999)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        extra, nanos = divmod(nano_adjustment, 1_000_000_000)
        return cls(seconds=seconds + extra, nanos=nanos)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        return cls.of_seconds(0, nanos)

    @classmethod
    def of_days(cls, days: int) -> Duration:
        return cls.of_seconds(days * 86_400)

    @property
    def total_nanos(self) -> int:
        return self.seconds * 1_000_000_000 + self.nanos

    def multiplied_by(self, factor: int) -> Duration:
        return Duration.of_nanos(self.total_nanos * factor)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return (self.seconds, self.nanos) < (other.seconds, other.nanos)

    def __str__(self) -> str:
        if self.nanos:
            fraction = f"{self.nanos:09d}".rstrip("0")
            return f"PT{self.seconds}.{fraction}S"
        return f"PT{self.seconds}S"


# =============================================================================
# ValueRange
# =============================================================================


def _check_bounds(min_smallest: int, min_largest: int, max_smallest: int, max_largest: int) -> None:
    if min_smallest > min_largest:
        raise InvalidConfigurationError(
            "Smallest minimum value must be less than largest minimum value",
            context={"min_smallest": min_smallest, "min_largest": min_largest},
        )
    if max_smallest > max_largest:
        raise InvalidConfigurationError(
            "Smallest maximum value must be less than largest maximum value",
            context={"max_smallest": max_smallest, "max_largest": max_largest},
        )
    if min_largest > max_smallest:
        raise InvalidConfigurationError(
            "Minimum value must be less than maximum value",
            context={"min_largest": min_largest, "max_smallest": max_smallest},
        )


class ValueRange(BaseModel, frozen=True):
    """
    Inclusive range of legal values for a field.

    Fixed ranges have a single minimum and maximum. Variable ranges, such
    as day-of-month (1 to 28/31), record the smallest and largest value
    each bound can take.
    """

    min_smallest: int
    min_largest: int
    max_smallest: int
    max_largest: int

    @model_validator(mode="after")
    def _validate_order(self) -> ValueRange:
        _check_bounds(self.min_smallest, self.min_largest, self.max_smallest, self.max_largest)
        return self

    @classmethod
    def of(cls, *bounds: int) -> ValueRange:
        """
        Create a range from two, three or four bounds.

        of(min, max)
        of(min, max_smallest, max_largest)
        of(min_smallest, min_largest, max_smallest, max_largest)

        Raises:
            InvalidConfigurationError: If the bounds are not ordered
        """
        if len(bounds) == 2:
            full = (bounds[0], bounds[0], bounds[1], bounds[1])
        elif len(bounds) == 3:
            full = (bounds[0], bounds[0], bounds[1], bounds[2])
        elif len(bounds) == 4:
            full = (bounds[0], bounds[1], bounds[2], bounds[3])
        else:
            raise TypeError(f"ValueRange.of() takes 2 to 4 bounds ({len(bounds)} given)")
        _check_bounds(*full)
        return cls(min_smallest=full[0], min_largest=full[1], max_smallest=full[2], max_largest=full[3])

    @property
    def minimum(self) -> int:
        return self.min_smallest

    @property
    def largest_minimum(self) -> int:
        return self.min_largest

    @property
    def smallest_maximum(self) -> int:
        return self.max_smallest

    @property
    def maximum(self) -> int:
        return self.max_largest

    def is_fixed(self) -> bool:
        """True if both bounds have a single value."""
        return self.min_smallest == self.min_largest and self.max_smallest == self.max_largest

    def is_int_value(self) -> bool:
        """True if every value in the range fits a signed 32-bit integer."""
        return self.minimum >= INT_MIN and self.maximum <= INT_MAX

    def is_valid_value(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def is_valid_int_value(self, value: int) -> bool:
        return self.is_int_value() and self.is_valid_value(value)

    def check_valid_value(self, value: int, field: object | None = None) -> int:
        """
        Return the value if it is within the range.

        Raises:
            InvalidFieldValueError: Carrying the field name and this range
        """
        if not self.is_valid_value(value):
            raise InvalidFieldValueError(
                self._invalid_message(value, field),
                field=field,
                value=value,
                valid_range=self,
            )
        return value

    def check_valid_int_value(self, value: int, field: object | None = None) -> int:
        """Like check_valid_value, but also requires the range to fit 32 bits."""
        if not self.is_valid_int_value(value):
            raise InvalidFieldValueError(
                self._invalid_message(value, field),
                field=field,
                value=value,
                valid_range=self,
            )
        return value

    def _invalid_message(self, value: int, field: object | None) -> str:
        if field is not None:
            return f"Invalid value for {field} (valid values {self}): {value}"
        return f"Invalid value (valid values {self}): {value}"

    def __str__(self) -> str:
        text = str(self.min_smallest)
        if self.min_smallest != self.min_largest:
            text += f"/{self.min_largest}"
        text += f" - {self.max_smallest}"
        if self.max_smallest != self.max_largest:
            text += f"/{self.max_largest}"
        return text

"""
Standard set of date/time units.

Units are descriptors: they name a duration and classify it as time-based
or date-based. Adding or measuring an amount of a unit is always delegated
to the temporal that is being adjusted.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .models import Duration

if TYPE_CHECKING:
    from .accessor import Temporal

# Average Gregorian year: 365.2425 days
SECONDS_PER_YEAR = 31_556_952


class ChronoUnit(Enum):
    """Closed catalog of units from nanoseconds to forever."""

    NANOS = ("Nanos", Duration.of_nanos(1))
    MICROS = ("Micros", Duration.of_nanos(1_000))
    MILLIS = ("Millis", Duration.of_nanos(1_000_000))
    SECONDS = ("Seconds", Duration.of_seconds(1))
    MINUTES = ("Minutes", Duration.of_seconds(60))
    HOURS = ("Hours", Duration.of_seconds(3_600))
    HALF_DAYS = ("HalfDays", Duration.of_seconds(43_200))
    DAYS = ("Days", Duration.of_seconds(86_400))
    WEEKS = ("Weeks", Duration.of_seconds(7 * 86_400))
    MONTHS = ("Months", Duration.of_seconds(SECONDS_PER_YEAR // 12))
    YEARS = ("Years", Duration.of_seconds(SECONDS_PER_YEAR))
    DECADES = ("Decades", Duration.of_seconds(SECONDS_PER_YEAR * 10))
    CENTURIES = ("Centuries", Duration.of_seconds(SECONDS_PER_YEAR * 100))
    MILLENNIA = ("Millennia", Duration.of_seconds(SECONDS_PER_YEAR * 1_000))
    ERAS = ("Eras", Duration.of_seconds(SECONDS_PER_YEAR * 1_000_000_000))
    FOREVER = ("Forever", Duration.of_seconds(2**63 - 1, 999_999_999))

    def __init__(self, display_name: str, duration: Duration) -> None:
        self.display_name = display_name
        self._duration = duration

    @property
    def duration(self) -> Duration:
        """Estimated duration; exact for time units, average for date units."""
        return self._duration

    @property
    def ordinal(self) -> int:
        return _UNIT_ORDER[self]

    def is_duration_estimated(self) -> bool:
        """Days and longer vary in physical length (DST, leap years)."""
        return self.ordinal >= _UNIT_ORDER[ChronoUnit.DAYS]

    def is_date_based(self) -> bool:
        return self.ordinal >= _UNIT_ORDER[ChronoUnit.DAYS] and self is not ChronoUnit.FOREVER

    def is_time_based(self) -> bool:
        return self.ordinal < _UNIT_ORDER[ChronoUnit.DAYS]

    def is_supported_by(self, temporal: Temporal) -> bool:
        return temporal.is_supported_unit(self)

    def add_to(self, temporal: Any, amount: int) -> Any:
        return temporal.plus(amount, self)

    def between(self, start: Temporal, end: Temporal) -> int:
        return start.until(end, self)

    def __str__(self) -> str:
        return self.display_name


_UNIT_ORDER: dict[ChronoUnit, int] = {unit: index for index, unit in enumerate(ChronoUnit)}

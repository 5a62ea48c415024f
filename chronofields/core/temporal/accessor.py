"""
Temporal capability interfaces.

Fields and units never inspect the concrete type of the object they work
on. They only use the capability set below, so any date-bearing object that
implements it (IsoDate, a parser's partial result, ...) can be queried,
adjusted and reconstructed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import Duration, ResolverStyle, ValueRange


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read-only access to the fields of a date/time value."""

    def is_supported(self, field: TemporalField) -> bool: ...

    def range(self, field: TemporalField) -> ValueRange: ...

    def get(self, field: TemporalField) -> int: ...

    def get_long(self, field: TemporalField) -> int: ...


@runtime_checkable
class Temporal(TemporalAccessor, Protocol):
    """A date/time value that can produce adjusted copies of itself."""

    def is_supported_unit(self, unit: TemporalUnit) -> bool: ...

    def with_field(self, field: TemporalField, new_value: int) -> Temporal: ...

    def plus(self, amount: int, unit: TemporalUnit) -> Temporal: ...

    def minus(self, amount: int, unit: TemporalUnit) -> Temporal: ...

    def until(self, end: Temporal, unit: TemporalUnit) -> int: ...


class TemporalUnit(Protocol):
    """A named duration used to step and classify fields."""

    @property
    def duration(self) -> Duration: ...

    def is_duration_estimated(self) -> bool: ...

    def is_date_based(self) -> bool: ...

    def is_time_based(self) -> bool: ...

    def is_supported_by(self, temporal: Temporal) -> bool: ...

    def add_to(self, temporal: Any, amount: int) -> Any: ...

    def between(self, start: Temporal, end: Temporal) -> int: ...


class TemporalField(Protocol):
    """A named accessor/mutator for one component of a date/time value."""

    @property
    def base_unit(self) -> TemporalUnit: ...

    @property
    def range_unit(self) -> TemporalUnit: ...

    def range(self) -> ValueRange: ...

    def is_date_based(self) -> bool: ...

    def is_time_based(self) -> bool: ...

    def is_supported_by(self, temporal: TemporalAccessor) -> bool: ...

    def range_refined_by(self, temporal: TemporalAccessor) -> ValueRange: ...

    def get_from(self, temporal: TemporalAccessor) -> int: ...

    def adjust_into(self, temporal: Any, new_value: int) -> Any: ...

    def resolve(
        self,
        field_values: dict[Any, int],
        partial_temporal: TemporalAccessor | None,
        style: ResolverStyle,
    ) -> Any | None: ...

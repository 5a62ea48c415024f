"""
CLI report models.

Commands build these frozen models; output adapters render them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chronofields.core.temporal import (
    ChronoField,
    IsoDate,
    IsoField,
    Resolution,
    WeekFields,
)

# Intrinsic fields shown by the `fields` command
REPORTED_FIELDS = (
    ChronoField.YEAR,
    ChronoField.MONTH_OF_YEAR,
    ChronoField.DAY_OF_MONTH,
    ChronoField.DAY_OF_YEAR,
    ChronoField.DAY_OF_WEEK,
    ChronoField.ALIGNED_WEEK_OF_YEAR,
    ChronoField.EPOCH_DAY,
)


class FieldValue(BaseModel, frozen=True):
    """Value of one field together with its valid range for the date."""

    name: str = Field(description="Field display name")
    value: int
    range: str = Field(description="Range refined by the date, e.g. '1 - 52'")


class FieldReport(BaseModel, frozen=True):
    """All field values of one date."""

    date: str
    week_definition: str = Field(description="e.g. 'WeekFields[MONDAY,4]'")
    intrinsic: list[FieldValue] = Field(default_factory=list)
    iso: list[FieldValue] = Field(default_factory=list)
    localized: list[FieldValue] = Field(default_factory=list)


class ResolveReport(BaseModel, frozen=True):
    """Outcome of the `resolve` command."""

    fields: dict[str, int] = Field(description="Parsed input, field name -> value")
    style: str
    week_definition: str
    date: str | None = Field(default=None, description="Resolved ISO date")
    unresolved: dict[str, int] = Field(default_factory=dict)


def _field_value(date: IsoDate, name: str, field: Any) -> FieldValue:
    return FieldValue(name=name, value=date.get_long(field), range=str(date.range(field)))


def build_field_report(date: IsoDate, week_fields: WeekFields) -> FieldReport:
    """Collect intrinsic, ISO and localized field values of a date."""
    return FieldReport(
        date=str(date),
        week_definition=repr(week_fields),
        intrinsic=[_field_value(date, str(field), field) for field in REPORTED_FIELDS],
        iso=[_field_value(date, str(field), field) for field in IsoField],
        localized=[_field_value(date, name, field) for name, field in week_fields.fields().items()],
    )


def build_resolve_report(
    fields: dict[str, int],
    resolution: Resolution,
    week_fields: WeekFields,
) -> ResolveReport:
    return ResolveReport(
        fields=fields,
        style=resolution.style.value,
        week_definition=repr(week_fields),
        date=str(resolution.date) if resolution.date is not None else None,
        unresolved=resolution.unresolved,
    )

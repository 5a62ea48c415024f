"""
Field-value resolver.

Turns a map of parsed field values (e.g. {WeekBasedYear: 2009,
WeekOfWeekBasedYear: 1, DayOfWeek: 1}) into a date. Composite fields get
the first chance to rewrite the map; the chronology then resolves the
remaining intrinsic fields. Leftover date fields are cross-checked against
the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from .chronology import chronology_of
from .errors import ResolutionRejectedError, TemporalError
from .models import ResolverStyle

if TYPE_CHECKING:
    from .accessor import TemporalAccessor
    from .dates import IsoDate

logger = logging.getLogger(__name__)

# Upper bound on field rewrite passes; more means fields keep re-adding each other
MAX_RESOLVE_PASSES = 50


class Resolution(BaseModel, frozen=True):
    """
    Outcome of resolving a field-value map.

    `date` is None when the fields do not describe a complete date.
    `unresolved` holds the entries no field or chronology consumed.
    """

    date: Any | None = Field(default=None, description="Resolved IsoDate, if any")
    style: ResolverStyle = Field(description="Resolver style that was applied")
    unresolved: dict[str, int] = Field(
        default_factory=dict,
        description="Field display name -> value left over after resolution",
    )


def resolve(
    field_values: dict[Any, int],
    partial_temporal: TemporalAccessor | None = None,
    style: ResolverStyle | str | None = None,
) -> IsoDate | None:
    """
    Resolve parsed fields into a date.

    The map is modified in place: consumed entries are removed and anything
    left over afterwards was not needed to build the date.

    Args:
        field_values: Field -> value map, e.g. from a parser
        partial_temporal: Partially built temporal (only its chronology is used)
        style: Resolver style; defaults to the configured one

    Returns:
        The resolved date, or None if the fields are incomplete

    Raises:
        InvalidFieldValueError: A value is outside the range demanded by the style
        ResolutionRejectedError: Strict mode rejected the date or fields conflict
        TemporalError: Fields did not stop rewriting each other
    """
    style = _effective_style(style)
    date = _resolve_fields(field_values, partial_temporal, style)
    if date is None:
        date = chronology_of(partial_temporal).resolve_date(field_values, style)
    if date is not None:
        _cross_check(date, field_values)
        logger.debug("Resolved %s with %s style", date, style.value)
    return date


def resolve_fields(
    field_values: dict[Any, int],
    style: ResolverStyle | str | None = None,
) -> Resolution:
    """Resolve a copy of the map and report what was left unresolved."""
    remaining = dict(field_values)
    effective = _effective_style(style)
    date = resolve(remaining, style=effective)
    return Resolution(
        date=date,
        style=effective,
        unresolved={str(field): value for field, value in remaining.items()},
    )


def _effective_style(style: ResolverStyle | str | None) -> ResolverStyle:
    if style is None:
        from ..settings import get_settings

        return get_settings().resolver_style
    return ResolverStyle.parse(style)


def _resolve_fields(
    field_values: dict[Any, int],
    partial_temporal: TemporalAccessor | None,
    style: ResolverStyle,
) -> IsoDate | None:
    """Let each field rewrite the map until nothing changes or a date appears."""
    for _ in range(MAX_RESOLVE_PASSES):
        changed = False
        for field in list(field_values):
            if field not in field_values:
                continue
            snapshot = dict(field_values)
            date = field.resolve(field_values, partial_temporal, style)
            if date is not None:
                logger.debug("Field %s resolved the map to %s", field, date)
                return date
            if field_values != snapshot:
                # Restart so fields added by the rewrite get their turn
                changed = True
                break
        if not changed:
            return None
    raise TemporalError(
        f"One of the parsed fields has an incorrectly implemented resolve method: {field_values}",
        code="CHF-RES-003",
        title="Resolution did not converge",
        context={"passes": MAX_RESOLVE_PASSES},
    )


def _cross_check(date: IsoDate, field_values: dict[Any, int]) -> None:
    """Leftover date fields must agree with the date; agreeing ones are consumed."""
    for field in list(field_values):
        if not field.is_date_based() or not date.is_supported(field):
            continue
        value = field_values[field]
        actual = date.get_long(field)
        if actual != value:
            raise ResolutionRejectedError(
                f"Conflict found: Field {field} {actual} differs from {field} {value} derived from {date}",
                field=field,
                value=value,
                code="CHF-RES-002",
            )
        del field_values[field]


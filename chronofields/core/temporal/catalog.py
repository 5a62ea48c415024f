"""
Name-based lookup of fields and units.

Used by the CLI and by anything that reads field names from text, e.g.
"DayOfMonth=29" or "week.WeekOfYear=53".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .errors import UnsupportedFieldError, UnsupportedUnitError
from .fields import ChronoField
from .iso_fields import IsoField, IsoUnit
from .units import ChronoUnit

if TYPE_CHECKING:
    from .week_fields import WeekFields

LOCALIZED_PREFIX = "week."


def _normalize(name: str) -> str:
    return name.strip().replace("_", "").replace("-", "").lower()


def _index(*catalogs: Any) -> dict[str, Any]:
    index: dict[str, Any] = {}
    for catalog in catalogs:
        for member in catalog:
            index[_normalize(member.name)] = member
            index[_normalize(member.display_name)] = member
    return index


_FIELDS = _index(ChronoField, IsoField)
_UNITS = _index(ChronoUnit, IsoUnit)


def get_field(name: str, week_fields: WeekFields | None = None) -> Any:
    """
    Find a field by display name or constant name.

    Names are matched case-insensitively, ignoring '_' and '-'. A 'week.'
    prefix selects a localized field of `week_fields` (default: the
    configured week definition).

    Raises:
        UnsupportedFieldError: If no field has that name
    """
    text = name.strip()
    if text.lower().startswith(LOCALIZED_PREFIX):
        if week_fields is None:
            from .week_fields import WeekFields

            week_fields = WeekFields.default()
        key = _normalize(text[len(LOCALIZED_PREFIX):])
        for field_name, field in week_fields.fields().items():
            if _normalize(field_name) == key:
                return field
        raise UnsupportedFieldError(name, message=f"Unknown localized field: {name}")

    field = _FIELDS.get(_normalize(text))
    if field is None:
        raise UnsupportedFieldError(name, message=f"Unknown field: {name}")
    return field


def get_unit(name: str) -> ChronoUnit | IsoUnit:
    """Find a unit by display name or constant name."""
    unit = _UNITS.get(_normalize(name))
    if unit is None:
        raise UnsupportedUnitError(name, message=f"Unknown unit: {name}")
    return unit


def field_names() -> list[str]:
    """Display names of all catalog fields, for help texts."""
    return [field.display_name for field in (*ChronoField, *IsoField)]

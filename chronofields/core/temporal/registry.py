"""
WeekFields registry.

Week definitions are cached per (first-day-of-week, minimal-days) pair so
that equal definitions share one instance and one set of localized field
objects. The cache is safe to use from several threads; concurrent first
lookups of the same key all receive the instance that was inserted first.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError
from .models import DayOfWeek

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .week_fields import WeekFields

logger = logging.getLogger(__name__)

WeekKey = tuple[DayOfWeek, int]

# Definitions every fresh default registry starts with (filled by week_fields)
_WELL_KNOWN: list[WeekFields] = []


def make_key(first_day_of_week: DayOfWeek | int | str, minimal_days_in_first_week: int) -> WeekKey:
    """
    Validate and normalize a week definition key.

    Raises:
        InvalidConfigurationError: If the day of week is unknown or the
            minimal days are outside 1..7
    """
    try:
        first = DayOfWeek.parse(first_day_of_week)
    except (KeyError, ValueError):
        raise InvalidConfigurationError(
            f"Invalid first day of week: {first_day_of_week!r}",
            code="CHF-CFG-002",
            context={"first_day_of_week": str(first_day_of_week)},
        ) from None
    if isinstance(minimal_days_in_first_week, bool) or not 1 <= minimal_days_in_first_week <= 7:
        raise InvalidConfigurationError(
            "Invalid value for minimal days in first week: "
            f"{minimal_days_in_first_week} (valid values 1 - 7)",
            code="CHF-CFG-002",
            context={"minimal_days_in_first_week": minimal_days_in_first_week},
        )
    return first, minimal_days_in_first_week


class WeekFieldsRegistry:
    """
    Thread-safe cache of week definitions.

    Usage:
        registry = WeekFieldsRegistry()
        us_weeks = registry.lookup(DayOfWeek.SUNDAY, 1)
        assert registry.lookup("SUNDAY", 1) is us_weeks
    """

    def __init__(self, seed: Iterable[WeekFields] = ()) -> None:
        self._cache: dict[WeekKey, WeekFields] = {}
        self._lock = threading.Lock()
        for week_fields in seed:
            self.register(week_fields)

    def lookup(
        self,
        first_day_of_week: DayOfWeek | int | str,
        minimal_days_in_first_week: int,
    ) -> WeekFields:
        """Get the canonical definition for a key, creating it on first use."""
        key = make_key(first_day_of_week, minimal_days_in_first_week)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        from .week_fields import WeekFields

        return self.register(WeekFields(*key))

    def register(self, week_fields: WeekFields) -> WeekFields:
        """Insert a definition unless its key is taken; return the cached one."""
        key = (week_fields.first_day_of_week, week_fields.minimal_days_in_first_week)
        with self._lock:
            winner = self._cache.setdefault(key, week_fields)
        if winner is week_fields:
            logger.debug("Registered week definition %r", week_fields)
        return winner

    def get(self, key: WeekKey) -> WeekFields | None:
        return self._cache.get(key)

    def definitions(self) -> list[WeekFields]:
        """All cached definitions, ordered by first day then minimal days."""
        with self._lock:
            return [self._cache[key] for key in sorted(self._cache)]

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)


# Global registry instance
_registry: WeekFieldsRegistry | None = None
_registry_lock = threading.Lock()


def register_well_known(week_fields: WeekFields) -> WeekFields:
    """Declare a definition every default registry is seeded with."""
    _WELL_KNOWN.append(week_fields)
    if _registry is not None:
        return _registry.register(week_fields)
    return week_fields


def get_registry() -> WeekFieldsRegistry:
    """Get the global week definition registry."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                _registry = WeekFieldsRegistry(seed=_WELL_KNOWN)
    return _registry


def reset_registry() -> None:
    """Reset the global registry (for testing)."""
    global _registry
    with _registry_lock:
        _registry = None

"""
Common temporal adjusters.

An adjuster is any callable taking a temporal and returning an adjusted
copy. They are applied with `IsoDate.with_adjuster`:

    date.with_adjuster(last_day_of_month())
    date.with_adjuster(next_or_same_day_of_week(DayOfWeek.MONDAY))

Adjusters only use the field/unit calculus (with_field, plus, range), so
they work with any temporal that supports the fields involved.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .fields import ChronoField
from .models import DayOfWeek
from .units import ChronoUnit

Adjuster = Callable[[Any], Any]

_DAY_OF_MONTH = ChronoField.DAY_OF_MONTH
_DAY_OF_YEAR = ChronoField.DAY_OF_YEAR
_DAY_OF_WEEK = ChronoField.DAY_OF_WEEK


def of_date_adjuster(date_operator: Callable[[Any], Any]) -> Adjuster:
    """Wrap a plain date-to-date function as an adjuster."""

    def adjust(temporal: Any) -> Any:
        return date_operator(temporal)

    return adjust


# =============================================================================
# Month and year boundaries
# =============================================================================


def first_day_of_month() -> Adjuster:
    return lambda temporal: temporal.with_field(_DAY_OF_MONTH, 1)


def last_day_of_month() -> Adjuster:
    return lambda temporal: temporal.with_field(_DAY_OF_MONTH, temporal.range(_DAY_OF_MONTH).maximum)


def first_day_of_next_month() -> Adjuster:
    return lambda temporal: temporal.with_field(_DAY_OF_MONTH, 1).plus(1, ChronoUnit.MONTHS)


def first_day_of_year() -> Adjuster:
    return lambda temporal: temporal.with_field(_DAY_OF_YEAR, 1)


def last_day_of_year() -> Adjuster:
    return lambda temporal: temporal.with_field(_DAY_OF_YEAR, temporal.range(_DAY_OF_YEAR).maximum)


def first_day_of_next_year() -> Adjuster:
    return lambda temporal: temporal.with_field(_DAY_OF_YEAR, 1).plus(1, ChronoUnit.YEARS)


# =============================================================================
# Day-of-week in month
# =============================================================================


def first_in_month(day_of_week: DayOfWeek) -> Adjuster:
    """First occurrence of the day of week in the month, e.g. first Tuesday."""
    return day_of_week_in_month(1, day_of_week)


def last_in_month(day_of_week: DayOfWeek) -> Adjuster:
    return day_of_week_in_month(-1, day_of_week)


def day_of_week_in_month(ordinal: int, day_of_week: DayOfWeek) -> Adjuster:
    """
    Ordinal occurrence of a day of week within the month.

    Args:
        ordinal: 1 for the first occurrence, 2 for the second, ...;
            -1 for the last, -2 for the second to last, ...;
            0 for the last occurrence in the previous month.
            Values beyond the month move into later (or earlier) months.
        day_of_week: Day of week to find
    """
    dow_value = DayOfWeek.parse(day_of_week).value
    if ordinal >= 0:

        def adjust_forward(temporal: Any) -> Any:
            start = temporal.with_field(_DAY_OF_MONTH, 1)
            current = start.get(_DAY_OF_WEEK)
            days_diff = (dow_value - current + 7) % 7
            days_diff += (ordinal - 1) * 7
            return start.plus(days_diff, ChronoUnit.DAYS)

        return adjust_forward

    def adjust_backward(temporal: Any) -> Any:
        end = temporal.with_field(_DAY_OF_MONTH, temporal.range(_DAY_OF_MONTH).maximum)
        current = end.get(_DAY_OF_WEEK)
        days_diff = dow_value - current
        if days_diff > 0:
            days_diff -= 7
        days_diff -= (-ordinal - 1) * 7
        return end.plus(days_diff, ChronoUnit.DAYS)

    return adjust_backward


# =============================================================================
# Relative day-of-week
# =============================================================================


def next_day_of_week(day_of_week: DayOfWeek) -> Adjuster:
    """Next occurrence strictly after the date."""
    dow_value = DayOfWeek.parse(day_of_week).value

    def adjust(temporal: Any) -> Any:
        current = temporal.get(_DAY_OF_WEEK)
        days_diff = current - dow_value
        return temporal.plus(7 - days_diff if days_diff >= 0 else -days_diff, ChronoUnit.DAYS)

    return adjust


def next_or_same_day_of_week(day_of_week: DayOfWeek) -> Adjuster:
    dow_value = DayOfWeek.parse(day_of_week).value

    def adjust(temporal: Any) -> Any:
        current = temporal.get(_DAY_OF_WEEK)
        if current == dow_value:
            return temporal
        days_diff = current - dow_value
        return temporal.plus(7 - days_diff if days_diff >= 0 else -days_diff, ChronoUnit.DAYS)

    return adjust


def previous_day_of_week(day_of_week: DayOfWeek) -> Adjuster:
    """Previous occurrence strictly before the date."""
    dow_value = DayOfWeek.parse(day_of_week).value

    def adjust(temporal: Any) -> Any:
        current = temporal.get(_DAY_OF_WEEK)
        days_diff = dow_value - current
        return temporal.minus(7 - days_diff if days_diff >= 0 else -days_diff, ChronoUnit.DAYS)

    return adjust


def previous_or_same_day_of_week(day_of_week: DayOfWeek) -> Adjuster:
    dow_value = DayOfWeek.parse(day_of_week).value

    def adjust(temporal: Any) -> Any:
        current = temporal.get(_DAY_OF_WEEK)
        if current == dow_value:
            return temporal
        days_diff = dow_value - current
        return temporal.minus(7 - days_diff if days_diff >= 0 else -days_diff, ChronoUnit.DAYS)

    return adjust

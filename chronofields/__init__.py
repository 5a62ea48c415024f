"""
chronofields: calendrical field/unit calculus.

A library for querying, adjusting and reconstructing dates through
orthogonal fields (year, day-of-week, week-of-month, ...) and units
(days, weeks, months, ...), including localized week numbering, the
ISO-8601 week-based calendar and strict/smart/lenient field resolution.

Usage:
    from chronofields.core.temporal import IsoDate, WeekFields
    date = IsoDate.of(2008, 12, 29)
    date.get(WeekFields.ISO.week_based_year)  # 2009
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

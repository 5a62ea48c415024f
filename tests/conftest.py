"""
Pytest configuration and fixtures for chronofields tests.

Provides fixtures for:
- Isolation of the global week registry and cached settings
- Common week definitions
- Settings files
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chronofields.core.settings import CONFIG_ENV, ENV_OVERRIDES, reset_settings
from chronofields.core.temporal import DayOfWeek, WeekFields, WeekFieldsRegistry, reset_registry

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with default settings and a fresh registry."""
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    for env_name in ENV_OVERRIDES:
        monkeypatch.delenv(env_name, raising=False)
    reset_settings()
    reset_registry()
    yield
    reset_settings()
    reset_registry()


# =============================================================================
# Week Definitions
# =============================================================================


@pytest.fixture
def iso_weeks() -> WeekFields:
    """ISO-8601 weeks: Monday start, 4 days in the first week."""
    return WeekFields.ISO


@pytest.fixture
def us_weeks() -> WeekFields:
    """US weeks: Sunday start, 1 day in the first week."""
    return WeekFields.of(DayOfWeek.SUNDAY, 1)


@pytest.fixture
def registry() -> WeekFieldsRegistry:
    """An isolated registry, independent from the global one."""
    return WeekFieldsRegistry()


# =============================================================================
# Settings Files
# =============================================================================


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Settings file selecting strict resolution and US weeks."""
    path = tmp_path / "chronofields.yaml"
    path.write_text(
        "resolver_style: strict\nfirst_day_of_week: SUNDAY\nminimal_days_in_first_week: 1\n",
        encoding="utf-8",
    )
    return path

"""
Library settings.

Defaults for the resolver style and the week definition used when callers
do not pass one explicitly. Settings come from, in increasing priority:

1. Built-in defaults (smart resolution, ISO weeks)
2. A YAML file, path given by CHRONOFIELDS_CONFIG
3. Environment variables CHRONOFIELDS_RESOLVER_STYLE,
   CHRONOFIELDS_FIRST_DAY_OF_WEEK and CHRONOFIELDS_MINIMAL_DAYS

Example YAML:

    resolver_style: strict
    first_day_of_week: SUNDAY
    minimal_days_in_first_week: 1
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from chronofields.core.temporal.errors import InvalidConfigurationError
from chronofields.core.temporal.models import DayOfWeek, ResolverStyle

if TYPE_CHECKING:
    from chronofields.core.temporal.week_fields import WeekFields

logger = logging.getLogger(__name__)

CONFIG_ENV = "CHRONOFIELDS_CONFIG"

# Environment variable -> settings key
ENV_OVERRIDES = {
    "CHRONOFIELDS_RESOLVER_STYLE": "resolver_style",
    "CHRONOFIELDS_FIRST_DAY_OF_WEEK": "first_day_of_week",
    "CHRONOFIELDS_MINIMAL_DAYS": "minimal_days_in_first_week",
}


class ChronoSettings(BaseModel, frozen=True):
    """Effective library settings."""

    resolver_style: ResolverStyle = Field(
        default=ResolverStyle.SMART,
        description="Default resolver style for resolve()",
    )
    first_day_of_week: DayOfWeek = Field(
        default=DayOfWeek.MONDAY,
        description="First day of week of the default week definition",
    )
    minimal_days_in_first_week: int = Field(
        default=4,
        ge=1,
        le=7,
        description="Minimal days in first week of the default week definition",
    )

    @field_validator("resolver_style", mode="before")
    @classmethod
    def _parse_style(cls, value: Any) -> ResolverStyle:
        try:
            return ResolverStyle.parse(value)
        except ValueError:
            raise ValueError(f"unknown resolver style {value!r}") from None

    @field_validator("first_day_of_week", mode="before")
    @classmethod
    def _parse_day(cls, value: Any) -> DayOfWeek:
        try:
            return DayOfWeek.parse(value)
        except (KeyError, ValueError):
            raise ValueError(f"unknown day of week {value!r}") from None

    def week_fields(self) -> WeekFields:
        """Week definition described by these settings (cached in the registry)."""
        from chronofields.core.temporal.week_fields import WeekFields

        return WeekFields.of(self.first_day_of_week, self.minimal_days_in_first_week)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise InvalidConfigurationError(
            f"Cannot read settings file {path}: {e}",
            code="CHF-CFG-003",
            context={"path": str(path)},
        ) from e
    except yaml.YAMLError as e:
        raise InvalidConfigurationError(
            f"Invalid YAML in settings file {path}: {e}",
            code="CHF-CFG-003",
            context={"path": str(path)},
        ) from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Settings file {path} must contain a mapping",
            code="CHF-CFG-003",
            context={"path": str(path)},
        )
    return data


def load_settings(path: Path | str | None = None) -> ChronoSettings:
    """
    Load settings from YAML and environment overrides.

    Args:
        path: Settings file; defaults to $CHRONOFIELDS_CONFIG if set

    Returns:
        Validated settings

    Raises:
        InvalidConfigurationError: If the file or an override is invalid
    """
    data: dict[str, Any] = {}

    if path is None:
        env_path = os.environ.get(CONFIG_ENV)
        if env_path:
            path = env_path
    if path is not None:
        data.update(_read_yaml(Path(path)))
        logger.debug("Loaded settings from %s", path)

    for env_name, key in ENV_OVERRIDES.items():
        env_value = os.environ.get(env_name)
        if env_value:
            data[key] = env_value
            logger.debug("Settings override %s=%s from %s", key, env_value, env_name)

    try:
        return ChronoSettings(**data)
    except ValidationError as e:
        raise InvalidConfigurationError(
            f"Invalid settings: {e.errors(include_url=False)}",
            code="CHF-CFG-003",
            context={"keys": sorted(data)},
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> ChronoSettings:
    """Get the process-wide settings, loaded on first use."""
    return load_settings()


def reset_settings() -> None:
    """Drop cached settings (for testing)."""
    get_settings.cache_clear()

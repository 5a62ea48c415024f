"""
CLI context and configuration.

Manages exit codes and the options shared by all commands.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field

from chronofields.core.temporal import DayOfWeek, ResolverStyle, WeekFields


class ExitCode(IntEnum):
    """CLI exit codes following Unix conventions."""

    SUCCESS = 0  # Command completed
    ERROR = 1  # Temporal error (invalid value, rejected resolution, ...)
    FATAL = 2  # Unexpected failure
    USAGE = 64  # Command line usage error
    CONFIG = 78  # Configuration error


class CliContext(BaseModel):
    """Options shared by CLI commands, defaults taken from settings."""

    format: str = Field(default="terminal")
    color: bool = Field(default=True)
    style: ResolverStyle = Field(default=ResolverStyle.SMART)
    first_day_of_week: DayOfWeek = Field(default=DayOfWeek.MONDAY)
    minimal_days_in_first_week: int = Field(default=4)

    model_config = {"frozen": False}

    def week_fields(self) -> WeekFields:
        """Week definition selected by --first-day / --min-days."""
        return WeekFields.of(self.first_day_of_week, self.minimal_days_in_first_week)

"""
Main CLI application.

Entry point for the chronofields command.
"""

from __future__ import annotations

from typing import Annotated

import typer

import chronofields
from chronofields.cli.context import CliContext, ExitCode
from chronofields.cli.output import OutputFormat, get_output_adapter
from chronofields.cli.reports import build_field_report, build_resolve_report
from chronofields.core.settings import get_settings
from chronofields.core.temporal import (
    DayOfWeek,
    InvalidConfigurationError,
    IsoDate,
    ResolverStyle,
    TemporalError,
    get_field,
    resolve_fields,
)

# Create main app
app = typer.Typer(
    name="chronofields",
    help="Calendrical field calculator: week numbers, quarters and field resolution",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"chronofields {chronofields.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Calendrical field calculator."""
    pass


def _build_context(
    format: str,
    color: bool,
    style: str | None,
    first_day: str | None,
    min_days: int | None,
) -> CliContext:
    """Merge command options over the configured settings."""
    try:
        settings = get_settings()
    except InvalidConfigurationError as e:
        typer.echo(f"Configuration error: {e.detail}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    try:
        return CliContext(
            format=OutputFormat(format).value,
            color=color,
            style=ResolverStyle.parse(style) if style is not None else settings.resolver_style,
            first_day_of_week=(
                DayOfWeek.parse(first_day) if first_day is not None else settings.first_day_of_week
            ),
            minimal_days_in_first_week=(
                min_days if min_days is not None else settings.minimal_days_in_first_week
            ),
        )
    except (KeyError, ValueError) as e:
        typer.echo(f"Invalid option: {e}", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: terminal, json"),
]
ColorOption = Annotated[
    bool,
    typer.Option("--color/--no-color", help="Enable/disable colored output"),
]
FirstDayOption = Annotated[
    str | None,
    typer.Option("--first-day", help="First day of week, e.g. MONDAY or 7 (default from settings)"),
]
MinDaysOption = Annotated[
    int | None,
    typer.Option("--min-days", help="Minimal days in first week, 1-7 (default from settings)"),
]


# =============================================================================
# Fields Command
# =============================================================================


@app.command()
def fields(
    date: Annotated[str, typer.Argument(help="ISO date, e.g. 2008-12-29")],
    first_day: FirstDayOption = None,
    min_days: MinDaysOption = None,
    format: FormatOption = "terminal",
    color: ColorOption = True,
) -> None:
    """Show intrinsic, ISO and localized week fields of a date."""
    ctx = _build_context(format, color, None, first_day, min_days)

    try:
        week_fields = ctx.week_fields()
        report = build_field_report(IsoDate.parse(date), week_fields)
    except InvalidConfigurationError as e:
        typer.echo(f"Error: {e.detail}", err=True)
        raise typer.Exit(ExitCode.USAGE) from None
    except TemporalError as e:
        typer.echo(f"Error: {e.detail}", err=True)
        raise typer.Exit(ExitCode.ERROR) from None

    adapter = get_output_adapter(ctx.format, color=ctx.color)
    typer.echo(adapter.render_fields(report))


# =============================================================================
# Resolve Command
# =============================================================================


def _parse_assignments(assignments: list[str]) -> dict[str, int]:
    parsed: dict[str, int] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Expected NAME=VALUE, got {assignment!r}")
        try:
            parsed[name.strip()] = int(value)
        except ValueError:
            raise typer.BadParameter(f"Value of {name.strip()} must be an integer") from None
    return parsed


@app.command()
def resolve(
    assignments: Annotated[
        list[str],
        typer.Argument(help="Field values, e.g. WeekBasedYear=2009 WeekOfWeekBasedYear=1 DayOfWeek=1"),
    ],
    style: Annotated[
        str | None,
        typer.Option("--style", "-s", help="Resolver style: strict, smart, lenient (default from settings)"),
    ] = None,
    first_day: FirstDayOption = None,
    min_days: MinDaysOption = None,
    format: FormatOption = "terminal",
    color: ColorOption = True,
) -> None:
    """
    Resolve field values into a date.

    Localized week fields take a 'week.' prefix, e.g. week.WeekOfYear=1.
    """
    ctx = _build_context(format, color, style, first_day, min_days)
    parsed = _parse_assignments(assignments)

    try:
        week_fields = ctx.week_fields()
        field_values = {get_field(name, week_fields): value for name, value in parsed.items()}
        resolution = resolve_fields(field_values, style=ctx.style)
    except InvalidConfigurationError as e:
        typer.echo(f"Error: {e.detail}", err=True)
        raise typer.Exit(ExitCode.USAGE) from None
    except TemporalError as e:
        typer.echo(f"Error: {e.detail}", err=True)
        raise typer.Exit(ExitCode.ERROR) from None

    adapter = get_output_adapter(ctx.format, color=ctx.color)
    typer.echo(adapter.render_resolution(build_resolve_report(parsed, resolution, week_fields)))
    if resolution.date is None:
        raise typer.Exit(ExitCode.ERROR)


if __name__ == "__main__":
    app()

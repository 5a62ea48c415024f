"""Tests for CLI output adapters."""

import io
import json

import pytest

from chronofields.cli.output import JsonOutput, OutputFormat, TerminalOutput, get_output_adapter
from chronofields.cli.reports import build_field_report, build_resolve_report
from chronofields.core.temporal import ChronoField, IsoDate, WeekFields, resolve_fields


def make_field_report():
    return build_field_report(IsoDate.of(2008, 12, 29), WeekFields.ISO)


def make_resolve_report(fields: dict[str, int]):
    field_values = {ChronoField[name]: value for name, value in fields.items()}
    return build_resolve_report(fields, resolve_fields(field_values, style="smart"), WeekFields.ISO)


class TestReports:
    """Tests for report building."""

    def test_field_report(self) -> None:
        """Test the field report covers all three groups."""
        report = make_field_report()

        assert report.date == "2008-12-29"
        assert [value.name for value in report.iso] == [
            "DayOfQuarter",
            "QuarterOfYear",
            "WeekOfWeekBasedYear",
            "WeekBasedYear",
        ]
        assert len(report.localized) == 5
        day_of_year = next(value for value in report.intrinsic if value.name == "DayOfYear")
        assert (day_of_year.value, day_of_year.range) == (364, "1 - 366")

    def test_resolve_report(self) -> None:
        """Test the resolve report carries date and leftovers."""
        report = make_resolve_report({"YEAR": 2024, "DAY_OF_YEAR": 60})

        assert report.date == "2024-02-29"
        assert report.style == "smart"
        assert report.unresolved == {}


class TestTerminalOutput:
    """Tests for TerminalOutput."""

    def test_render_fields(self) -> None:
        """Test sections and aligned values."""
        output = TerminalOutput(color=False).render_fields(make_field_report())

        assert output.splitlines()[0] == "2008-12-29"
        assert "Fields" in output
        assert "ISO" in output
        assert "Localized WeekFields[MONDAY,4]" in output
        assert "(1 - 53)" in output

    def test_render_resolution(self) -> None:
        """Test a resolved date is shown."""
        output = TerminalOutput(color=False).render_resolution(make_resolve_report({"EPOCH_DAY": 0}))

        assert "Style: smart" in output
        assert "1970-01-01" in output

    def test_render_unresolved(self) -> None:
        """Test incomplete fields are reported."""
        output = TerminalOutput(color=False).render_resolution(make_resolve_report({"YEAR": 2024}))

        assert "Fields do not describe a complete date" in output
        assert "Unresolved: Year=2024" in output

    def test_no_color_without_tty(self) -> None:
        """Test colors are only used on a TTY."""
        output = TerminalOutput(stream=io.StringIO(), color=True).render_fields(make_field_report())

        assert "\033[" not in output


class TestJsonOutput:
    """Tests for JsonOutput."""

    def test_render_fields(self) -> None:
        """Test the field report as JSON."""
        data = json.loads(JsonOutput().render_fields(make_field_report()))

        assert data["date"] == "2008-12-29"
        assert data["week_definition"] == "WeekFields[MONDAY,4]"

    def test_render_resolution(self) -> None:
        """Test the resolve report as JSON."""
        data = json.loads(JsonOutput().render_resolution(make_resolve_report({"YEAR": 2024})))

        assert data["date"] is None
        assert data["unresolved"] == {"Year": 2024}

    def test_write_appends_newline(self) -> None:
        """Test write terminates the content."""
        stream = io.StringIO()
        JsonOutput(stream=stream).write("{}")

        assert stream.getvalue() == "{}\n"


class TestGetOutputAdapter:
    """Tests for get_output_adapter."""

    @pytest.mark.parametrize(
        ("format", "adapter_class"),
        [("terminal", TerminalOutput), (OutputFormat.JSON, JsonOutput)],
    )
    def test_known_formats(self, format: object, adapter_class: type) -> None:
        """Test adapters by name and enum."""
        assert isinstance(get_output_adapter(format), adapter_class)

    def test_unknown_format(self) -> None:
        """Test unknown formats raise."""
        with pytest.raises(ValueError):
            get_output_adapter("xml")

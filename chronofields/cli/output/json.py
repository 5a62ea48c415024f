"""
JSON output adapter.

Renders reports as JSON for machine processing.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from chronofields.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from chronofields.cli.reports import FieldReport, ResolveReport


class JsonOutput(OutputAdapter):
    """JSON output adapter."""

    format = OutputFormat.JSON

    def __init__(self, stream: TextIO | None = None, color: bool = False, indent: int = 2):
        super().__init__(stream=stream, color=False)  # Never colorize JSON
        self.indent = indent

    def render_fields(self, report: FieldReport) -> str:
        return json.dumps(report.model_dump(), indent=self.indent, default=str)

    def render_resolution(self, report: ResolveReport) -> str:
        return json.dumps(report.model_dump(), indent=self.indent, default=str)

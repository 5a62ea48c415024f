"""
Output adapter base classes.

Defines the interface for output adapters.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from chronofields.cli.reports import FieldReport, ResolveReport


class OutputFormat(Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"


class OutputAdapter(ABC):
    """Base class for output adapters."""

    format: OutputFormat

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color

    @abstractmethod
    def render_fields(self, report: FieldReport) -> str:
        """Render the field values of a date."""
        pass

    @abstractmethod
    def render_resolution(self, report: ResolveReport) -> str:
        """Render the outcome of a resolution."""
        pass

    def write(self, content: str) -> None:
        """Write content to stream."""
        self.stream.write(content)
        if not content.endswith("\n"):
            self.stream.write("\n")
        self.stream.flush()


def get_output_adapter(
    format: OutputFormat | str,
    stream: TextIO | None = None,
    color: bool = True,
) -> OutputAdapter:
    """Get an output adapter by format."""
    if isinstance(format, str):
        format = OutputFormat(format)

    if format == OutputFormat.TERMINAL:
        from chronofields.cli.output.terminal import TerminalOutput

        return TerminalOutput(stream=stream, color=color)
    elif format == OutputFormat.JSON:
        from chronofields.cli.output.json import JsonOutput

        return JsonOutput(stream=stream, color=color)
    else:
        raise ValueError(f"Unknown output format: {format}")

"""
Terminal output adapter.

Renders reports as aligned tables with optional ANSI colors.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from chronofields.cli.output.base import OutputAdapter, OutputFormat

if TYPE_CHECKING:
    from chronofields.cli.reports import FieldReport, FieldValue, ResolveReport


def _supports_unicode() -> bool:
    """Check if terminal supports Unicode."""
    try:
        "✓".encode(sys.stdout.encoding or "utf-8")
        return True
    except (UnicodeEncodeError, LookupError):
        return False


SUCCESS_SYMBOL_UNICODE = "✓"
SUCCESS_SYMBOL_ASCII = "OK"

# ANSI color codes
STYLE_CODES = {
    "bold": "\033[1m",
    "dim": "\033[2m",
    "green": "\033[32m",
    "yellow": "\033[33m",
}
RESET = "\033[0m"


class TerminalOutput(OutputAdapter):
    """Human readable output."""

    format = OutputFormat.TERMINAL

    def __init__(self, stream: TextIO | None = None, color: bool = True):
        super().__init__(stream=stream, color=color)
        self._use_color = color and self._is_tty()
        self._success_symbol = SUCCESS_SYMBOL_UNICODE if _supports_unicode() else SUCCESS_SYMBOL_ASCII

    def _is_tty(self) -> bool:
        """Check if output is a TTY."""
        return hasattr(self.stream, "isatty") and self.stream.isatty()

    def render_fields(self, report: FieldReport) -> str:
        lines = [self._style(report.date, "bold")]
        sections = (
            ("Fields", report.intrinsic),
            ("ISO", report.iso),
            (f"Localized {report.week_definition}", report.localized),
        )
        width = max(len(v.name) for _, values in sections for v in values)
        for title, values in sections:
            lines.append("")
            lines.append(self._style(title, "bold"))
            lines.extend(self._format_value(value, width) for value in values)
        return "\n".join(lines)

    def render_resolution(self, report: ResolveReport) -> str:
        lines = [f"Style: {report.style}", f"Weeks: {report.week_definition}"]
        if report.date is None:
            lines.append(self._style("Fields do not describe a complete date", "yellow"))
        else:
            lines.append(self._style(f"{self._success_symbol} {report.date}", "green"))
        if report.unresolved:
            leftover = ", ".join(f"{name}={value}" for name, value in report.unresolved.items())
            lines.append(self._style(f"Unresolved: {leftover}", "dim"))
        return "\n".join(lines)

    def _format_value(self, value: FieldValue, width: int) -> str:
        return f"  {value.name:<{width}}  {value.value:>10}  {self._style(f'({value.range})', 'dim')}"

    def _style(self, text: str, style: str) -> str:
        """Apply style to text if colors are enabled."""
        if not self._use_color:
            return text
        code = STYLE_CODES.get(style, "")
        if code:
            return f"{code}{text}{RESET}"
        return text

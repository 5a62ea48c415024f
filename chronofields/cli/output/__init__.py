"""
Output adapters for CLI.

Provides different output formats: terminal, JSON.
"""

from chronofields.cli.output.base import OutputAdapter, OutputFormat, get_output_adapter
from chronofields.cli.output.json import JsonOutput
from chronofields.cli.output.terminal import TerminalOutput

__all__ = [
    "JsonOutput",
    "OutputAdapter",
    "OutputFormat",
    "TerminalOutput",
    "get_output_adapter",
]

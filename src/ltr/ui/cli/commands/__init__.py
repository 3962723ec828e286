"""Command execution package for CLI."""

from ltr.ui.cli.commands.report import ReportCommand
from ltr.ui.cli.commands.sources import read_sources

__all__ = ["ReportCommand", "read_sources"]

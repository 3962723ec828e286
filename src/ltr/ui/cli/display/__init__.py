"""Display helpers for CLI output."""

from ltr.ui.cli.display.report import ReportDisplay

__all__ = ["ReportDisplay"]

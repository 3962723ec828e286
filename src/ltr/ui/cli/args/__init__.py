"""Command line argument handling package."""

from ltr.ui.cli.args.parser import ArgumentParser
from ltr.ui.cli.args.options import ReportArgs

__all__ = ["ArgumentParser", "ReportArgs"]

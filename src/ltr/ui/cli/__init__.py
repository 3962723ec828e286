"""Command line interface package."""

from ltr.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]

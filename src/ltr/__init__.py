"""ltr - segment text into linguistic units and report on them."""

__version__ = "0.1.0"

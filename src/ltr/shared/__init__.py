# Where: ltr.shared.__init__
# What: Provide a concise import surface for cross-cutting error types.
# Why: Let every layer raise and catch the same exceptions.

"""Shared cross-cutting utilities exposed at the package level."""

from .errors import InvalidLocale, InvalidUnitKind, LtrError, UnknownOption

__all__ = ["InvalidLocale", "InvalidUnitKind", "LtrError", "UnknownOption"]

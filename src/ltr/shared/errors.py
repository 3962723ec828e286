# Where: ltr.shared.errors
# What: Exception hierarchy raised by the segmentation and aggregation core.
# Why: Give the CLI boundary a single base class to catch and report.


class LtrError(Exception):
    """Base class for errors raised by ltr."""


class InvalidUnitKind(LtrError, ValueError):
    """Raised when a command does not name a known unit kind."""

    def __init__(self, command: object) -> None:
        super().__init__(f"Unknown unit kind: {command!r} (expected chars, words, or sentences)")
        self.command = command


class InvalidLocale(LtrError, ValueError):
    """Raised when a locale identifier cannot be resolved."""

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        message = f"Invalid locale: {identifier!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.identifier = identifier


class UnknownOption(LtrError, KeyError):
    """Raised when an aggregation option name is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown option: {self.name!r}"


__all__ = ["InvalidLocale", "InvalidUnitKind", "LtrError", "UnknownOption"]

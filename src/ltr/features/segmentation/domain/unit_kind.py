"""
Summary: Unit kinds selecting segmentation granularity and filter policy.
Why: Map command names onto one closed set of segmentation modes.
"""

from __future__ import annotations

from enum import Enum

from ltr.shared.errors import InvalidUnitKind


class UnitKind(Enum):
    """Granularity of the units a text is split into."""

    GRAPHEME = "chars"
    WORD = "words"
    SENTENCE = "sentences"

    @property
    def command(self) -> str:
        """Command name selecting this kind."""
        return self.value

    @classmethod
    def from_command(cls, command: str) -> "UnitKind":
        """Return the kind for ``chars``, ``words`` or ``sentences``.

        Raises:
            InvalidUnitKind: If ``command`` names no kind.
        """
        try:
            return cls(command)
        except ValueError as exc:
            raise InvalidUnitKind(command) from exc

    @classmethod
    def commands(cls) -> tuple[str, ...]:
        return tuple(kind.value for kind in cls)


__all__ = ["UnitKind"]

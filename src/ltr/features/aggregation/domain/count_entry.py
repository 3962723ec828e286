"""
Summary: Frequency pairing of a unit value and its occurrence count.
Why: Keep count rendering next to the value it formats.
"""

from dataclasses import dataclass
from typing import final


@final
@dataclass(frozen=True, slots=True)
class CountEntry:
    """A distinct unit and how often it occurred in one sequence."""

    value: str
    count: int

    def render(self) -> str:
        return f"{self.value}\t{self.count}"


__all__ = ["CountEntry"]

"""
Summary: Split one text into trimmed, filtered units of a given kind.
Why: Layer the keep/drop policy on top of library boundary detection.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import final

from ltr.features.segmentation.domain.unit_kind import UnitKind
from ltr.platform.unicode import (
    ResolvedLocale,
    Segment,
    grapheme_segments,
    sentence_segments,
    word_segments,
)
from ltr.shared.errors import InvalidUnitKind


def is_blank(text: str) -> bool:
    """Return True when every character is whitespace; empty counts as blank."""

    return all(char.isspace() for char in text)


@final
@dataclass(frozen=True, slots=True)
class Segmenter:
    """Callable turning text into units for one kind and locale."""

    kind: UnitKind
    locale: ResolvedLocale

    def __post_init__(self) -> None:
        if not isinstance(self.kind, UnitKind):
            raise InvalidUnitKind(self.kind)

    def __call__(self, text: str) -> tuple[str, ...]:
        """Segment ``text``.

        Grapheme and sentence segments survive unless blank. Word segments
        must also be word-like. Every kept unit is stripped of surrounding
        whitespace.
        """
        if is_blank(text):
            return ()

        units: list[str] = []
        for segment in self._candidates(text):
            if self.kind is UnitKind.WORD and not segment.word_like:
                continue
            if is_blank(segment.text):
                continue
            units.append(segment.text.strip())
        return tuple(units)

    def _candidates(self, text: str) -> Iterator[Segment]:
        if self.kind is UnitKind.GRAPHEME:
            return grapheme_segments(text, self.locale)
        if self.kind is UnitKind.WORD:
            return word_segments(text, self.locale)
        return sentence_segments(text, self.locale)


__all__ = ["Segmenter", "is_blank"]

"""Unicode text boundary detection.

Where: platform/unicode/boundaries.py
What: Yield grapheme, word, and sentence segments from raw text under a locale.
Why: Bind to ICU break iterators instead of reimplementing UAX #29.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import final

import icu

from .locales import ResolvedLocale

# ICU word rule statuses below this value mark spaces and punctuation.
WORD_NONE_LIMIT = 100


@final
@dataclass(frozen=True, slots=True)
class Segment:
    """One candidate segment as produced by the boundary algorithm.

    ``word_like`` is only meaningful for word segmentation; it is ``None``
    for graphemes and sentences.
    """

    text: str
    word_like: bool | None = None


def icu_locale(locale: ResolvedLocale) -> icu.Locale:
    """Build the ICU locale for a resolved BCP-47 tag."""

    return icu.Locale.forLanguageTag(locale.tag)


def _boundaries(
    factory: Callable[[icu.Locale], icu.BreakIterator],
    text: str,
    locale: ResolvedLocale,
) -> Iterator[tuple[str, int]]:
    """Yield ``(segment, rule_status)`` pairs covering ``text``.

    ICU offsets count UTF-16 code units, so segments are sliced from the
    ``UnicodeString`` and not from ``text``.
    """
    if not text:
        return
    source = icu.UnicodeString(text)
    iterator = factory(icu_locale(locale))
    iterator.setText(source)
    start = iterator.first()
    for end in iterator:
        yield str(source[start:end]), iterator.getRuleStatus()
        start = end


def grapheme_segments(text: str, locale: ResolvedLocale) -> Iterator[Segment]:
    """Yield extended grapheme clusters."""

    for piece, _status in _boundaries(icu.BreakIterator.createCharacterInstance, text, locale):
        yield Segment(piece)


def word_segments(text: str, locale: ResolvedLocale) -> Iterator[Segment]:
    """Yield word-boundary segments, flagging words, numbers, kana and ideographs.

    Languages written without spaces use ICU's dictionary-based rules.
    """
    for piece, status in _boundaries(icu.BreakIterator.createWordInstance, text, locale):
        yield Segment(piece, word_like=status >= WORD_NONE_LIMIT)


def sentence_segments(text: str, locale: ResolvedLocale) -> Iterator[Segment]:
    """Yield sentences; each keeps its trailing whitespace."""

    for piece, _status in _boundaries(icu.BreakIterator.createSentenceInstance, text, locale):
        yield Segment(piece)


__all__ = [
    "Segment",
    "WORD_NONE_LIMIT",
    "grapheme_segments",
    "icu_locale",
    "sentence_segments",
    "word_segments",
]

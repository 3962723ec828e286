"""Unicode facility adapters.

Where: platform/unicode/__init__.py
What: Re-export locale resolution, boundary detection, and collation bindings.
Why: Keep third-party Unicode libraries behind one import surface.
"""

from __future__ import annotations

from .boundaries import Segment, grapheme_segments, sentence_segments, word_segments
from .collation import Collator
from .locales import ResolvedLocale, resolve_locale

__all__ = [
    "Collator",
    "ResolvedLocale",
    "Segment",
    "grapheme_segments",
    "resolve_locale",
    "sentence_segments",
    "word_segments",
]

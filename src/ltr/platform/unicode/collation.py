"""Locale collation backed by ICU.

Where: platform/unicode/collation.py
What: Provide locale-tailored sort keys for lexical ordering of units.
Why: Sorting must follow the locale's collation order rather than code points.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from typing import final

import icu

from .boundaries import icu_locale
from .locales import ResolvedLocale


@lru_cache(maxsize=None)
def _collator_for(locale: ResolvedLocale) -> icu.Collator:
    """Build one ICU collator per locale and reuse it."""

    return icu.Collator.createInstance(icu_locale(locale))


@final
class Collator:
    """Collator bound to a resolved locale.

    Sort key generation does not mutate the ICU collator, so one engine is
    shared across threads.
    """

    def __init__(self, locale: ResolvedLocale, engine: icu.Collator | None = None) -> None:
        self.locale: ResolvedLocale = locale
        self._engine: icu.Collator = engine if engine is not None else _collator_for(locale)

    @classmethod
    def for_locale(cls, locale: ResolvedLocale) -> "Collator":
        return cls(locale)

    def sort_key(self, value: str) -> bytes:
        return self._engine.getSortKey(value)

    def sorted(self, units: Iterable[str]) -> tuple[str, ...]:
        """Return ``units`` in collation order; equal keys keep input order."""

        return tuple(sorted(units, key=self.sort_key))


__all__ = ["Collator"]

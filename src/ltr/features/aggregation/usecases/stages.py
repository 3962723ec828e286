"""
Summary: Pure transformation stages over immutable unit sequences.
Why: Make each aggregation step independently testable and composable.
"""

from __future__ import annotations

import unicodedata
from collections import Counter
from collections.abc import Iterable

from ltr.config.settings import COMBINING_DIACRITICS_END, COMBINING_DIACRITICS_START
from ltr.features.aggregation.domain.count_entry import CountEntry
from ltr.platform.unicode import Collator

Units = tuple[str, ...]


def _strip_diacritics(unit: str) -> str:
    # No recomposition: the result stays in decomposed form.
    decomposed = unicodedata.normalize("NFD", unit)
    return "".join(
        char
        for char in decomposed
        if not COMBINING_DIACRITICS_START <= ord(char) <= COMBINING_DIACRITICS_END
    )


def fold_accents(units: Iterable[str]) -> Units:
    """Replace each unit with its base characters."""

    return tuple(_strip_diacritics(unit) for unit in units)


def fold_case(units: Iterable[str]) -> Units:
    """Lowercase each unit using default (locale-insensitive) casing."""

    return tuple(unit.lower() for unit in units)


def sort_units(units: Iterable[str], collator: Collator) -> Units:
    """Sort units in collation order."""

    return collator.sorted(units)


def count_units(units: Iterable[str]) -> tuple[CountEntry, ...]:
    """Count occurrences by exact equality, in first-occurrence order."""

    return tuple(CountEntry(value, count) for value, count in Counter(units).items())


def sort_by_frequency(entries: Iterable[CountEntry]) -> tuple[CountEntry, ...]:
    """Order entries by descending count; ties keep their order."""

    return tuple(sorted(entries, key=lambda entry: -entry.count))


def render_counts(entries: Iterable[CountEntry]) -> Units:
    return tuple(entry.render() for entry in entries)


def unique_units(units: Iterable[str]) -> Units:
    """Drop repeats, keeping the first occurrence of each unit."""

    seen: set[str] = set()
    distinct: list[str] = []
    for unit in units:
        if unit in seen:
            continue
        seen.add(unit)
        distinct.append(unit)
    return tuple(distinct)


def reverse_units(units: Iterable[str]) -> Units:
    return tuple(reversed(tuple(units)))


def join_units(units: Iterable[str]) -> str:
    return "\n".join(units)


__all__ = [
    "Units",
    "count_units",
    "fold_accents",
    "fold_case",
    "join_units",
    "render_counts",
    "reverse_units",
    "sort_by_frequency",
    "sort_units",
    "unique_units",
]

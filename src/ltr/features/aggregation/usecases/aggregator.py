"""
Summary: Compose aggregation stages into one report for a unit sequence.
Why: Fix stage order and flag precedence in a single place.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import final

from ltr.features.aggregation.domain.options import AggregationOptions
from ltr.platform.unicode import Collator

from .stages import (
    Units,
    count_units,
    fold_accents,
    fold_case,
    join_units,
    render_counts,
    reverse_units,
    sort_by_frequency,
    sort_units,
    unique_units,
)


@final
@dataclass(frozen=True, slots=True)
class Aggregator:
    """Callable turning a unit sequence into a newline-joined report.

    Stage order:
        1. accent folding
        2. case folding
        3. collation sort, only when counting is off
        4. counting (optionally by descending frequency), else dedup
        5. reversal
        6. join
    """

    options: AggregationOptions
    collator: Collator | None = None

    def __post_init__(self) -> None:
        if self.options.sorts_lexically and self.collator is None:
            raise ValueError("A collator is required to sort units lexically")

    def __call__(self, units: Iterable[str]) -> str:
        return join_units(self.transform(units))

    def transform(self, units: Iterable[str]) -> Units:
        """Apply every enabled stage and return the lines of the report."""

        options = self.options
        staged: Units = tuple(units)

        if options.ignore_accents:
            staged = fold_accents(staged)
        if options.ignore_case:
            staged = fold_case(staged)

        if options.sorts_lexically:
            assert self.collator is not None
            staged = sort_units(staged, self.collator)

        if options.count:
            entries = count_units(staged)
            if options.sort:
                entries = sort_by_frequency(entries)
            staged = render_counts(entries)
        elif options.unique:
            staged = unique_units(staged)

        if options.reverse:
            staged = reverse_units(staged)

        return staged


__all__ = ["Aggregator"]

# Path: `src/ltr/features/aggregation/__init__.py`
# Summary: Export aggregation domain and use case symbols.
# Why: Provide a stable import surface for services and tests.

from .domain.count_entry import CountEntry
from .domain.options import AggregationOptions
from .usecases.aggregator import Aggregator
from .usecases.stages import (
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

__all__ = [
    "AggregationOptions",
    "Aggregator",
    "CountEntry",
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

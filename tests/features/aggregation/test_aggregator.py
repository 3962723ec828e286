"""Tests for stage composition and flag precedence in the aggregator."""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from ltr.features.aggregation import AggregationOptions, Aggregator
from ltr.platform.unicode import Collator, ResolvedLocale

EN = ResolvedLocale(tag="en", language="en")


@pytest.fixture(scope="module")
def collator() -> Collator:
    return Collator.for_locale(EN)


def _aggregate(units: list[str], collator: Collator | None = None, **flags: bool) -> str:
    return Aggregator(AggregationOptions(**flags), collator)(units)


def test_no_flags_preserves_order_and_duplicates() -> None:
    units = ["The", "the", "cat", "the"]
    assert _aggregate(units) == "The\nthe\ncat\nthe"


def test_empty_sequence_yields_empty_report() -> None:
    assert _aggregate([]) == ""
    assert _aggregate([], count=True, sort=True, reverse=True) == ""


def test_ignore_case_then_unique() -> None:
    assert _aggregate(["The", "the", "cat"], ignore_case=True, unique=True) == "the\ncat"


def test_accents_fold_before_case_and_dedup() -> None:
    units = ["Café", "cafe", "CAFÉ"]
    assert _aggregate(units, ignore_accents=True, ignore_case=True, unique=True) == "cafe"


def test_count_and_sort_orders_by_frequency() -> None:
    assert _aggregate(["a", "a", "b"], count=True, sort=True) == "a\t2\nb\t1"


def test_count_sort_and_reverse_yields_ascending_frequency() -> None:
    assert _aggregate(["a", "a", "b"], count=True, sort=True, reverse=True) == "b\t1\na\t2"


def test_count_without_sort_keeps_first_occurrence_order() -> None:
    assert _aggregate(["b", "a", "a"], count=True) == "b\t1\na\t2"


def test_count_sort_never_sorts_lexically(mocker: MockerFixture) -> None:
    collator = mocker.Mock(spec=Collator)
    report = _aggregate(["z", "y", "y"], collator, count=True, sort=True)
    assert report == "y\t2\nz\t1"
    collator.sorted.assert_not_called()


def test_count_takes_precedence_over_unique() -> None:
    assert _aggregate(["a", "b", "a"], count=True, unique=True) == "a\t2\nb\t1"


def test_sort_without_count_uses_collation(collator: Collator) -> None:
    units = ["zebra", "éclair", "apple"]
    assert _aggregate(units, collator, sort=True) == "apple\néclair\nzebra"


def test_sort_runs_before_unique(collator: Collator) -> None:
    units = ["b", "a", "c", "a", "b"]
    assert _aggregate(units, collator, sort=True, unique=True) == "a\nb\nc"


def test_sort_unique_reverse(collator: Collator) -> None:
    units = ["b", "a", "c", "a"]
    assert _aggregate(units, collator, sort=True, unique=True, reverse=True) == "c\nb\na"


def test_reverse_alone() -> None:
    assert _aggregate(["one", "two", "three"], reverse=True) == "three\ntwo\none"


def test_unique_is_idempotent_through_the_aggregator() -> None:
    aggregator = Aggregator(AggregationOptions(unique=True))
    once = aggregator.transform(["x", "y", "x", "z"])
    assert aggregator.transform(once) == once


def test_count_totals_equal_unit_total() -> None:
    units = ["a", "b", "a", "c", "b", "a"]
    lines = Aggregator(AggregationOptions(count=True)).transform(units)
    assert sum(int(line.split("\t")[1]) for line in lines) == len(units)


def test_lexical_sort_requires_a_collator() -> None:
    with pytest.raises(ValueError):
        _ = Aggregator(AggregationOptions(sort=True, locale="en"))


def test_count_sort_needs_no_collator() -> None:
    aggregator = Aggregator(AggregationOptions(count=True, sort=True))
    assert aggregator(["b", "a", "a"]) == "a\t2\nb\t1"


def test_sort_follows_the_collator_locale() -> None:
    swedish = Collator.for_locale(ResolvedLocale(tag="sv", language="sv"))
    assert _aggregate(["\u00e4pple", "zebra"], swedish, sort=True) == "zebra\n\u00e4pple"

"""Tests for unit kind command mapping."""

import pytest

from ltr.features.segmentation import UnitKind
from ltr.shared.errors import InvalidUnitKind


@pytest.mark.parametrize(
    ("command", "expected"),
    [
        ("chars", UnitKind.GRAPHEME),
        ("words", UnitKind.WORD),
        ("sentences", UnitKind.SENTENCE),
    ],
)
def test_from_command_maps_each_command(command: str, expected: UnitKind) -> None:
    assert UnitKind.from_command(command) is expected
    assert expected.command == command


@pytest.mark.parametrize("command", ["lines", "", "Words", "char"])
def test_from_command_rejects_unknown_names(command: str) -> None:
    with pytest.raises(InvalidUnitKind) as excinfo:
        _ = UnitKind.from_command(command)
    assert excinfo.value.command == command


def test_commands_lists_every_kind_in_declaration_order() -> None:
    assert UnitKind.commands() == ("chars", "words", "sentences")

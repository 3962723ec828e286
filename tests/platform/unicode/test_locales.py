"""Tests for locale resolution."""

from __future__ import annotations

import pytest

from ltr.platform.unicode import ResolvedLocale, resolve_locale
from ltr.shared.errors import InvalidLocale


@pytest.mark.parametrize(
    ("identifier", "tag", "language"),
    [
        ("en", "en", "en"),
        ("en-US", "en-US", "en"),
        ("en_US", "en-US", "en"),
        ("de_DE.UTF-8", "de-DE", "de"),
        ("zh-Hant-TW", "zh-Hant-TW", "zh"),
    ],
)
def test_resolves_explicit_identifiers(identifier: str, tag: str, language: str) -> None:
    resolved = resolve_locale(identifier)
    assert resolved == ResolvedLocale(tag=tag, language=language)
    assert str(resolved) == tag


@pytest.mark.parametrize("identifier", ["not-a-locale", "!!", "", "en-US-x-?"])
def test_rejects_invalid_identifiers(identifier: str) -> None:
    with pytest.raises(InvalidLocale) as excinfo:
        _ = resolve_locale(identifier)
    assert excinfo.value.identifier == identifier


def test_explicit_identifier_wins_over_default() -> None:
    assert resolve_locale("fr", default="de").language == "fr"


def test_configured_default_is_used_when_no_identifier() -> None:
    assert resolve_locale(None, default="de-AT").tag == "de-AT"


def test_invalid_configured_default_is_an_error() -> None:
    with pytest.raises(InvalidLocale):
        _ = resolve_locale(None, default="not-a-locale")


def test_environment_locale_is_used_without_identifier(
    locale_environment: pytest.MonkeyPatch,
) -> None:
    locale_environment.setenv("LANG", "fr_FR.UTF-8")

    assert resolve_locale(None).tag == "fr-FR"


def test_falls_back_to_english_without_environment(
    locale_environment: pytest.MonkeyPatch,
) -> None:
    _ = locale_environment

    assert resolve_locale(None).tag == "en"

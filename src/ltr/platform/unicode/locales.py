"""Locale resolution backed by Babel's CLDR data.

Where: platform/unicode/locales.py
What: Parse user and environment locale identifiers into validated values.
Why: Segmentation and collation must agree on one resolved locale.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from babel import Locale, UnknownLocaleError
from babel import default_locale as environment_locale

from ltr.config.settings import FALLBACK_LOCALE
from ltr.platform.logging import logger
from ltr.shared.errors import InvalidLocale


@final
@dataclass(frozen=True, slots=True)
class ResolvedLocale:
    """A locale identifier that Babel recognizes."""

    tag: str
    language: str

    @classmethod
    def from_babel(cls, locale: Locale) -> "ResolvedLocale":
        parts = [locale.language, locale.script, locale.territory, locale.variant]
        return cls(tag="-".join(p for p in parts if p), language=locale.language)

    def __str__(self) -> str:
        return self.tag


def _parse(identifier: str) -> Locale:
    """Parse a BCP-47 (``en-US``) or POSIX (``en_US.UTF-8``) identifier."""

    normalized = identifier.strip().replace("-", "_")
    return Locale.parse(normalized)


def resolve_locale(identifier: str | None, *, default: str | None = None) -> ResolvedLocale:
    """Resolve a locale identifier.

    Args:
        identifier: Explicit locale, usually from ``--locale``.
        default: Configured default used when ``identifier`` is ``None``.

    Returns:
        ResolvedLocale: The explicit locale, else the configured default,
        else the environment locale, else ``FALLBACK_LOCALE``.

    Raises:
        InvalidLocale: If an explicit or configured identifier cannot be parsed.
    """
    for candidate in (identifier, default):
        if candidate is None:
            continue
        try:
            return ResolvedLocale.from_babel(_parse(candidate))
        except (UnknownLocaleError, ValueError, TypeError) as exc:
            raise InvalidLocale(str(candidate), str(exc)) from exc

    env_identifier = environment_locale()
    if env_identifier:
        try:
            return ResolvedLocale.from_babel(_parse(env_identifier))
        except (UnknownLocaleError, ValueError) as exc:
            logger.debug(
                "Environment locale %r is not usable (%s); falling back to %s",
                env_identifier,
                exc,
                FALLBACK_LOCALE,
            )

    return ResolvedLocale.from_babel(_parse(FALLBACK_LOCALE))


__all__ = ["ResolvedLocale", "resolve_locale"]

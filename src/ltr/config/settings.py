"""Where: src/ltr/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from ltr.config.config import MAX_WORKERS_DEFAULT, Config


def default_locale(config: Config | None = None) -> str | None:
    """Return the configured default locale, if any."""

    app_config = config or Config.load()
    return app_config.locale


def max_workers(config: Config | None = None) -> int:
    """Return the validated worker bound for per-source processing."""

    app_config = config or Config.load()
    value = getattr(app_config, "max_workers", MAX_WORKERS_DEFAULT)
    return value if isinstance(value, int) and value > 0 else MAX_WORKERS_DEFAULT


# Code points considered combining diacritical marks by accent folding.
COMBINING_DIACRITICS_START: int = 0x0300
COMBINING_DIACRITICS_END: int = 0x036F

# Fallback locale when neither configuration nor environment name one.
FALLBACK_LOCALE: str = "en"


__all__ = [
    "COMBINING_DIACRITICS_END",
    "COMBINING_DIACRITICS_START",
    "FALLBACK_LOCALE",
    "default_locale",
    "max_workers",
]

"""Shared pytest fixtures for the whole suite."""

from __future__ import annotations

from pathlib import Path

import pytest

LOCALE_ENV_VARS: tuple[str, ...] = ("LANGUAGE", "LC_ALL", "LC_CTYPE", "LANG")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point configuration at an empty temporary location and reset the singleton."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("LTR_CONFIG", str(config_path))

    import ltr.config.config as config_module

    monkeypatch.setattr(config_module.Config, "_instance", None)
    monkeypatch.setattr(config_module.Config, "_loaded_from", None)
    return config_path


@pytest.fixture
def locale_environment(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear locale environment variables; tests set the ones they need."""

    for name in LOCALE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

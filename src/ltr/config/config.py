"""Configuration management for ltr."""

import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from ltr.config.paths import default_config_path
from ltr.platform.logging import logger

MAX_WORKERS_DEFAULT = 4


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Default locale used when neither --locale nor the environment provide one
    locale: str | None = None

    # Write a rotating log file; uses the default logs/ltr.log unless log_file is set
    log_to_file: bool = False

    # Log file path; setting it enables file logging
    log_file: Path | None = _path_field()

    # Upper bound for concurrently processed sources
    max_workers: int = MAX_WORKERS_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Only fields flagged with ``metadata={"path": True}`` by
        ``_path_field`` are converted; empty strings become ``None``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if isinstance(self.locale, str) and not self.locale.strip():
            self.locale = None

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit config path. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object, or defaults when no file exists.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        target = config_file or default_config_path()

        try:
            if target.exists():
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        target,
                        ", ".join(unknown),
                    )
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
                logger.debug("Configuration loaded from %s", target)
            else:
                instance = cls()
                logger.debug("No configuration file at %s; using defaults", target)

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = target
        return instance

"""
Configuration loader — reads an optional aifile YAML file into Settings.

The file only supplies defaults for the CLI flags; anything passed on
the command line wins.  It is read only when ``--config`` names it.

Accepted shapes::

    dir: web/src
    filename: ai.ts
    template: templates/ai.ts

or the same keys wrapped under an ``aifile:`` key.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the config file is unreadable or invalid."""


class Settings(BaseModel):
    """Defaults for an ensure run, as declared in a config file."""

    model_config = ConfigDict(extra="forbid")

    dir: str | None = None
    filename: str | None = None
    template: str | None = None


def load_settings(path: Path) -> Settings:
    """Load and validate a config file.

    Relative ``dir`` and ``template`` values are resolved against the
    config file's own directory.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    section = data.get("aifile", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected 'aifile' to be a mapping in {path}")

    try:
        settings = Settings.model_validate(section)
    except Exception as e:
        raise ConfigError(f"Invalid aifile configuration: {e}") from e

    base = path.parent.resolve()
    updates: dict[str, str] = {}
    if settings.dir and not Path(settings.dir).is_absolute():
        updates["dir"] = str(base / settings.dir)
    if settings.template and not Path(settings.template).is_absolute():
        updates["template"] = str(base / settings.template)
    if updates:
        settings = settings.model_copy(update=updates)

    logger.info("Loaded config from %s", path)
    return settings

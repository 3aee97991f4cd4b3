"""Read practice-tracker.yaml into a TrackerConfig."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from practice_tracker.config.schema import TrackerConfig

logger = logging.getLogger(__name__)


def _read_mapping(path: Path) -> dict[str, Any]:
    """Top-level YAML mapping in path; empty when the document is not a mapping."""
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        logger.debug("Config %s has no settings, using defaults", path)
        return {}
    return data


def load_config(path: Path | str | None = None) -> TrackerConfig:
    """Settings from path, falling back to defaults when there is no such file."""
    if path is None:
        return TrackerConfig()

    config_file = Path(path).expanduser()
    if not config_file.is_file():
        logger.debug("No config file at %s", config_file)
        return TrackerConfig()

    return TrackerConfig.model_validate(_read_mapping(config_file))

"""Shared test fixtures."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_tracker_logger():
    """Drop handlers bound to CliRunner streams between tests."""
    yield
    logger = logging.getLogger("practice_tracker")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sessions_file(tmp_path: Path) -> Path:
    """Path to a not-yet-created sessions file."""
    return tmp_path / "practice_sessions.txt"


@pytest.fixture
def mixed_sessions_file(tmp_path: Path) -> Path:
    """Sessions file with one malformed line between two valid ones."""
    path = tmp_path / "practice_sessions.txt"
    path.write_text("2024-01-01,45\nnot-a-date,60\n2024-01-02,30\n")
    return path


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    """Create a minimal valid config YAML file."""
    config = tmp_path / "practice-tracker.yaml"
    config.write_text(
        """\
storage:
  path: "custom_sessions.txt"
logging:
  level: "INFO"
"""
    )
    return config


@pytest.fixture
def empty_config_yaml(tmp_path: Path) -> Path:
    """Create an empty config YAML file."""
    config = tmp_path / "practice-tracker.yaml"
    config.write_text("{}\n")
    return config

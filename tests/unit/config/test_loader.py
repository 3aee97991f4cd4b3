"""Tests for configuration loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from practice_tracker.config.loader import load_config


class TestLoadConfig:
    def test_load_from_file(self, sample_config_yaml: Path):
        cfg = load_config(sample_config_yaml)
        assert cfg.storage.path == "custom_sessions.txt"
        assert cfg.logging.level == "INFO"
        # Unset values keep defaults
        assert cfg.logging.json_output is False

    def test_missing_file_returns_defaults(self, tmp_path: Path):
        cfg = load_config(tmp_path / "nonexistent.yaml")
        assert cfg.storage.path == "practice_sessions.txt"

    def test_none_path_returns_defaults(self):
        cfg = load_config(None)
        assert cfg.logging.level == "WARNING"

    def test_empty_yaml_returns_defaults(self, empty_config_yaml: Path):
        cfg = load_config(empty_config_yaml)
        assert cfg.storage.path == "practice_sessions.txt"

    def test_non_mapping_returns_defaults(self, tmp_path: Path):
        config = tmp_path / "list.yaml"
        config.write_text("- one\n- two\n")
        cfg = load_config(config)
        assert cfg.storage.path == "practice_sessions.txt"

    def test_directory_path_returns_defaults(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.storage.path == "practice_sessions.txt"

    def test_malformed_yaml_raises(self, tmp_path: Path):
        bad = tmp_path / "bad.yaml"
        bad.write_text(":\n  :\n    - :\n      :::invalid")
        with pytest.raises(ValueError, match="Malformed YAML"):
            load_config(bad)

    def test_invalid_value_raises(self, tmp_path: Path):
        config = tmp_path / "invalid.yaml"
        config.write_text("logging:\n  json_output: [1, 2]\n")
        with pytest.raises(ValidationError):
            load_config(config)

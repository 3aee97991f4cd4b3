"""Pydantic v2 models for Practice Tracker configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_SESSIONS_FILE = "practice_sessions.txt"


class StorageConfig(BaseModel):
    path: str = DEFAULT_SESSIONS_FILE

    @property
    def resolved_path(self) -> Path:
        """Sessions file path; relative paths resolve against the working directory."""
        return Path(self.path).expanduser()


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    json_output: bool = False


class TrackerConfig(BaseModel):
    """Root configuration model for Practice Tracker."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

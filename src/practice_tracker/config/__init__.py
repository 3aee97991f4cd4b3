"""Configuration system for Practice Tracker."""

from practice_tracker.config.loader import load_config
from practice_tracker.config.schema import TrackerConfig

__all__ = ["load_config", "TrackerConfig"]

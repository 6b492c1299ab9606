"""Utility functions and helpers."""

from sluggable.utils.config_loader import load_settings, load_yaml_config
from sluggable.utils.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "load_yaml_config",
    "load_settings",
]

"""
Configuration helpers for the scaffolder.
"""

from .models import DEFAULT_CONFIG_FILENAME, ConfigError, ScaffoldConfig, load_config
from .settings import Settings, get_settings

__all__ = ["DEFAULT_CONFIG_FILENAME", "ConfigError", "ScaffoldConfig", "load_config", "Settings", "get_settings"]

"""
Configuration helpers for the DarkSky command line front-end.
"""

from .settings import ConfigError, Settings, get_settings

__all__ = ["ConfigError", "Settings", "get_settings"]

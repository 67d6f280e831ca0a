"""
Configuration for pkgmatchkit.

Settings come from an optional pkgmatchkit.yaml file; every key has a
default matching the npm layout.
"""

from .settings import (
    DEFAULT_CONFIG_FILENAME,
    MatcherSettings,
    load_yaml_config,
    load_settings,
)

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "MatcherSettings",
    "load_yaml_config",
    "load_settings",
]

"""
Matcher settings loaded from pkgmatchkit.yaml.

All keys are optional:

    manifest_filename: package.json
    bin_directory: node_modules/.bin
    windows_link_suffix: cmd
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pkgmatchkit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "pkgmatchkit.yaml"


@dataclass(frozen=True)
class MatcherSettings:
    """
    Settings shared by the matchers.

    Attributes:
        manifest_filename: Manifest file read from a package directory
        bin_directory: Binary-installation directory, relative to the package
        windows_link_suffix: Extension of the shim written next to every
            link on Windows-style platforms (without the dot)
    """

    manifest_filename: str = "package.json"
    bin_directory: str = "node_modules/.bin"
    windows_link_suffix: str = "cmd"

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    f"Setting '{f.name}' must be a non-empty string, got {value!r}"
                )
        if self.windows_link_suffix.startswith("."):
            raise ConfigurationError(
                f"windows_link_suffix must not start with '.': "
                f"{self.windows_link_suffix!r}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatcherSettings":
        """
        Build settings from a parsed configuration mapping.

        Unknown keys are logged and ignored.

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown setting '{key}'")
        return cls(**{key: value for key, value in data.items() if key in known})


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        FileNotFoundError: If required=True and file doesn't exist
        ConfigurationError: If YAML parsing fails or the document is not a mapping
    """
    if not config_file.exists():
        if required:
            raise FileNotFoundError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration in {config_file} must be a mapping, "
            f"got {type(config).__name__}"
        )
    return config


def load_settings(
    config_file: Optional[Path] = None, project_root: Optional[Path] = None
) -> MatcherSettings:
    """
    Load matcher settings.

    Args:
        config_file: Explicit configuration file (must exist)
        project_root: Directory searched for pkgmatchkit.yaml when no
            explicit file is given (default: current directory)

    Returns:
        MatcherSettings with defaults for every key the file omits
    """
    if config_file is not None:
        config = load_yaml_config(Path(config_file), required=True)
    else:
        root = Path(project_root) if project_root is not None else Path.cwd()
        config = load_yaml_config(root / DEFAULT_CONFIG_FILENAME)
    return MatcherSettings.from_dict(config)


__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "MatcherSettings",
    "load_yaml_config",
    "load_settings",
]

"""
Read package manifests from disk.
"""

import json
import logging
import os
from pathlib import Path
from typing import Union

from pkgmatchkit.core.exceptions import InvalidManifestError, ManifestNotFoundError
from pkgmatchkit.manifest.models import Manifest

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_FILENAME = "package.json"


def read_manifest(
    directory: Union[str, os.PathLike], filename: str = DEFAULT_MANIFEST_FILENAME
) -> Manifest:
    """
    Read and parse the manifest in a package directory.

    Args:
        directory: Package directory
        filename: Manifest file name inside the directory

    Returns:
        Parsed Manifest

    Raises:
        ManifestNotFoundError: If the directory has no manifest
        InvalidManifestError: If the manifest is not a JSON object

    Example:
        >>> manifest = read_manifest("packages/cli")
        >>> manifest.name
        '@acme/cli'
    """
    manifest_path = Path(directory) / filename
    logger.debug(f"Reading manifest {manifest_path}")

    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestNotFoundError(manifest_path) from e
    except json.JSONDecodeError as e:
        raise InvalidManifestError(f"Invalid JSON in {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidManifestError(
            f"Manifest {manifest_path} must contain a JSON object, "
            f"got {type(data).__name__}"
        )

    return Manifest.from_dict(data)


__all__ = ["DEFAULT_MANIFEST_FILENAME", "read_manifest"]

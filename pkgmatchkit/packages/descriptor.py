"""
Package descriptors and package references.

A PackageDescriptor pairs a parsed manifest with the directory it was
read from, and knows where the package's binaries are linked. Matchers
accept either a descriptor or a directory; both are wrapped in a
PackageRef and turned into a descriptor by resolve_package().

Example:
    from pkgmatchkit.packages import resolve_package

    pkg = resolve_package("packages/cli")
    print(pkg.name, pkg.bin_location)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pkgmatchkit.config.settings import MatcherSettings, load_settings
from pkgmatchkit.core.filesystem import normalize_path
from pkgmatchkit.manifest.models import Manifest
from pkgmatchkit.manifest.reader import DEFAULT_MANIFEST_FILENAME, read_manifest

logger = logging.getLogger(__name__)

DEFAULT_BIN_DIRECTORY = "node_modules/.bin"


@dataclass(frozen=True)
class PackageDescriptor:
    """
    A package resolved to a location on disk.

    Attributes:
        manifest: Parsed manifest of the package
        location: Absolute package directory
        bin_directory: Binary-installation directory relative to location
        manifest_filename: Name of the manifest file in location
    """

    manifest: Manifest
    location: Path
    bin_directory: str = DEFAULT_BIN_DIRECTORY
    manifest_filename: str = DEFAULT_MANIFEST_FILENAME

    def __post_init__(self):
        if not isinstance(self.manifest, Manifest):
            raise TypeError(f"manifest must be Manifest, got {type(self.manifest)}")
        object.__setattr__(self, "location", normalize_path(self.location))

    @classmethod
    def from_manifest(
        cls,
        manifest: Manifest,
        location: Union[str, os.PathLike],
        bin_directory: str = DEFAULT_BIN_DIRECTORY,
        manifest_filename: str = DEFAULT_MANIFEST_FILENAME,
    ) -> "PackageDescriptor":
        return cls(
            manifest=manifest,
            location=Path(location),
            bin_directory=bin_directory,
            manifest_filename=manifest_filename,
        )

    @property
    def name(self) -> str:
        return self.manifest.display_name

    @property
    def version(self) -> Optional[str]:
        return self.manifest.version

    @property
    def private(self) -> bool:
        return self.manifest.private

    @property
    def manifest_location(self) -> Path:
        return self.location / self.manifest_filename

    @property
    def node_modules_location(self) -> Path:
        return self.location / "node_modules"

    @property
    def bin_location(self) -> Path:
        """Absolute path to the binary-installation directory."""
        return self.location / Path(self.bin_directory)

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"


@dataclass(frozen=True)
class Direct:
    """Reference to an already resolved package."""

    descriptor: PackageDescriptor


@dataclass(frozen=True)
class Location:
    """Reference to a package directory that still has to be read."""

    path: Path


PackageRef = Union[Direct, Location]


def package_ref(value) -> PackageRef:
    """
    Classify a raw package reference.

    Args:
        value: PackageDescriptor, directory path, or an existing PackageRef

    Raises:
        TypeError: If value is none of those
    """
    if isinstance(value, (Direct, Location)):
        return value
    if isinstance(value, PackageDescriptor):
        return Direct(value)
    if isinstance(value, (str, os.PathLike)):
        return Location(Path(value))
    raise TypeError(
        f"Package reference must be a PackageDescriptor or a path, "
        f"got {type(value).__name__}"
    )


def resolve_package(
    ref, settings: Optional[MatcherSettings] = None
) -> PackageDescriptor:
    """
    Turn a package reference into a PackageDescriptor.

    Descriptors are returned as-is. Directories are resolved by reading
    their manifest.

    Args:
        ref: PackageDescriptor, directory path, or PackageRef
        settings: Matcher settings (default: read from the current directory)

    Raises:
        ManifestNotFoundError: If a directory has no manifest
        TypeError: If ref is not a package reference
    """
    ref = package_ref(ref)
    if isinstance(ref, Direct):
        return ref.descriptor

    settings = settings or load_settings()
    manifest = read_manifest(ref.path, settings.manifest_filename)
    descriptor = PackageDescriptor.from_manifest(
        manifest,
        ref.path,
        bin_directory=settings.bin_directory,
        manifest_filename=settings.manifest_filename,
    )
    logger.debug(f"Resolved package {descriptor}")
    return descriptor


__all__ = [
    "DEFAULT_BIN_DIRECTORY",
    "PackageDescriptor",
    "Direct",
    "Location",
    "PackageRef",
    "package_ref",
    "resolve_package",
]

"""
Core functionality for pkgmatchkit.

This package contains the foundational modules that other components depend on.
"""

from .exceptions import (
    PkgMatchKitError,
    ConfigurationError,
    ManifestError,
    ManifestNotFoundError,
    InvalidManifestError,
    InvalidRangeError,
    UnknownMatcherError,
)

from .filesystem import (
    normalize_path,
    list_directory,
)

from .platform import (
    PlatformInfo,
    detect_platform,
    is_windows,
    os_identifier,
    clear_platform_cache,
)

__all__ = [
    "PkgMatchKitError",
    "ConfigurationError",
    "ManifestError",
    "ManifestNotFoundError",
    "InvalidManifestError",
    "InvalidRangeError",
    "UnknownMatcherError",
    "normalize_path",
    "list_directory",
    "PlatformInfo",
    "detect_platform",
    "is_windows",
    "os_identifier",
    "clear_platform_cache",
]

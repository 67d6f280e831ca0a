"""
Package descriptors for pkgmatchkit.

Available Components:
--------------------
- PackageDescriptor: A manifest paired with its package directory
- Direct / Location: The two kinds of package reference
- resolve_package: Turn any package reference into a descriptor
"""

from pkgmatchkit.packages.descriptor import (
    DEFAULT_BIN_DIRECTORY,
    PackageDescriptor,
    Direct,
    Location,
    PackageRef,
    package_ref,
    resolve_package,
)

__all__ = [
    "DEFAULT_BIN_DIRECTORY",
    "PackageDescriptor",
    "Direct",
    "Location",
    "PackageRef",
    "package_ref",
    "resolve_package",
]

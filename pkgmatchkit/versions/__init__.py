"""
Version range handling for pkgmatchkit.
"""

from pkgmatchkit.versions.semver import (
    SemVer,
    VersionRange,
    parse_version,
    parse_range,
    intersects,
    satisfies,
)

__all__ = [
    "SemVer",
    "VersionRange",
    "parse_version",
    "parse_range",
    "intersects",
    "satisfies",
]

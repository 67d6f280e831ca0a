"""
Package manifest model and reader.
"""

from pkgmatchkit.manifest.models import DependencyKind, Manifest, as_manifest
from pkgmatchkit.manifest.reader import DEFAULT_MANIFEST_FILENAME, read_manifest

__all__ = [
    "DependencyKind",
    "Manifest",
    "as_manifest",
    "DEFAULT_MANIFEST_FILENAME",
    "read_manifest",
]

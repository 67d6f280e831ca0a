"""
Package manifest model.

A Manifest is the parsed form of a package.json document. Dependency
fields are optional mappings: a field that is missing, or present with
a non-mapping value, is stored as None and treated as absent.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from pkgmatchkit.core.exceptions import InvalidManifestError

logger = logging.getLogger(__name__)


class DependencyKind(Enum):
    """Dependency sections of a manifest, valued by their JSON field name."""

    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"
    PEER_DEPENDENCIES = "peerDependencies"
    OPTIONAL_DEPENDENCIES = "optionalDependencies"

    @property
    def field_name(self) -> str:
        """JSON field name (e.g., 'devDependencies')."""
        return self.value

    @property
    def verb(self) -> str:
        """Verb used in matcher expectations (e.g., 'dev-depend')."""
        return _VERBS[self]


_VERBS = {
    DependencyKind.DEPENDENCIES: "depend",
    DependencyKind.DEV_DEPENDENCIES: "dev-depend",
    DependencyKind.PEER_DEPENDENCIES: "peer-depend",
    DependencyKind.OPTIONAL_DEPENDENCIES: "optionally depend",
}


def _dependency_field(data: Mapping[str, Any], kind: DependencyKind):
    value = data.get(kind.field_name)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        logger.warning(
            f"Ignoring .{kind.field_name}: expected an object, "
            f"got {type(value).__name__}"
        )
        return None
    return MappingProxyType(dict(value))


def _normalize_bin(name: Optional[str], value: Any) -> Dict[str, str]:
    # A string bin links the unscoped package name to that script
    if isinstance(value, str):
        if not name:
            return {}
        return {name.rsplit("/", 1)[-1]: value}
    if isinstance(value, Mapping):
        return {str(k): str(v) for k, v in value.items()}
    return {}


@dataclass(frozen=True)
class Manifest:
    """
    Parsed package manifest.

    Attributes:
        name: Package name, None when the manifest has none
        version: Package version, if declared
        dependencies: Production dependencies (name -> range) or None
        dev_dependencies: Development dependencies or None
        peer_dependencies: Peer dependencies or None
        optional_dependencies: Optional dependencies or None
        bin: Executable name -> script path
        private: Whether the package is marked private
        raw: The complete parsed document
    """

    name: Optional[str] = None
    version: Optional[str] = None
    dependencies: Optional[Mapping[str, str]] = None
    dev_dependencies: Optional[Mapping[str, str]] = None
    peer_dependencies: Optional[Mapping[str, str]] = None
    optional_dependencies: Optional[Mapping[str, str]] = None
    bin: Mapping[str, str] = field(default_factory=dict)
    private: bool = False
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Manifest":
        """
        Build a Manifest from a parsed package.json document.

        Args:
            data: JSON object as a mapping

        Raises:
            InvalidManifestError: If data is not a mapping

        Example:
            >>> m = Manifest.from_dict({"name": "foo", "dependencies": {"a": "^1.0.0"}})
            >>> m.dependencies_of(DependencyKind.DEPENDENCIES)["a"]
            '^1.0.0'
        """
        if not isinstance(data, Mapping):
            raise InvalidManifestError(
                f"Manifest must be a JSON object, got {type(data).__name__}"
            )

        name = data.get("name")
        if name is not None and not isinstance(name, str):
            name = str(name)
        version = data.get("version")

        return cls(
            name=name,
            version=str(version) if version is not None else None,
            dependencies=_dependency_field(data, DependencyKind.DEPENDENCIES),
            dev_dependencies=_dependency_field(data, DependencyKind.DEV_DEPENDENCIES),
            peer_dependencies=_dependency_field(data, DependencyKind.PEER_DEPENDENCIES),
            optional_dependencies=_dependency_field(
                data, DependencyKind.OPTIONAL_DEPENDENCIES
            ),
            bin=_normalize_bin(name, data.get("bin")),
            private=bool(data.get("private", False)),
            raw=MappingProxyType(dict(data)),
        )

    def dependencies_of(self, kind: DependencyKind) -> Optional[Mapping[str, str]]:
        """Get the dependency mapping for a kind, or None when absent."""
        return {
            DependencyKind.DEPENDENCIES: self.dependencies,
            DependencyKind.DEV_DEPENDENCIES: self.dev_dependencies,
            DependencyKind.PEER_DEPENDENCIES: self.peer_dependencies,
            DependencyKind.OPTIONAL_DEPENDENCIES: self.optional_dependencies,
        }[kind]

    @property
    def display_name(self) -> str:
        """Name used in messages."""
        return self.name if self.name is not None else "<unnamed>"


def as_manifest(value) -> Manifest:
    """Return value as a Manifest, converting plain mappings."""
    if isinstance(value, Manifest):
        return value
    return Manifest.from_dict(value)


__all__ = ["DependencyKind", "Manifest", "as_manifest"]

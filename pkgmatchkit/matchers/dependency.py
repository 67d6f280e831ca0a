"""
Dependency matchers.

Check that a manifest declares a dependency of a given kind and, when a
range is requested, that the declared range is compatible with it.

Example:
    from pkgmatchkit.matchers.dependency import to_depend_on

    verdict = to_depend_on({"name": "app", "dependencies": {"a": "^1.0.0"}}, "a", "1.2.0")
    assert verdict.passed
"""

import json
import logging
from typing import Optional

from pkgmatchkit.core.exceptions import InvalidRangeError
from pkgmatchkit.manifest.models import DependencyKind, as_manifest
from pkgmatchkit.matchers.verdict import Verdict
from pkgmatchkit.versions.semver import intersects, parse_range

logger = logging.getLogger(__name__)


class DependencyMatcher:
    """
    Matcher for one dependency kind.

    Args:
        kind: Dependency section checked by this matcher
    """

    def __init__(self, kind: DependencyKind):
        self.kind = DependencyKind(kind)

    def __call__(
        self, manifest, package_name: str, range_: Optional[str] = None
    ) -> Verdict:
        return self.matches(manifest, package_name, range_)

    def __repr__(self) -> str:
        return f"DependencyMatcher({self.kind.field_name!r})"

    def matches(
        self, manifest, package_name: str, range_: Optional[str] = None
    ) -> Verdict:
        """
        Evaluate the assertion.

        Args:
            manifest: Manifest or JSON-like mapping
            package_name: Dependency expected in the manifest
            range_: Optional range the declared range must intersect

        Returns:
            Verdict describing the outcome

        Raises:
            InvalidRangeError: If range_ is not a valid range and the
                dependency is declared
        """
        manifest = as_manifest(manifest)
        field = self.kind.field_name
        package_id = f"{package_name}@{range_}" if range_ else package_name
        expectation = (
            f"expected {manifest.display_name} to {self.kind.verb} on {package_id}"
        )

        declared = manifest.dependencies_of(self.kind)
        if declared is None:
            return self._verdict(False, f"{expectation} but no {field} specified")

        dump = json.dumps(dict(declared), indent=2)

        if package_name not in declared:
            return self._verdict(
                False, f"{expectation} but it is missing from .{field}\n{dump}"
            )

        version = declared[package_name]
        if range_ and not _compatible(version, parse_range(range_)):
            return self._verdict(
                False, f"{expectation} but {version} does not satisfy {range_}\n{dump}"
            )

        return self._verdict(True, expectation)

    def _verdict(self, passed: bool, message: str) -> Verdict:
        logger.debug(f"{self!r}: {'pass' if passed else 'fail'}")
        return Verdict(passed, message)


def _compatible(declared, expected_range) -> bool:
    # file:, git and tag specifiers are not ranges and satisfy nothing
    try:
        return intersects(str(declared), expected_range)
    except InvalidRangeError as e:
        logger.debug(f"Declared specifier is not a version range: {e}")
        return False


to_depend_on = DependencyMatcher(DependencyKind.DEPENDENCIES)
to_dev_depend_on = DependencyMatcher(DependencyKind.DEV_DEPENDENCIES)
to_peer_depend_on = DependencyMatcher(DependencyKind.PEER_DEPENDENCIES)
to_optionally_depend_on = DependencyMatcher(DependencyKind.OPTIONAL_DEPENDENCIES)


__all__ = [
    "DependencyMatcher",
    "to_depend_on",
    "to_dev_depend_on",
    "to_peer_depend_on",
    "to_optionally_depend_on",
]

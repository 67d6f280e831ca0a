"""
Centralized exception hierarchy for pkgmatchkit.

Assertion outcomes are never raised: matchers report them as verdicts.
The exceptions below cover broken fixtures, bad configuration and
caller mistakes.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class PkgMatchKitError(Exception):
    """Base exception for all pkgmatchkit errors."""

    pass


class ConfigurationError(PkgMatchKitError):
    """Raised when pkgmatchkit.yaml contains invalid settings."""

    pass


# ============================================================================
# Manifest Exceptions
# ============================================================================


class ManifestError(PkgMatchKitError):
    """Base exception for package manifest errors."""

    pass


class ManifestNotFoundError(ManifestError, FileNotFoundError):
    """Raised when a directory holds no package manifest."""

    def __init__(self, manifest_path):
        self.manifest_path = manifest_path
        super().__init__(f"No package manifest found at {manifest_path}")


class InvalidManifestError(ManifestError):
    """Raised when a manifest cannot be parsed into a JSON object."""

    pass


# ============================================================================
# Version Range Exceptions
# ============================================================================


class InvalidRangeError(PkgMatchKitError, ValueError):
    """Invalid version or version range expression."""

    def __init__(self, expression: str, reason: str = ""):
        self.expression = expression
        self.reason = reason
        msg = f"Invalid version range: {expression!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


# ============================================================================
# Matcher Exceptions
# ============================================================================


class UnknownMatcherError(PkgMatchKitError, KeyError):
    """Raised when looking up a matcher name that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown matcher: {name}")

    def __str__(self) -> str:
        return self.args[0]

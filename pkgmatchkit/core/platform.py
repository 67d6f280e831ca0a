"""
Platform detection for pkgmatchkit.

Package managers install different binary links depending on the host:
npm writes a `<name>.cmd` shim next to every link on Windows. This module
detects the current platform and decides whether it is Windows-style.

Usage:
    from pkgmatchkit.core.platform import detect_platform, is_windows

    platform_info = detect_platform()
    if is_windows(platform_info):
        print("Expecting .cmd shims")
"""

import functools
import platform
from dataclasses import dataclass
from typing import Optional, Union

# Identifiers that denote a Windows-style platform. "win32" is what
# Node.js reports, "nt" is os.name.
WINDOWS_IDENTIFIERS = frozenset({"windows", "win32", "nt"})


@dataclass(frozen=True)
class PlatformInfo:
    """
    Platform information relevant to binary links.

    Attributes:
        os: Operating system ('windows', 'linux', 'macos', or the raw
            lowercase system name for anything else)
        arch: CPU architecture ('x64', 'arm64', 'x86', 'arm', ...)
    """

    os: str
    arch: str

    def platform_string(self) -> str:
        """
        Get canonical platform string (e.g., 'linux-x64', 'macos-arm64').

        Example:
            >>> PlatformInfo('linux', 'x64').platform_string()
            'linux-x64'
        """
        return f"{self.os}-{self.arch}"

    def __str__(self) -> str:
        return self.platform_string()


PlatformKind = Union[PlatformInfo, str]


@functools.lru_cache(maxsize=1)
def detect_platform() -> PlatformInfo:
    """
    Detect current platform information.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformInfo instance for the running interpreter
    """
    return PlatformInfo(os=_detect_os(), arch=_detect_architecture())


def _detect_os() -> str:
    """
    Detect operating system.

    Returns:
        Normalized OS name: 'windows', 'linux', 'macos', or the lowercase
        system name reported by the interpreter
    """
    system = platform.system().lower()

    if system == "windows" or system.startswith(("cygwin", "msys", "mingw")):
        return "windows"
    elif system == "darwin":
        return "macos"
    return system


def _detect_architecture() -> str:
    """
    Detect CPU architecture.

    Returns:
        Normalized architecture: 'x64', 'arm64', 'x86', 'arm'
    """
    machine = platform.machine().lower()

    if machine in ("x86_64", "amd64", "x64"):
        return "x64"
    elif machine in ("aarch64", "arm64"):
        return "arm64"
    elif machine in ("i386", "i686", "x86"):
        return "x86"
    elif machine.startswith("arm"):
        return "arm"
    # Return original for unknown architectures
    return machine


def os_identifier(kind: Optional[PlatformKind] = None) -> str:
    """
    Reduce a platform description to a lowercase OS identifier.

    Args:
        kind: PlatformInfo, OS identifier string, or None for the
            current platform

    Returns:
        Lowercase OS identifier
    """
    if kind is None:
        kind = detect_platform()
    if isinstance(kind, PlatformInfo):
        return kind.os.lower()
    return str(kind).strip().lower()


def is_windows(kind: Optional[PlatformKind] = None) -> bool:
    """
    Check whether a platform uses Windows-style executable shims.

    Args:
        kind: PlatformInfo, OS identifier ('windows', 'win32', 'linux', ...)
            or None to probe the current platform

    Example:
        >>> is_windows("win32")
        True
        >>> is_windows(PlatformInfo("linux", "x64"))
        False
    """
    return os_identifier(kind) in WINDOWS_IDENTIFIERS


def clear_platform_cache():
    """
    Clear the platform detection cache.

    This forces the next call to detect_platform() to re-detect.
    """
    detect_platform.cache_clear()


__all__ = [
    "PlatformInfo",
    "PlatformKind",
    "WINDOWS_IDENTIFIERS",
    "detect_platform",
    "os_identifier",
    "is_windows",
    "clear_platform_cache",
]

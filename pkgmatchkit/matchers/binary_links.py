"""
Binary-link matcher.

Checks that a package's binary-installation directory holds exactly the
expected links. On Windows-style platforms npm writes a `<name>.cmd`
shim next to every link, so each expected name also expects its shim.
"""

import logging
from typing import Iterable, List, Optional, Union

from pkgmatchkit.config.settings import MatcherSettings, load_settings
from pkgmatchkit.core.filesystem import list_directory
from pkgmatchkit.core.platform import PlatformKind, detect_platform, is_windows
from pkgmatchkit.matchers.verdict import Verdict
from pkgmatchkit.packages.descriptor import resolve_package

logger = logging.getLogger(__name__)


def _as_names(names: Union[str, Iterable[str]]) -> List[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


def expand_links(
    names: Union[str, Iterable[str]], platform_kind: PlatformKind, suffix: str = "cmd"
) -> List[str]:
    """
    Compute the link names expected on a platform.

    Args:
        names: A single executable name or an ordered sequence of names
        platform_kind: PlatformInfo or OS identifier ('win32', 'linux', ...)
        suffix: Shim extension used on Windows-style platforms

    Returns:
        On Windows-style platforms each name followed by its shim, otherwise
        the names unchanged

    Example:
        >>> expand_links(["foo", "bar"], "win32")
        ['foo', 'foo.cmd', 'bar', 'bar.cmd']
    """
    names = _as_names(names)
    if not is_windows(platform_kind):
        return names
    expanded = []
    for name in names:
        expanded.extend([name, f"{name}.{suffix}"])
    return expanded


def to_binary_link(
    package_ref,
    expected_names: Union[str, Iterable[str]],
    platform: Optional[PlatformKind] = None,
    settings: Optional[MatcherSettings] = None,
) -> Verdict:
    """
    Check the links in a package's binary-installation directory.

    Args:
        package_ref: PackageDescriptor or package directory
        expected_names: Executable name(s) expected to be linked
        platform: Platform to expect links for (default: detected)
        settings: Matcher settings (default: read from the current directory)

    Returns:
        Verdict listing missing and superfluous links on failure

    Raises:
        ManifestNotFoundError: If a package directory has no manifest
        FileNotFoundError: If the binary-installation directory is missing
    """
    settings = settings or load_settings()
    package = resolve_package(package_ref, settings)
    platform = platform if platform is not None else detect_platform()

    links = expand_links(expected_names, platform, settings.windows_link_suffix)
    expectation = f"expected {package.name} to link to {', '.join(links)}"

    found = list_directory(package.bin_location)
    missing = [link for link in links if link not in found]
    superfluous = [entry for entry in found if entry not in links]

    if missing or superfluous:
        logger.debug(
            f"{package.name}: {len(missing)} missing, "
            f"{len(superfluous)} superfluous links"
        )
        message = " ".join(
            part
            for part in (
                expectation,
                f"missing: {', '.join(missing)}" if missing else "",
                f"superfluous: {', '.join(superfluous)}" if superfluous else "",
            )
            if part
        )
        return Verdict(False, message)

    return Verdict(True, expectation)


__all__ = ["expand_links", "to_binary_link"]

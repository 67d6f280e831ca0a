"""
pytest fixtures for package assertions.

Requires pytest, installed with the `pytest` extra:

    pip install pkgmatchkit[pytest]

Enable with `-p pkgmatchkit.testing.plugin`, or import the fixtures into
a conftest.py:

    from pkgmatchkit.testing.plugin import package_factory, pkg_expect  # noqa: F401
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import pytest

from pkgmatchkit.packages.descriptor import DEFAULT_BIN_DIRECTORY
from pkgmatchkit.testing.expect import expect


class PackageFactory:
    """Creates package directories under a base directory."""

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def __call__(
        self,
        name: str = "test-package",
        manifest: Optional[Dict[str, Any]] = None,
        links: Optional[Iterable[str]] = None,
        bin_directory: str = DEFAULT_BIN_DIRECTORY,
    ) -> Path:
        """
        Create a package directory.

        Args:
            name: Package name (also the directory name, slashes replaced)
            manifest: Extra manifest fields merged over {"name": name}
            links: Entries to create in the binary-installation directory;
                None leaves the directory out entirely
            bin_directory: Binary-installation directory relative to the package

        Returns:
            Path to the package directory
        """
        location = self.base_dir / name.replace("/", "__").lstrip("@")
        location.mkdir(parents=True, exist_ok=True)

        data = {"name": name, "version": "1.0.0"}
        data.update(manifest or {})
        (location / "package.json").write_text(json.dumps(data, indent=2))

        if links is not None:
            bin_dir = location / bin_directory
            bin_dir.mkdir(parents=True, exist_ok=True)
            for link in links:
                (bin_dir / link).write_text("#!/bin/sh\n")

        return location


@pytest.fixture
def package_factory(tmp_path) -> PackageFactory:
    """
    Factory creating package directories in a temporary directory.

    Example:
        def test_links(package_factory):
            pkg = package_factory("cli", links=["cli"])
            assert to_binary_link(pkg, "cli", platform="linux").passed
    """
    return PackageFactory(tmp_path / "packages")


@pytest.fixture
def pkg_expect():
    """The expect() helper."""
    return expect

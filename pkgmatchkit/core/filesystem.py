"""
Filesystem helpers for pkgmatchkit.

Read-only: the matchers inspect package directories but never write to
them. Missing paths are not translated; the OS error reaches the caller.
"""

import logging
import os
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


def normalize_path(path: Union[str, os.PathLike]) -> Path:
    """
    Normalize a path for consistent comparison across platforms.

    Makes the path absolute and collapses `..` segments without resolving
    symlinks, so a package reached through a link keeps its location.

    Example:
        >>> normalize_path("./foo/../bar")
        PosixPath('/absolute/path/to/bar')
    """
    return Path(os.path.abspath(os.fspath(path)))


def list_directory(path: Union[str, os.PathLike]) -> List[str]:
    """
    List every entry of a directory, sorted by name.

    No recursion and no filtering: files, symlinks (dangling ones too) and
    subdirectories all count.

    Args:
        path: Directory to list

    Returns:
        Sorted entry names

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If path is not a directory
    """
    entries = sorted(os.listdir(path))
    logger.debug(f"Listed {len(entries)} entries in {path}")
    return entries


__all__ = ["normalize_path", "list_directory"]

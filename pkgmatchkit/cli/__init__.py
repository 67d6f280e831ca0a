"""
pkgmatchkit CLI module.

This module provides the command-line interface for pkgmatchkit.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]

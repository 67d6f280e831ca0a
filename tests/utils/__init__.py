"""
Test utilities for pkgmatchkit testing.

This package provides test data builders.
"""

from .builders import ManifestBuilder

__all__ = ["ManifestBuilder"]

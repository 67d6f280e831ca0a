"""Reusable pytest fixtures for pkgmatchkit tests."""

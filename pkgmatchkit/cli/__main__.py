"""
Entry point for running pkgmatchkit CLI as a module.

Usage: python -m pkgmatchkit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()

"""
Entry point for running pkgmatchkit CLI as a module.

Usage: python -m pkgmatchkit [command] [options]
"""

from pkgmatchkit.cli.parser import main

if __name__ == "__main__":
    main()

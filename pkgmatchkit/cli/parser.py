"""
pkgmatchkit CLI argument parser.

This module implements the command-line interface for pkgmatchkit using argparse.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("pkgmatchkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """pkgmatchkit command-line interface."""

    def __init__(self):
        """Initialize CLI with argument parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser with all subcommands.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="pkgmatchkit",
            description="pkgmatchkit - Assertions on package metadata",
            epilog='Use "pkgmatchkit COMMAND --help" for command-specific help',
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        # Global options
        parser.add_argument(
            "--version", action="version", version=f"pkgmatchkit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./pkgmatchkit.yaml)",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands", metavar="COMMAND"
        )

        self._add_check_command(subparsers)

        return parser

    def _add_check_command(self, subparsers):
        """Add 'check' subcommand."""
        parser = subparsers.add_parser(
            "check",
            help="Check a package's dependencies and binary links",
            description=(
                "Evaluate assertions against the package in PACKAGE_DIR. "
                "SPEC is NAME or NAME@RANGE."
            ),
        )
        parser.add_argument(
            "package_dir",
            type=Path,
            metavar="PACKAGE_DIR",
            help="Package directory containing the manifest",
        )
        parser.add_argument(
            "--depends-on",
            action="append",
            default=[],
            metavar="SPEC",
            help="Expect a production dependency (can be used multiple times)",
        )
        parser.add_argument(
            "--dev-depends-on",
            action="append",
            default=[],
            metavar="SPEC",
            help="Expect a development dependency (can be used multiple times)",
        )
        parser.add_argument(
            "--peer-depends-on",
            action="append",
            default=[],
            metavar="SPEC",
            help="Expect a peer dependency (can be used multiple times)",
        )
        parser.add_argument(
            "--optionally-depends-on",
            action="append",
            default=[],
            metavar="SPEC",
            help="Expect an optional dependency (can be used multiple times)",
        )
        parser.add_argument(
            "--links",
            nargs="*",
            metavar="NAME",
            help="Expect exactly these binary links (no names: expect none)",
        )
        parser.add_argument(
            "--platform",
            metavar="OS",
            help="Platform to expect links for, e.g. linux or win32 (default: detected)",
        )

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            return self._dispatch_command(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except Exception as e:
            logger.error(f"Error: {e}")
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _dispatch_command(self, args) -> int:
        """
        Dispatch to appropriate command handler.

        Args:
            args: Parsed arguments with command field

        Returns:
            Exit code from command handler
        """
        command_map = {
            "check": "pkgmatchkit.cli.commands.check",
        }

        module_name = command_map.get(args.command)
        if not module_name:
            logger.error(f"Unknown command: {args.command}")
            return 1

        module = importlib.import_module(module_name)
        return module.run(args)


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()

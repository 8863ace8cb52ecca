"""CLI commands for fsref.

This package contains all subcommand implementations.
"""

from fsref.cli.commands import info, profile, scan

__all__ = ["info", "profile", "scan"]

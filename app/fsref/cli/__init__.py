"""CLI package for fsref.

This package contains the Typer application and all subcommands.
"""

from fsref.cli.main import app

__all__ = ["app"]

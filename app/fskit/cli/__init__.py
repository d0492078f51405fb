"""CLI package for fskit.

This package contains the Typer application and all subcommands.
"""

from fskit.cli.main import app

__all__ = ["app"]

"""CLI commands for fskit.

This package contains all subcommand implementations.
"""

from fskit.cli.commands import config, fs, io

__all__ = ["config", "fs", "io"]

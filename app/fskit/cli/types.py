"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer

from fskit.core.config import ConfigError, FskitConfig, load_config
from fskit.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TREE = "tree"
    JSON = "json"


def parse_mode(value: str | None) -> int | None:
    """Parse an octal permission mode given on the command line.

    Args:
        value: Octal string such as "755", or None.

    Returns:
        Integer mode, or None if no value was given.

    Raises:
        typer.BadParameter: If the value is not a valid octal mode.
    """
    if value is None:
        return None
    try:
        mode = int(value, 8)
    except ValueError:
        raise typer.BadParameter(f"Invalid octal mode: {value}") from None
    if not 0 <= mode <= 0o7777:
        raise typer.BadParameter(f"Mode out of range: {value}")
    return mode


def get_config() -> FskitConfig:
    """Load the user configuration, exiting on invalid configuration.

    Returns:
        Loaded configuration, or defaults if no config file exists.

    Raises:
        typer.Exit: If the config file cannot be loaded.
    """
    try:
        return load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

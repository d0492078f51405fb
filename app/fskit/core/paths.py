"""XDG-compliant path management for fskit.

Configuration follows the XDG Base Directory Specification:
~/.config/fskit/ unless XDG_CONFIG_HOME is set.
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "fskit"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/fskit/ (or XDG_CONFIG_HOME/fskit/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/fskit/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/fskit/theme.toml.
    """
    return get_config_dir() / "theme.toml"


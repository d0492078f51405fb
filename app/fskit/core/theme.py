"""Theme management for fskit CLI.

Colors default to the values below and can be overridden per key in the
[colors] table of ~/.config/fskit/theme.toml.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from rich.theme import Theme

from fskit.core.paths import get_theme_path

logger = logging.getLogger(__name__)


class ThemeColors(BaseModel):
    """Color configuration for fskit CLI.

    All colors must be hex codes (#RRGGBB or #RGB).
    """

    model_config = ConfigDict(extra="forbid")

    header: str = "#69B9A1"
    border: str = "#29526d"
    muted: str = "#b2bec3"
    success: str = "#03b971"
    error: str = "#f53263"
    info: str = "#0ec1c8"
    directory: str = "#0e8ac8"
    file: str = "#ffffff"
    symlink: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        if not isinstance(v, str):
            msg = f"{info.field_name}: color must be a string"
            raise ValueError(msg)
        color = v.strip()
        digits = color[1:]
        if not color.startswith("#") or len(digits) not in (3, 6):
            msg = f"{info.field_name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        try:
            int(digits, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color '{color}'"
            raise ValueError(msg) from None
        return color


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors, applying user overrides where valid.

    A missing, unreadable or invalid theme file falls back to the defaults
    with a logged warning.

    Args:
        path: Theme file to read. If None, uses ~/.config/fskit/theme.toml.
    """
    theme_path = path or get_theme_path()
    try:
        with open(theme_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to read theme file %s: %s", theme_path, e)
        return ThemeColors()

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Invalid 'colors' section in %s", theme_path)
        return ThemeColors()

    try:
        return ThemeColors(**colors)
    except ValueError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to the Rich styles used by the CLI."""
    if colors is None:
        colors = load_theme()

    return Theme(
        {
            "bold_header": f"bold {colors.header}",
            "border": colors.border,
            "dim": colors.muted,
            "success": colors.success,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "tree.directory": f"bold {colors.directory}",
            "tree.file": colors.file,
            "tree.symlink": f"italic {colors.symlink}",
        }
    )

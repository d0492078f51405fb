"""fskit configuration and settings.

This module provides the configuration model and I/O functions for the
defaults used by the command line: directory creation mode, text
encoding, empty-parent pruning depth and symlink policy.

Configuration is stored in ~/.config/fskit/config.toml
"""

import codecs
import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fskit.core.paths import get_config_path
from fskit.filesystem.operations import DEFAULT_DIRECTORY_MODE, DEFAULT_ENCODING

logger = logging.getLogger(__name__)


class FskitConfig(BaseModel):
    """Defaults for filesystem operations.

    Attributes:
        directory_mode: Permission bits for directories created by write
            and create_directory.
        encoding: Text encoding used by read and write.
        cascade_empty_parents: Parent levels pruned after each file removal.
        follow_symlinks: Whether scans descend into symlinked directories.
    """

    model_config = ConfigDict(extra="forbid")

    directory_mode: Annotated[
        int,
        Field(ge=0, le=0o7777, description="Mode for created directories"),
    ] = DEFAULT_DIRECTORY_MODE
    encoding: Annotated[
        str,
        Field(description="Text encoding for read and write"),
    ] = DEFAULT_ENCODING
    cascade_empty_parents: Annotated[
        int,
        Field(ge=0, description="Parent levels pruned after removing a file"),
    ] = 0
    follow_symlinks: Annotated[
        bool,
        Field(description="Descend into symlinked directories while scanning"),
    ] = False

    @field_validator("directory_mode", mode="before")
    @classmethod
    def parse_octal_mode(cls, v: object) -> object:
        """Accept octal strings such as "755" or "0o755"."""
        if isinstance(v, str):
            try:
                return int(v.strip(), 8)
            except ValueError:
                msg = f"directory_mode: invalid octal mode '{v}'"
                raise ValueError(msg) from None
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding names a known codec."""
        try:
            codecs.lookup(v)
        except LookupError:
            msg = f"encoding: unknown encoding '{v}'"
            raise ValueError(msg) from None
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FskitConfig:
    """Load configuration from a TOML file.

    A missing file is not an error: defaults are returned.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FskitConfig object.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or its content doesn't
            match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return FskitConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FskitConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def save_config(config: FskitConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory first
    and then moved into place with os.replace().

    Args:
        config: The FskitConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(config_to_dict(config), f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def config_to_dict(config: FskitConfig) -> dict[str, object]:
    """Convert FskitConfig to a dictionary for TOML serialization.

    The directory mode is written as an octal string.

    Args:
        config: The FskitConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return {
        "directory_mode": f"{config.directory_mode:o}",
        "encoding": config.encoding,
        "cascade_empty_parents": config.cascade_empty_parents,
        "follow_symlinks": config.follow_symlinks,
    }

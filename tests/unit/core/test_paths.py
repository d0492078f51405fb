"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from fskit.core.paths import (
    APP_NAME,
    get_config_dir,
    get_config_path,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ):
            os.environ.pop("XDG_CONFIG_HOME", None)
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME


class TestConfigFiles:
    """Tests for config file paths."""

    def test_config_path(self, isolated_config_home: Path) -> None:
        """The config file lives in the config directory."""
        assert get_config_path() == isolated_config_home / APP_NAME / "config.toml"

    def test_theme_path(self, isolated_config_home: Path) -> None:
        """The theme file lives in the config directory."""
        assert get_theme_path() == isolated_config_home / APP_NAME / "theme.toml"


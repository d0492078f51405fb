"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for scanning and removal tests.

    Layout::

        root/
            readme.md
            notes.txt
            src/
                main.py
                pkg/
                    module.py
            empty/
    """
    root = tmp_path / "root"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "readme.md").write_text("# readme\n")
    (root / "notes.txt").write_text("notes")
    (root / "src" / "main.py").write_text("print('hi')\n")
    (root / "src" / "pkg" / "module.py").write_text("")
    return root


@pytest.fixture
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home

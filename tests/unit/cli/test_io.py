"""Unit tests for the io CLI commands."""

from pathlib import Path

import fskit.utils.formatting as formatting_module
import pytest
from fskit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def _cli_env(isolated_config_home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run commands from tmp_path with an isolated config and wide output."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("COLUMNS", "200")


class TestWriteAndRead:
    """Tests for fskit io write and fskit io read."""

    def test_write_then_read(self, tmp_path: Path) -> None:
        """Written text can be read back; missing directories are created."""
        result = runner.invoke(app, ["io", "write", "new/deep/file.txt", "hello"])

        assert result.exit_code == 0
        assert "Wrote 6 character(s)." in result.stdout
        assert (tmp_path / "new" / "deep" / "file.txt").read_text() == "hello\n"

        result = runner.invoke(app, ["io", "read", "new/deep/file.txt"])

        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_append(self, tmp_path: Path) -> None:
        """--append adds to the file."""
        runner.invoke(app, ["io", "write", "log.txt", "one"])
        result = runner.invoke(app, ["io", "write", "log.txt", "two", "--append"])

        assert result.exit_code == 0
        assert "Appended" in result.stdout
        assert (tmp_path / "log.txt").read_text() == "one\ntwo\n"

    def test_write_without_newline(self, tmp_path: Path) -> None:
        """--no-newline writes the text verbatim."""
        runner.invoke(app, ["io", "write", "raw.txt", "x", "--no-newline"])

        assert (tmp_path / "raw.txt").read_text() == "x"

    def test_read_lines(self, tmp_path: Path) -> None:
        """--lines prints numbered lines."""
        (tmp_path / "file.txt").write_text("alpha\nbeta\n")

        result = runner.invoke(app, ["io", "read", "file.txt", "--lines"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["1  alpha", "2  beta"]

    def test_read_missing(self) -> None:
        """Reading a missing file reports it."""
        result = runner.invoke(app, ["io", "read", "abc.txt"])

        assert result.exit_code == 1
        assert "File does not exist." in result.output

    def test_read_directory(self, tmp_path: Path) -> None:
        """Reading a directory reports it is not a file."""
        (tmp_path / "dir").mkdir()

        result = runner.invoke(app, ["io", "read", "dir"])

        assert result.exit_code == 1
        assert "Path is not a file path." in result.output

    def test_read_uses_configured_encoding(
        self, tmp_path: Path, isolated_config_home: Path
    ) -> None:
        """The text encoding comes from the config file."""
        (tmp_path / "latin.txt").write_bytes("café\n".encode("latin-1"))
        config_file = isolated_config_home / "fskit" / "config.toml"
        config_file.parent.mkdir(parents=True)
        config_file.write_text('encoding = "latin-1"\n')

        result = runner.invoke(app, ["io", "read", "latin.txt"])

        assert result.exit_code == 0
        assert result.stdout == "café\n"


class TestMoveAndMkdir:
    """Tests for fskit io mv and fskit io mkdir."""

    def test_mv(self, tmp_path: Path) -> None:
        """mv renames a file."""
        (tmp_path / "old.txt").write_text("x")

        result = runner.invoke(app, ["io", "mv", "old.txt", "new.txt"])

        assert result.exit_code == 0
        assert (tmp_path / "new.txt").exists()
        assert not (tmp_path / "old.txt").exists()

    def test_mv_failure(self, tmp_path: Path) -> None:
        """A failed rename exits with an error."""
        (tmp_path / "old.txt").write_text("x")

        result = runner.invoke(app, ["io", "mv", "old.txt", "missing/new.txt"])

        assert result.exit_code == 1
        assert "Failed to rename" in result.output

    def test_mkdir(self, tmp_path: Path) -> None:
        """mkdir creates nested directories."""
        result = runner.invoke(app, ["io", "mkdir", "a/b/c", "--mode", "755"])

        assert result.exit_code == 0
        assert (tmp_path / "a" / "b" / "c").is_dir()

    def test_mkdir_invalid_mode(self, tmp_path: Path) -> None:
        """An invalid octal mode is a usage error."""
        result = runner.invoke(app, ["io", "mkdir", "a", "--mode", "9z"])

        assert result.exit_code == 2
        assert not (tmp_path / "a").exists()

    def test_mkdir_over_file(self, tmp_path: Path) -> None:
        """A file in the way exits with an error."""
        (tmp_path / "a").write_text("")

        result = runner.invoke(app, ["io", "mkdir", "a"])

        assert result.exit_code == 1
        assert "Failed to create directory" in result.output


class TestQuiet:
    """Tests for the --quiet global option."""

    @pytest.fixture(autouse=True)
    def _restore_quiet(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Reset the quiet flag after each test."""
        monkeypatch.setattr(formatting_module, "_quiet", False)

    def test_quiet_suppresses_success_message(self, tmp_path: Path) -> None:
        """-q hides the confirmation but still performs the operation."""
        result = runner.invoke(app, ["-q", "io", "mkdir", "x"])

        assert result.exit_code == 0
        assert result.output == ""
        assert (tmp_path / "x").is_dir()

    def test_quiet_keeps_file_contents(self, tmp_path: Path) -> None:
        """-q does not hide the output a command exists to produce."""
        (tmp_path / "file.txt").write_text("hello\n")

        result = runner.invoke(app, ["-q", "io", "read", "file.txt"])

        assert result.exit_code == 0
        assert result.stdout == "hello\n"

    def test_quiet_keeps_errors(self) -> None:
        """-q does not hide errors."""
        result = runner.invoke(app, ["-q", "io", "read", "abc.txt"])

        assert result.exit_code == 1
        assert "File does not exist." in result.output

    def test_quiet_is_reset_between_invocations(self) -> None:
        """Without -q, messages are printed again."""
        runner.invoke(app, ["-q", "io", "mkdir", "a"])
        result = runner.invoke(app, ["io", "mkdir", "b"])

        assert "Directory ready." in result.stdout

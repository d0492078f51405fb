"""Tests for the fskit error taxonomy."""

import errno

import pytest
from fskit.filesystem.errors import FskitError, InvalidArgumentError, IOFailure


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError."""

    def test_is_value_error(self) -> None:
        """InvalidArgumentError can be caught as ValueError."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, FskitError)


class TestIOFailure:
    """Tests for IOFailure."""

    def test_explicit_reason(self) -> None:
        """A caller-supplied reason is kept and appended to the message."""
        error = IOFailure('Failed to read the file "a.txt".', "a.txt", "File does not exist.")

        assert error.path == "a.txt"
        assert error.reason == "File does not exist."
        assert error.errno is None
        assert str(error) == 'Failed to read the file "a.txt". File does not exist.'

    def test_reason_from_os_error(self) -> None:
        """Without explicit reason, strerror and errno come from the OSError."""
        os_error = PermissionError(errno.EACCES, "permission denied", "/x")
        error = IOFailure('Failed to remove file "/x".', "/x", error=os_error)

        assert error.reason == "permission denied"
        assert error.errno == errno.EACCES
        assert str(error) == 'Failed to remove file "/x". Permission denied.'

    def test_explicit_reason_wins_over_os_error(self) -> None:
        """An explicit reason takes precedence but errno is still recorded."""
        os_error = FileNotFoundError(errno.ENOENT, "No such file or directory")
        error = IOFailure("Failed.", "/x", "File does not exist.", error=os_error)

        assert error.reason == "File does not exist."
        assert error.errno == errno.ENOENT

    def test_empty_reason(self) -> None:
        """Without any reason information the message stands alone."""
        error = IOFailure("Failed.", "/x")

        assert error.reason == ""
        assert str(error) == "Failed."

    def test_empty_path_rejected(self) -> None:
        """An IOFailure must always carry a path."""
        with pytest.raises(InvalidArgumentError, match="path cannot be empty"):
            IOFailure("Failed.", "")

    def test_is_fskit_error(self) -> None:
        """IOFailure is part of the fskit hierarchy, not an OSError."""
        error = IOFailure("Failed.", "/x")
        assert isinstance(error, FskitError)
        assert not isinstance(error, OSError)

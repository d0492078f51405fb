"""Failure-aware file I/O primitives.

Each operation wraps a single OS call and reports failures as IOFailure,
carrying the targeted path and the reason reported by the OS.
"""

import logging
import os
from collections.abc import Iterable

from fskit.filesystem.errors import InvalidArgumentError, IOFailure

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_MODE = 0o777
DEFAULT_ENCODING = "utf-8"

# Only enforced where the platform limits path length
WINDOWS_MAX_PATH_LENGTH = 255

PathLike = str | os.PathLike[str]


def _require_path(path: PathLike) -> str:
    path_str = os.fspath(path)
    if not path_str:
        msg = "Path cannot be empty."
        raise InvalidArgumentError(msg)
    return path_str


def create_directory(path: PathLike, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
    """Create a directory and its missing ancestors.

    Does nothing if the directory already exists.

    Args:
        path: Directory path.
        mode: Permission bits for created directories (masked by umask).

    Raises:
        InvalidArgumentError: If path is empty.
        IOFailure: If the directory cannot be created.
    """
    path_str = _require_path(path)
    if os.path.isdir(path_str):
        return

    try:
        os.makedirs(path_str, mode=mode, exist_ok=True)
    except OSError as e:
        msg = f'Failed to create directory "{path_str}".'
        raise IOFailure(msg, path_str, error=e) from e
    logger.debug("Created directory %s", path_str)


def write(
    path: PathLike,
    contents: str | bytes | Iterable[str],
    *,
    append: bool = False,
    mode: int = DEFAULT_DIRECTORY_MODE,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Write contents into a file, creating its directory if missing.

    Args:
        path: File path. Created if it does not exist.
        contents: Text, raw bytes, or an iterable of text chunks joined
            without separator.
        append: If True, append to existing contents instead of truncating.
        mode: Permission bits for a created parent directory.
        encoding: Text encoding, ignored for bytes.

    Returns:
        Number of characters (text) or bytes written.

    Raises:
        IOFailure: If the parent directory cannot be created or the file
            cannot be written.
    """
    path_str = _require_path(path)
    directory = os.path.dirname(path_str)
    if directory and not os.path.isdir(directory):
        create_directory(directory, mode)

    if not isinstance(contents, str | bytes):
        contents = "".join(contents)

    open_mode = "a" if append else "w"
    try:
        if isinstance(contents, bytes):
            with open(path_str, open_mode + "b") as f:
                return f.write(contents)
        with open(path_str, open_mode, encoding=encoding, newline="") as f:
            return f.write(contents)
    except OSError as e:
        msg = f'Failed to write the file "{path_str}".'
        raise IOFailure(msg, path_str, error=e) from e


def append(
    path: PathLike,
    contents: str | bytes | Iterable[str],
    *,
    mode: int = DEFAULT_DIRECTORY_MODE,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """Append contents to a file, creating it and its directory if missing.

    Returns:
        Number of characters (text) or bytes written.

    Raises:
        IOFailure: If the file cannot be written.
    """
    return write(path, contents, append=True, mode=mode, encoding=encoding)


def read(
    path: PathLike,
    as_lines: bool = False,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> str | list[str]:
    """Read a file into a string or a list of lines.

    Args:
        path: File path.
        as_lines: If True, return the lines without line terminators.
        encoding: Text encoding of the file.

    Returns:
        File contents, or its lines.

    Raises:
        IOFailure: If the file cannot be read. The reason tells apart a
            missing path, a path that is not a regular file and an
            over-long path where the platform limits it.
    """
    path_str = _require_path(path)
    try:
        with open(path_str, encoding=encoding, newline="") as f:
            contents = f.read()
    except OSError as e:
        msg = f'Failed to read the file "{path_str}".'
        raise IOFailure(msg, path_str, _diagnose_read_failure(path_str), error=e) from e
    except UnicodeDecodeError as e:
        msg = f'Failed to read the file "{path_str}".'
        raise IOFailure(msg, path_str, f"File is not valid {encoding} text.") from e

    if as_lines:
        return _split_lines(contents)
    return contents


def _split_lines(contents: str) -> list[str]:
    """Split at line terminators only, dropping them.

    Other characters str.splitlines() treats as boundaries (form feed,
    U+2028, ...) stay inside their line.
    """
    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _diagnose_read_failure(path: str) -> str | None:
    """Best-effort classification of a failed read.

    Returns:
        A reason, or None to fall back to the OS error.
    """
    if not os.path.exists(path):
        return "File does not exist."
    if not os.path.isfile(path):
        return "Path is not a file path."
    if os.name == "nt" and len(path) > WINDOWS_MAX_PATH_LENGTH:
        return "File path too long."
    return None


def rename(origin: PathLike, target: PathLike) -> None:
    """Rename or move a file or directory.

    An existing target file is replaced.

    Args:
        origin: Current path.
        target: New path. Its directory must exist.

    Raises:
        IOFailure: If the OS refuses the rename (missing target directory,
            cross-device move, ...).
    """
    origin_str = _require_path(origin)
    target_str = _require_path(target)
    try:
        os.replace(origin_str, target_str)
    except OSError as e:
        msg = f'Failed to rename "{origin_str}".'
        raise IOFailure(msg, origin_str, error=e) from e
    logger.debug("Renamed %s to %s", origin_str, target_str)

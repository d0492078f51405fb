"""Directory tree models.

This module defines the in-memory representation of a scanned
directory: DirectoryNode holds the ordered files and subdirectories
discovered on disk, and FileReference is a read-only snapshot of a
single non-directory entry.
"""

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from fskit.filesystem.errors import InvalidArgumentError


@dataclass(frozen=True, slots=True)
class FileReference:
    """Snapshot of a non-directory filesystem entry.

    Captured at scan time; not guaranteed to remain valid if the file
    changes afterwards.

    Attributes:
        path: Path of the entry as it was discovered.
        base_name: Final path component, extension included.
        extension: Text after the last dot of base_name (without the dot),
            empty if there is none.
        size_bytes: Size in bytes (None if unavailable).
        mtime: Last modification time in ISO 8601 format (None if unavailable).
        is_symlink: Whether the entry is a symbolic link.
    """

    path: str
    base_name: str
    extension: str
    size_bytes: int | None = None
    mtime: str | None = None
    is_symlink: bool = False

    def __post_init__(self) -> None:
        """Validate file reference data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise InvalidArgumentError(msg)

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        stat_result: os.stat_result | None = None,
    ) -> "FileReference":
        """Create a snapshot of the entry at ``path``.

        Args:
            path: Path of the entry.
            stat_result: Result of a non-following stat call. If None,
                ``os.lstat`` is called.

        Returns:
            FileReference describing the entry.

        Raises:
            OSError: If the entry cannot be stat'ed.
        """
        path_str = os.fspath(path)
        if stat_result is None:
            stat_result = os.lstat(path_str)

        base_name = os.path.basename(path_str.rstrip(os.sep)) or path_str
        return cls(
            path=path_str,
            base_name=base_name,
            extension=_extension(base_name),
            size_bytes=stat_result.st_size,
            mtime=datetime.fromtimestamp(stat_result.st_mtime, tz=UTC).isoformat(),
            is_symlink=stat.S_ISLNK(stat_result.st_mode),
        )


def _extension(base_name: str) -> str:
    stem = base_name.lstrip(".")
    if "." not in stem:
        return ""
    return stem.rsplit(".", 1)[1]


class DirectoryNode:
    """A directory and the entries discovered inside it.

    Nodes are filled append-only while a scan runs and are treated as
    read-only afterwards. A node exclusively owns its file references
    and child nodes; there are no parent back-references.
    """

    __slots__ = ("_files", "_path", "_subdirectories")

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize the node.

        Args:
            path: Path to an existing directory.

        Raises:
            InvalidArgumentError: If path is not an existing directory.
        """
        path_str = os.fspath(path)
        if not os.path.isdir(path_str):
            msg = f'Invalid directory path "{path_str}".'
            raise InvalidArgumentError(msg)

        self._path = path_str
        self._files: list[FileReference] = []
        self._subdirectories: list[DirectoryNode] = []

    def __repr__(self) -> str:
        return (
            f"DirectoryNode({self._path!r}, files={len(self._files)}, "
            f"subdirectories={len(self._subdirectories)})"
        )

    @property
    def path(self) -> str:
        """Path of the directory."""
        return self._path

    @property
    def name(self) -> str:
        """Final component of the directory path."""
        return os.path.basename(self._path.rstrip(os.sep)) or self._path

    @property
    def files(self) -> tuple[FileReference, ...]:
        """Files of the directory, in discovery order."""
        return tuple(self._files)

    @property
    def subdirectories(self) -> tuple["DirectoryNode", ...]:
        """Child directories, in discovery order."""
        return tuple(self._subdirectories)

    def add_file(self, file: FileReference) -> None:
        """Register a file of the directory.

        Symbolic links are accepted whatever they point to.

        Args:
            file: Snapshot of a non-directory entry.

        Raises:
            InvalidArgumentError: If file is not a FileReference or its path
                is a directory.
        """
        if not isinstance(file, FileReference):
            msg = f"Expected a FileReference, got {type(file).__name__}"
            raise InvalidArgumentError(msg)
        if os.path.isdir(file.path) and not os.path.islink(file.path):
            msg = f'Unable to set directory "{file.path}" as file.'
            raise InvalidArgumentError(msg)

        self._files.append(file)

    def add_directory(self, directory: "DirectoryNode") -> None:
        """Register a child directory.

        Args:
            directory: Node of the child directory.

        Raises:
            InvalidArgumentError: If directory is not a DirectoryNode.
        """
        if not isinstance(directory, DirectoryNode):
            msg = f"Expected a DirectoryNode, got {type(directory).__name__}"
            raise InvalidArgumentError(msg)

        self._subdirectories.append(directory)

    def walk(self) -> Iterator["DirectoryNode"]:
        """Iterate over this node and all descendant nodes, pre-order."""
        yield self
        for child in self._subdirectories:
            yield from child.walk()

    def iter_files(self) -> Iterator[FileReference]:
        """Iterate over every file reference in the subtree, pre-order."""
        for node in self.walk():
            yield from node._files

    @property
    def file_count(self) -> int:
        """Number of files in the whole subtree."""
        return sum(len(node._files) for node in self.walk())

    @property
    def directory_count(self) -> int:
        """Number of descendant directories (this node excluded)."""
        return sum(1 for _ in self.walk()) - 1

    @property
    def total_size(self) -> int:
        """Sum of the known file sizes in the whole subtree."""
        return sum(f.size_bytes or 0 for f in self.iter_files())

    def to_dict(self) -> dict[str, Any]:
        """Convert the subtree to a JSON-serializable mapping."""
        return {
            "path": self._path,
            "files": [
                {
                    "path": f.path,
                    "base_name": f.base_name,
                    "extension": f.extension,
                    "size_bytes": f.size_bytes,
                    "mtime": f.mtime,
                    "is_symlink": f.is_symlink,
                }
                for f in self._files
            ],
            "subdirectories": [d.to_dict() for d in self._subdirectories],
        }

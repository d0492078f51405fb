"""Recursive path removal.

Removes files and directories recursively, optionally pruning parent
directories that a file deletion left empty. Removal is best-effort and
non-transactional: the first failure aborts the call, paths removed
before it stay removed and paths after it are left untouched.
"""

import logging
import os
from collections.abc import Iterable

from fskit.filesystem.errors import InvalidArgumentError, IOFailure

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class PathRemover:
    """Removes files and directories recursively.

    Paths of a batch are processed in reverse order, so a directory
    registered before its own descendants is handled after them.
    Symbolic links are removed as links; their targets are never touched.
    """

    def remove(
        self,
        paths: PathLike | Iterable[PathLike],
        cascade_empty_parents: int = 0,
    ) -> list[str]:
        """Remove files or directories recursively.

        Missing paths are skipped. After each file deletion, up to
        ``cascade_empty_parents`` ancestor directories are removed while
        they are empty. Removing an empty directory does not cascade.

        Args:
            paths: A path, or an iterable of paths (consumed once).
            cascade_empty_parents: Number of parent levels to prune after
                each file deletion.

        Returns:
            Removed paths in removal order, pruned parents included.

        Raises:
            InvalidArgumentError: If cascade_empty_parents is negative.
            IOFailure: If a file or directory cannot be removed.
        """
        if isinstance(cascade_empty_parents, bool) or not isinstance(cascade_empty_parents, int):
            msg = f"cascade_empty_parents must be an integer, got {cascade_empty_parents!r}"
            raise InvalidArgumentError(msg)
        if cascade_empty_parents < 0:
            msg = f"cascade_empty_parents cannot be negative, got {cascade_empty_parents}"
            raise InvalidArgumentError(msg)

        removed: list[str] = []
        self._remove_all(_materialize(paths), cascade_empty_parents, removed)
        return removed

    def _remove_all(self, paths: list[str], cascade: int, removed: list[str]) -> None:
        for path in reversed(paths):
            if not os.path.lexists(path):
                logger.debug("Skipping missing path %s", path)
                continue

            if os.path.isdir(path) and not os.path.islink(path):
                self._remove_all(_list_directory(path), cascade, removed)
                # The cascade of the last removed file may have pruned it already
                if os.path.lexists(path):
                    _remove_directory(path)
                    removed.append(path)
                continue

            try:
                os.unlink(path)
            except OSError as e:
                msg = f'Failed to remove file "{path}".'
                raise IOFailure(msg, path, error=e) from e
            logger.debug("Removed file %s", path)
            removed.append(path)

            if cascade > 0:
                self._prune_empty_parents(path, cascade, removed)

    def _prune_empty_parents(self, path: str, levels: int, removed: list[str]) -> None:
        """Remove empty ancestors of a deleted file, nearest first."""
        directory = os.path.dirname(os.path.abspath(path))
        for _ in range(levels):
            if not _is_empty_directory(directory):
                return
            _remove_directory(directory)
            removed.append(directory)

            parent = os.path.dirname(directory)
            if parent == directory:
                return
            directory = parent


def _materialize(paths: PathLike | Iterable[PathLike]) -> list[str]:
    if isinstance(paths, str | os.PathLike):
        return [os.fspath(paths)]
    return [os.fspath(p) for p in paths]


def _list_directory(directory: str) -> list[str]:
    try:
        with os.scandir(directory) as entries:
            return [entry.path for entry in entries]
    except OSError as e:
        msg = f'Failed to list directory "{directory}".'
        raise IOFailure(msg, directory, error=e) from e


def _is_empty_directory(directory: str) -> bool:
    try:
        with os.scandir(directory) as entries:
            return next(entries, None) is None
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as e:
        msg = f'Failed to list directory "{directory}".'
        raise IOFailure(msg, directory, error=e) from e


def _remove_directory(directory: str) -> None:
    try:
        os.rmdir(directory)
    except OSError as e:
        msg = f'Failed to remove directory "{directory}".'
        raise IOFailure(msg, directory, error=e) from e
    logger.debug("Removed directory %s", directory)


def remove(
    paths: PathLike | Iterable[PathLike],
    cascade_empty_parents: int = 0,
) -> list[str]:
    """Remove files or directories recursively.

    See PathRemover.remove for the full contract.

    Args:
        paths: A path, or an iterable of paths.
        cascade_empty_parents: Number of parent levels to prune after each
            file deletion.

    Returns:
        Removed paths in removal order.

    Raises:
        InvalidArgumentError: If cascade_empty_parents is negative.
        IOFailure: If a file or directory cannot be removed.
    """
    return PathRemover().remove(paths, cascade_empty_parents)

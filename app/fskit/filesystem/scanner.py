"""Recursive directory scanner.

Walks a directory on disk depth-first and materializes it into a
DirectoryNode tree. Scanning is read-only; any listing or stat failure
aborts the whole scan.
"""

import logging
import os

from fskit.filesystem.errors import IOFailure
from fskit.filesystem.models import DirectoryNode, FileReference

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Builds DirectoryNode trees from directories on disk.

    By default symbolic links are never followed: a link to a directory
    is recorded as a file reference. With ``follow_symlinks`` enabled,
    linked directories are descended into, and a directory already
    visited during the same scan is skipped so that link loops end.

    Args:
        follow_symlinks: If True, descend into symlinked directories.
    """

    def __init__(self, *, follow_symlinks: bool = False) -> None:
        self._follow_symlinks = follow_symlinks
        self._visited: set[tuple[int, int]] = set()

    def scan(self, path: str | os.PathLike[str]) -> DirectoryNode:
        """Recursively scan a directory.

        Args:
            path: Path to the directory.

        Returns:
            Root node of the scanned tree.

        Raises:
            InvalidArgumentError: If path is not an existing directory.
            IOFailure: If an entry cannot be listed or stat'ed.
        """
        root = DirectoryNode(path)
        self._visited = set()
        try:
            self._mark_visited(root.path)
        except OSError as e:
            msg = f'Failed to scan directory "{root.path}".'
            raise IOFailure(msg, root.path, error=e) from e
        self._populate(root)
        return root

    def _populate(self, node: DirectoryNode) -> None:
        """Fill a node with the entries of its directory, recursively."""
        logger.debug("Scanning directory %s", node.path)
        try:
            with os.scandir(node.path) as entries:
                for entry in entries:
                    if entry.is_dir(follow_symlinks=self._follow_symlinks):
                        if not self._mark_visited(entry.path):
                            logger.warning("Skipping already visited directory: %s", entry.path)
                            continue
                        child = DirectoryNode(entry.path)
                        self._populate(child)
                        node.add_directory(child)
                    else:
                        stat_result = entry.stat(follow_symlinks=False)
                        node.add_file(FileReference.from_path(entry.path, stat_result))
        except OSError as e:
            failed_path = os.fsdecode(e.filename) if e.filename else node.path
            msg = f'Failed to scan directory "{node.path}".'
            raise IOFailure(msg, failed_path, error=e) from e

    def _mark_visited(self, path: str) -> bool:
        """Record a directory as visited.

        Only tracked when following symlinks, since without it the
        filesystem tree cannot loop.

        Returns:
            False if the directory had already been visited.
        """
        if not self._follow_symlinks:
            return True
        st = os.stat(path)
        key = (st.st_dev, st.st_ino)
        if key in self._visited:
            return False
        self._visited.add(key)
        return True


def scan_directory(
    path: str | os.PathLike[str],
    *,
    follow_symlinks: bool = False,
) -> DirectoryNode:
    """Recursively scan a directory into a DirectoryNode tree.

    Args:
        path: Path to the directory.
        follow_symlinks: If True, descend into symlinked directories.

    Returns:
        Root node of the scanned tree.

    Raises:
        InvalidArgumentError: If path is not an existing directory.
        IOFailure: If an entry cannot be listed or stat'ed.
    """
    return DirectoryScanner(follow_symlinks=follow_symlinks).scan(path)

"""Filesystem tree, removal and I/O module.

This module provides the directory tree model, the recursive scanner,
the recursive remover with empty-parent pruning, and the I/O primitives
that report OS failures as IOFailure.
"""

from fskit.filesystem.errors import FskitError, InvalidArgumentError, IOFailure
from fskit.filesystem.models import DirectoryNode, FileReference
from fskit.filesystem.operations import append, create_directory, read, rename, write
from fskit.filesystem.remover import PathRemover, remove
from fskit.filesystem.scanner import DirectoryScanner, scan_directory

__all__ = [
    "DirectoryNode",
    "DirectoryScanner",
    "FileReference",
    "FskitError",
    "IOFailure",
    "InvalidArgumentError",
    "PathRemover",
    "append",
    "create_directory",
    "read",
    "remove",
    "rename",
    "scan_directory",
    "write",
]

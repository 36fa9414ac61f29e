"""Filesystem adapter for fsvisitor.

OSDirectoryAccess binds the DirectoryAccess interface to the local
filesystem through os.path and os.scandir.
"""

import os
from typing import Iterator

from ..core.adapter import DirectoryAccess


class OSDirectoryAccess(DirectoryAccess):
    """DirectoryAccess backed by the real filesystem.

    Listing order is whatever os.scandir returns, which differs between
    platforms and filesystems. Errors from os.scandir (PermissionError,
    NotADirectoryError, ...) are not caught.
    """

    def __init__(self,
                 follow_symlinks: bool = True,
                 include_hidden: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Treat a symlink to a directory as a directory
                (and descend into it). Links are not checked for cycles.
            include_hidden: Whether to list dot-files and dot-directories
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden

    def exists(self, path: str) -> bool:
        if self.follow_symlinks:
            return os.path.exists(path)
        return os.path.lexists(path)

    def list_entries(self, path: str) -> Iterator[str]:
        with os.scandir(path) as entries:
            for entry in entries:
                if not self.include_hidden and entry.name.startswith('.'):
                    continue
                yield os.path.join(path, entry.name)

    def is_directory(self, path: str) -> bool:
        if not self.follow_symlinks and os.path.islink(path):
            return False
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        if not self.follow_symlinks and os.path.islink(path):
            # A link is reported as a file-like leaf when not followed
            return True
        return os.path.isfile(path)

    def __repr__(self) -> str:
        return (f"OSDirectoryAccess(follow_symlinks={self.follow_symlinks}, "
                f"include_hidden={self.include_hidden})")

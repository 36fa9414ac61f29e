"""DirectoryAccess abstraction for fsvisitor.

The visitor never touches the filesystem directly. Everything it needs to
know about the tree goes through a DirectoryAccess adapter, which lets tests
substitute an in-memory tree for the real filesystem.
"""

from abc import ABC, abstractmethod
from typing import Iterable


class DirectoryAccess(ABC):
    """Minimal capability set the visitor needs from a directory tree.

    Paths are plain strings. Entries returned by list_entries are full paths
    that can be passed straight back into the other methods.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything exists at path."""
        pass

    @abstractmethod
    def list_entries(self, path: str) -> Iterable[str]:
        """List the entries of a directory in the adapter's native order.

        The order is whatever the underlying store produces. It is not
        sorted and callers must not rely on it being alphabetical.

        Args:
            path: Directory to list

        Returns:
            Iterable of full entry paths

        Raises:
            PermissionError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path exists and is a directory."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if path exists and is a regular file."""
        pass

    def directory_exists(self, path: str) -> bool:
        """Existence check used for directories (root validation, descent)."""
        return self.exists(path) and self.is_directory(path)

    def file_exists(self, path: str) -> bool:
        """Existence check used for files."""
        return self.exists(path) and self.is_file(path)

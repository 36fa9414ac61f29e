"""Directory adapters for fsvisitor.

Adapters implement the DirectoryAccess interface for a concrete store.
An in-memory adapter for tests lives in fsvisitor.testing.
"""

from .filesystem import OSDirectoryAccess

__all__ = [
    "OSDirectoryAccess",
]

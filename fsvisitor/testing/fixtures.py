"""Test fixtures for fsvisitor consumers.

InMemoryDirectoryAccess lets tests describe a directory tree as nested
dicts and traverse it without touching the disk, with deterministic listing
order and hooks to simulate entries vanishing or becoming unreadable.
"""

import posixpath
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set

from ..core.adapter import DirectoryAccess


class InMemoryDirectoryAccess(DirectoryAccess):
    """DirectoryAccess over an in-memory tree.

    Keys of a mapping are entry names; a nested mapping is a directory and
    any other value is a file. Listing order is insertion order.

    Example:
        access = InMemoryDirectoryAccess({
            "a.txt": "",
            "sub": {"b.txt": "", "c.txt": ""},
        })
        visitor = FileSystemVisitor(access.root, access=access)
        list(visitor)  # ['/tree/a.txt', '/tree/sub', '/tree/sub/b.txt', '/tree/sub/c.txt']
    """

    def __init__(self, tree: Optional[Mapping[str, Any]] = None, root: str = "/tree"):
        self.root = root
        # path -> child names for directories, None for files
        self._nodes: Dict[str, Optional[List[str]]] = {root: []}
        self._denied: Set[str] = set()
        self.listed: List[str] = []
        if tree:
            self._populate(root, tree)

    def _populate(self, parent: str, tree: Mapping[str, Any]) -> None:
        for name, value in tree.items():
            path = posixpath.join(parent, name)
            if isinstance(value, Mapping):
                self.add_directory(path)
                self._populate(path, value)
            else:
                self.add_file(path)

    def _attach(self, path: str, children: Optional[List[str]]) -> None:
        parent = posixpath.dirname(path)
        siblings = self._nodes.get(parent)
        if siblings is None:
            raise FileNotFoundError(f"No such directory: {parent}")
        if path not in self._nodes:
            siblings.append(posixpath.basename(path))
        else:
            # Replacing an entry drops whatever was below it
            self._drop_descendants(path)
        self._nodes[path] = children

    def _drop_descendants(self, path: str) -> None:
        prefix = path.rstrip("/") + "/"
        for key in [k for k in self._nodes if k.startswith(prefix)]:
            del self._nodes[key]

    def add_file(self, path: str) -> str:
        self._attach(path, None)
        return path

    def add_directory(self, path: str) -> str:
        self._attach(path, [])
        return path

    def remove(self, path: str) -> None:
        """Delete path and everything below it."""
        if path not in self._nodes:
            raise FileNotFoundError(f"No such entry: {path}")
        self._drop_descendants(path)
        del self._nodes[path]
        siblings = self._nodes.get(posixpath.dirname(path))
        if siblings is not None:
            siblings.remove(posixpath.basename(path))

    def deny(self, path: str) -> None:
        """Make listing path raise PermissionError."""
        self._denied.add(path)

    def exists(self, path: str) -> bool:
        return path in self._nodes

    def list_entries(self, path: str) -> Iterator[str]:
        if path in self._denied:
            raise PermissionError(f"Access to the path '{path}' is denied.")
        children = self._nodes.get(path)
        if children is None:
            if path in self._nodes:
                raise NotADirectoryError(path)
            raise FileNotFoundError(path)
        self.listed.append(path)
        return iter([posixpath.join(path, name) for name in children])

    def is_directory(self, path: str) -> bool:
        return path in self._nodes and self._nodes[path] is not None

    def is_file(self, path: str) -> bool:
        return path in self._nodes and self._nodes[path] is None

    def __len__(self) -> int:
        """Number of entries below the root."""
        return len(self._nodes) - 1

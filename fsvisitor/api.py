"""High-level API for fsvisitor.

Functional wrappers around FileSystemVisitor for the common cases where
building a visitor and attaching handlers by hand is more ceremony than
needed.
"""

from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Union

from .config import PathLike, PathPredicate
from .core.adapter import DirectoryAccess
from .core.events import EntryKind, FilteredEvent, Notification
from .core.visitor import FileSystemVisitor

Handler = Callable[..., None]
HandlerMap = Mapping[Notification, Union[Handler, Iterable[Handler]]]


def visit(
    root: PathLike,
    folder_filter: Optional[PathPredicate] = None,
    file_filter: Optional[PathPredicate] = None,
    access: Optional[DirectoryAccess] = None,
    handlers: Optional[HandlerMap] = None,
    reset_removal_per_entry: bool = False,
) -> Iterator[str]:
    """Simple interface for a one-off traversal.

    The visitor is built immediately, so a missing root raises here rather
    than on the first next(). The START notification also fires here.

    Args:
        root: Directory to traverse
        folder_filter: Predicate selecting directories for filtered notifications
        file_filter: Predicate selecting files for filtered notifications
        access: Directory adapter (defaults to the real filesystem)
        handlers: Mapping of notification to a handler or list of handlers
        reset_removal_per_entry: Clear the removal flag before each entry

    Returns:
        Iterator of entry paths in depth-first pre-order

    Example:
        >>> def hide_pyc(event):
        ...     event.remove_item = True
        >>> for path in visit("src", file_filter=lambda p: p.endswith(".pyc"),
        ...                   handlers={Notification.FILTERED_FILE_FOUND: hide_pyc}):
        ...     print(path)
    """
    visitor = FileSystemVisitor(
        root,
        folder_filter=folder_filter,
        file_filter=file_filter,
        access=access,
        reset_removal_per_entry=reset_removal_per_entry,
    )

    for notification, handler in (handlers or {}).items():
        if callable(handler):
            visitor.events.attach(notification, handler)
        else:
            for each in handler:
                visitor.events.attach(notification, each)

    return iter(visitor)


def collect_paths(root: PathLike, **kwargs) -> List[str]:
    """Traverse root and return every yielded path as a list.

    Args:
        root: Directory to traverse
        **kwargs: Options passed to visit()

    Returns:
        List of paths in traversal order
    """
    return list(visit(root, **kwargs))


def count_entries(
    root: PathLike,
    folder_filter: Optional[PathPredicate] = None,
    file_filter: Optional[PathPredicate] = None,
    access: Optional[DirectoryAccess] = None,
) -> Dict[str, int]:
    """Count what a full traversal sees.

    Returns:
        Dictionary with keys 'files', 'directories', 'filtered_files',
        'filtered_directories' and 'yielded'
    """
    stats = {
        'files': 0,
        'directories': 0,
        'filtered_files': 0,
        'filtered_directories': 0,
        'yielded': 0,
    }

    def counter(key: str) -> Handler:
        def handler(event) -> None:
            stats[key] += 1
        return handler

    handlers = {
        Notification.FILE_FOUND: counter('files'),
        Notification.DIRECTORY_FOUND: counter('directories'),
        Notification.FILTERED_FILE_FOUND: counter('filtered_files'),
        Notification.FILTERED_DIRECTORY_FOUND: counter('filtered_directories'),
    }

    for _ in visit(root, folder_filter=folder_filter, file_filter=file_filter,
                   access=access, handlers=handlers):
        stats['yielded'] += 1

    return stats


def find_first(
    root: PathLike,
    predicate: PathPredicate,
    kind: EntryKind = EntryKind.FILE,
    access: Optional[DirectoryAccess] = None,
) -> Optional[str]:
    """Return the first entry of the given kind matching predicate.

    The traversal stops as soon as the match is reported; no entry after
    it is visited.

    Args:
        root: Directory to search
        predicate: Match condition applied to entry paths
        kind: Whether to match files or directories
        access: Directory adapter (defaults to the real filesystem)

    Returns:
        Matching path, or None if the subtree has no match
    """
    match: List[str] = []

    def stop_on_match(event: FilteredEvent) -> None:
        match.append(event.path)
        event.stop_search = True

    if kind is EntryKind.DIRECTORY:
        filters = {'folder_filter': predicate}
        notification = Notification.FILTERED_DIRECTORY_FOUND
    else:
        filters = {'file_filter': predicate}
        notification = Notification.FILTERED_FILE_FOUND

    for _ in visit(root, access=access, handlers={notification: stop_on_match}, **filters):
        pass

    return match[0] if match else None

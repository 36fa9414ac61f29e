"""fsvisitor - lazy, observable filesystem traversal.

fsvisitor walks a directory tree depth-first and yields one path at a time.
Observers attached to the visitor's notifications can classify entries,
hide individual entries from the output, or stop the walk early.

Quick start:
━━━━━━━━━━━━
    from fsvisitor import FileSystemVisitor, Notification

    visitor = FileSystemVisitor("/data", file_filter=lambda p: p.endswith(".tmp"))
    visitor.events.attach(Notification.FILTERED_FILE_FOUND,
                          lambda e: setattr(e, "remove_item", True))
    for path in visitor:
        print(path)
━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .errors import VisitorError, InvalidArgument
from .config import TraversalConfig, ALWAYS_ACCEPT
from .core.adapter import DirectoryAccess
from .core.events import (
    EntryKind,
    Notification,
    FoundEvent,
    FilteredEvent,
    EventChannel,
    NotificationDispatcher,
)
from .core.visitor import FileSystemVisitor, TraversalState
from .adapters.filesystem import OSDirectoryAccess
from .api import visit, collect_paths, count_entries, find_first

__all__ = [
    "__version__",
    # Errors
    "VisitorError",
    "InvalidArgument",
    # Config
    "TraversalConfig",
    "ALWAYS_ACCEPT",
    # Core
    "DirectoryAccess",
    "EntryKind",
    "Notification",
    "FoundEvent",
    "FilteredEvent",
    "EventChannel",
    "NotificationDispatcher",
    "FileSystemVisitor",
    "TraversalState",
    # Adapters
    "OSDirectoryAccess",
    # API
    "visit",
    "collect_paths",
    "count_entries",
    "find_first",
]

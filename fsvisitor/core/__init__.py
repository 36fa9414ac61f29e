"""Core abstractions for fsvisitor.

This package contains the directory adapter interface, the notification
machinery and the traversal engine itself.
"""

from .adapter import DirectoryAccess
from .events import (
    EntryKind,
    Notification,
    FoundEvent,
    FilteredEvent,
    EventChannel,
    NotificationDispatcher,
)
from .visitor import FileSystemVisitor, TraversalState

__all__ = [
    "DirectoryAccess",
    "EntryKind",
    "Notification",
    "FoundEvent",
    "FilteredEvent",
    "EventChannel",
    "NotificationDispatcher",
    "FileSystemVisitor",
    "TraversalState",
]

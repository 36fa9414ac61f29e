"""Lazy depth-first filesystem traversal for fsvisitor.

FileSystemVisitor walks a directory subtree in pre-order and yields entry
paths one at a time. Observers attached to its notification channels can
stop the walk or keep individual entries out of the output while the walk
is in progress.

For every entry in a directory listing the visitor, in this order:

1. raises the found notification for the entry's kind,
2. raises the filtered notification if the entry matches a caller-supplied
   predicate,
3. yields the path unless the last filtered notification asked for removal,
4. descends into the entry if it is a directory (even when removed).

The stop flag is checked once per entry, before step 1.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..config import PathLike, PathPredicate, TraversalConfig
from ..errors import InvalidArgument
from .adapter import DirectoryAccess
from .events import (
    EntryKind,
    FilteredEvent,
    FoundEvent,
    Notification,
    NotificationDispatcher,
)

logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """Flags for one enumeration run."""
    search_stopped: bool = False
    # Only refreshed by filtered notifications, so an entry that raises none
    # inherits the previous decision
    item_removed: bool = False


class FileSystemVisitor:
    """Iterable over the paths below a root directory.

    Each call to iter() starts a new enumeration with fresh state. All
    enumerations of one visitor share that state, so starting a new one
    resets the flags an unfinished one reads.

    Example:
        visitor = FileSystemVisitor("/data", file_filter=lambda p: p.endswith(".csv"))

        @visitor.events.on(Notification.FILTERED_FILE_FOUND)
        def first_only(event):
            event.stop_search = True

        for path in visitor:
            print(path)
    """

    def __init__(self,
                 root: PathLike,
                 folder_filter: Optional[PathPredicate] = None,
                 file_filter: Optional[PathPredicate] = None,
                 access: Optional[DirectoryAccess] = None,
                 reset_removal_per_entry: bool = False):
        """Create a visitor rooted at an existing directory.

        Args:
            root: Directory to traverse; a path object is converted to str
            folder_filter: Predicate selecting directories for filtered
                notifications (None = accept all, no notifications)
            file_filter: Predicate selecting files for filtered
                notifications (None = accept all, no notifications)
            access: Directory adapter (defaults to the real filesystem)
            reset_removal_per_entry: Clear the removal flag before each entry

        Raises:
            InvalidArgument: If root is not an existing directory
        """
        if access is None:
            from ..adapters.filesystem import OSDirectoryAccess
            access = OSDirectoryAccess()
        self.access = access

        config = TraversalConfig.create(
            root,
            folder_filter=folder_filter,
            file_filter=file_filter,
            reset_removal_per_entry=reset_removal_per_entry,
        )
        config_errors = config.validate()
        if config_errors:
            raise InvalidArgument(f"Invalid configuration: {'; '.join(config_errors)}")

        if not self.access.directory_exists(config.root):
            raise InvalidArgument(f"'{config.root}' doesn't exist!")

        self.config = config
        self.events = NotificationDispatcher()
        self._state = TraversalState()

    @property
    def search_stopped(self) -> bool:
        """Whether the current (or last) enumeration was stopped."""
        return self._state.search_stopped

    def __iter__(self) -> Iterator[str]:
        self._state = TraversalState()
        self.on_start()
        return self._walk(self.config.root, is_root=True)

    def __repr__(self) -> str:
        return f"FileSystemVisitor(root={self.config.root!r})"

    # Notification helpers. Subclasses may override these to react to events
    # without attaching handlers.

    def on_start(self) -> None:
        logger.debug("Traversal started at %s", self.config.root)
        self.events.fire(Notification.START)

    def on_finish(self) -> None:
        logger.debug("Traversal finished at %s", self.config.root)
        self.events.fire(Notification.FINISH)

    def on_file_found(self, event: FoundEvent) -> None:
        self._raise_found(Notification.FILE_FOUND, event)

    def on_directory_found(self, event: FoundEvent) -> None:
        self._raise_found(Notification.DIRECTORY_FOUND, event)

    def on_filtered_file_found(self, event: FilteredEvent) -> None:
        self._raise_filtered(Notification.FILTERED_FILE_FOUND, event)

    def on_filtered_directory_found(self, event: FilteredEvent) -> None:
        self._raise_filtered(Notification.FILTERED_DIRECTORY_FOUND, event)

    def _raise_found(self, notification: Notification, event: FoundEvent) -> None:
        if event is None:
            raise InvalidArgument(f"{notification.value} requires an event")

        self.events.fire(notification, event)

        # Overwrite, not OR
        self._state.search_stopped = event.stop_search
        if event.stop_search:
            logger.debug("Search stopped at %s", event.path)

    def _raise_filtered(self, notification: Notification, event: FilteredEvent) -> None:
        if event is None:
            raise InvalidArgument(f"{notification.value} requires an event")

        self.events.fire(notification, event)

        if not self._state.search_stopped:
            self._state.search_stopped = event.stop_search
            if event.stop_search:
                logger.debug("Search stopped at %s", event.path)

        self._state.item_removed = event.remove_item
        if event.remove_item:
            logger.debug("Removing %s from output", event.path)

    # Traversal

    def _in_filtered_set(self, path: str, kind: EntryKind) -> bool:
        if kind is EntryKind.DIRECTORY:
            return self.access.directory_exists(path) and bool(self.config.folder_filter(path))
        return self.access.file_exists(path) and bool(self.config.file_filter(path))

    def _visit_entries(self, entries: Iterable[str]) -> Iterator[str]:
        """Raise notifications for each entry and pass it on.

        Stops pulling entries once search_stopped is set.
        """
        for entry in entries:
            if self._state.search_stopped:
                break

            if self.config.reset_removal_per_entry:
                self._state.item_removed = False

            if self.access.is_directory(entry):
                self.on_directory_found(FoundEvent(entry, EntryKind.DIRECTORY))

                if (not self.config.default_folder_filter
                        and self._in_filtered_set(entry, EntryKind.DIRECTORY)):
                    self.on_filtered_directory_found(FilteredEvent(entry, EntryKind.DIRECTORY))
            else:
                self.on_file_found(FoundEvent(entry, EntryKind.FILE))

                if (not self.config.default_file_filter
                        and self._in_filtered_set(entry, EntryKind.FILE)):
                    self.on_filtered_file_found(FilteredEvent(entry, EntryKind.FILE))

            yield entry

    def _walk(self, directory: str, is_root: bool = False) -> Iterator[str]:
        """Yield entries below directory in pre-order.

        A directory that no longer exists yields nothing. Errors raised by
        the adapter while listing propagate to the caller.
        """
        if not self.access.directory_exists(directory):
            return

        # Listed once; later changes to the directory are not seen
        entries = list(self.access.list_entries(directory))
        logger.debug("Listed %d entries in %s", len(entries), directory)

        for entry in self._visit_entries(entries):
            if not self._state.item_removed:
                yield entry

            # Removal hides the entry, not its subtree. Files return at once.
            yield from self._walk(entry)

        if is_root:
            self.on_finish()

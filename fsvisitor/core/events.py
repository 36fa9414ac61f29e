"""Notification channels for fsvisitor.

The visitor reports its progress through six notifications. Observers attach
handlers to a NotificationDispatcher; handlers run synchronously, in the
order they were attached, on the thread that is pulling entries from the
visitor. Entry handlers receive one shared mutable event object, so a later
handler sees flags set by an earlier one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..errors import InvalidArgument


class EntryKind(Enum):
    """What kind of filesystem entry an event refers to."""
    FILE = "file"
    DIRECTORY = "directory"


class Notification(Enum):
    """Notification categories raised by the visitor."""
    START = "start"
    FINISH = "finish"
    FILE_FOUND = "file_found"
    DIRECTORY_FOUND = "directory_found"
    FILTERED_FILE_FOUND = "filtered_file_found"
    FILTERED_DIRECTORY_FOUND = "filtered_directory_found"


# Notifications whose handlers take no arguments
PAYLOADLESS = frozenset({Notification.START, Notification.FINISH})


@dataclass
class FoundEvent:
    """Raised for every entry the visitor processes.

    Setting stop_search asks the visitor to stop before the next entry.
    """
    path: str
    kind: EntryKind
    stop_search: bool = False


@dataclass
class FilteredEvent:
    """Raised for entries matching a caller-supplied predicate.

    Setting remove_item keeps this entry out of the output (its children are
    still visited). Setting stop_search asks the visitor to stop before the
    next entry.
    """
    path: str
    kind: EntryKind
    stop_search: bool = False
    remove_item: bool = False


class EventChannel:
    """Ordered list of handlers for one notification."""

    def __init__(self, notification: Notification):
        self.notification = notification
        self._handlers: List[Callable[..., Any]] = []

    def attach(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Add a handler. The same handler may be attached more than once."""
        if not callable(handler):
            raise TypeError(f"Handler for {self.notification.value} must be callable")
        self._handlers.append(handler)
        return handler

    def detach(self, handler: Callable[..., Any]) -> None:
        """Remove the most recently attached occurrence of handler.

        Raises:
            ValueError: If handler is not attached
        """
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return
        raise ValueError(f"Handler not attached to {self.notification.value}")

    def fire(self, *args: Any) -> None:
        # Snapshot so handlers can detach themselves mid-dispatch
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)

    def __repr__(self) -> str:
        return f"EventChannel({self.notification.value!r}, handlers={len(self._handlers)})"


class NotificationDispatcher:
    """Subscription registry with one channel per Notification."""

    def __init__(self):
        self._channels: Dict[Notification, EventChannel] = {
            notification: EventChannel(notification) for notification in Notification
        }

    def channel(self, notification: Notification) -> EventChannel:
        return self._channels[notification]

    def attach(self, notification: Notification, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Attach handler to a notification and return it unchanged.

        Args:
            notification: Category to subscribe to
            handler: Callable taking no arguments for START/FINISH, or the
                event object for entry notifications

        Returns:
            The handler, so attach can be used inline
        """
        return self._channels[notification].attach(handler)

    def detach(self, notification: Notification, handler: Callable[..., Any]) -> None:
        self._channels[notification].detach(handler)

    def on(self, notification: Notification) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of attach.

        Example:
            @visitor.events.on(Notification.FILTERED_FILE_FOUND)
            def skip_logs(event):
                event.remove_item = event.path.endswith('.log')
        """
        def decorator(handler: Callable[..., Any]) -> Callable[..., Any]:
            return self.attach(notification, handler)
        return decorator

    def fire(self, notification: Notification, event: Optional[Any] = None) -> None:
        """Invoke every handler attached to notification, in order.

        Raises:
            InvalidArgument: If an entry notification is fired without an event
        """
        if notification in PAYLOADLESS:
            self._channels[notification].fire()
            return
        if event is None:
            raise InvalidArgument(f"{notification.value} requires an event")
        self._channels[notification].fire(event)

    @staticmethod
    def found(kind: EntryKind) -> Notification:
        """Found notification for an entry kind."""
        if kind is EntryKind.DIRECTORY:
            return Notification.DIRECTORY_FOUND
        return Notification.FILE_FOUND

    @staticmethod
    def filtered(kind: EntryKind) -> Notification:
        """Filtered notification for an entry kind."""
        if kind is EntryKind.DIRECTORY:
            return Notification.FILTERED_DIRECTORY_FOUND
        return Notification.FILTERED_FILE_FOUND

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{n.value}={len(c)}" for n, c in self._channels.items() if c
        )
        return f"NotificationDispatcher({counts})"

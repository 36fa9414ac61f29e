"""Tests for the notification dispatcher."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fsvisitor import (
    EntryKind,
    EventChannel,
    FilteredEvent,
    FoundEvent,
    InvalidArgument,
    Notification,
    NotificationDispatcher,
)


def test_handlers_run_in_attachment_order():
    dispatcher = NotificationDispatcher()
    calls = []
    dispatcher.attach(Notification.START, lambda: calls.append("first"))
    dispatcher.attach(Notification.START, lambda: calls.append("second"))
    dispatcher.attach(Notification.START, lambda: calls.append("third"))

    dispatcher.fire(Notification.START)

    assert calls == ["first", "second", "third"]


def test_handlers_share_one_mutable_event():
    dispatcher = NotificationDispatcher()
    seen = []

    def set_remove(event):
        event.remove_item = True

    def observe(event):
        seen.append((event.remove_item, event.stop_search))
        event.stop_search = True

    dispatcher.attach(Notification.FILTERED_FILE_FOUND, set_remove)
    dispatcher.attach(Notification.FILTERED_FILE_FOUND, observe)

    event = FilteredEvent("/tree/a.txt", EntryKind.FILE)
    dispatcher.fire(Notification.FILTERED_FILE_FOUND, event)

    assert seen == [(True, False)]
    assert event.remove_item is True
    assert event.stop_search is True


def test_channels_are_independent():
    dispatcher = NotificationDispatcher()
    calls = []
    dispatcher.attach(Notification.FILE_FOUND, lambda e: calls.append("file"))
    dispatcher.attach(Notification.DIRECTORY_FOUND, lambda e: calls.append("dir"))

    dispatcher.fire(Notification.DIRECTORY_FOUND, FoundEvent("/tree/sub", EntryKind.DIRECTORY))

    assert calls == ["dir"]


def test_detach_removes_handler():
    dispatcher = NotificationDispatcher()
    calls = []

    def handler():
        calls.append(1)

    dispatcher.attach(Notification.FINISH, handler)
    dispatcher.detach(Notification.FINISH, handler)
    dispatcher.fire(Notification.FINISH)

    assert calls == []
    assert len(dispatcher.channel(Notification.FINISH)) == 0


def test_detach_unknown_handler_raises():
    dispatcher = NotificationDispatcher()
    with pytest.raises(ValueError):
        dispatcher.detach(Notification.START, lambda: None)


def test_detach_removes_one_occurrence():
    channel = EventChannel(Notification.START)
    calls = []

    def handler():
        calls.append(1)

    channel.attach(handler)
    channel.attach(handler)
    channel.detach(handler)
    channel.fire()

    assert calls == [1]


def test_handler_may_detach_itself_during_dispatch():
    dispatcher = NotificationDispatcher()
    calls = []

    def once():
        calls.append("once")
        dispatcher.detach(Notification.START, once)

    dispatcher.attach(Notification.START, once)
    dispatcher.attach(Notification.START, lambda: calls.append("always"))

    dispatcher.fire(Notification.START)
    dispatcher.fire(Notification.START)

    assert calls == ["once", "always", "always"]


def test_on_decorator_attaches_and_returns_handler():
    dispatcher = NotificationDispatcher()

    @dispatcher.on(Notification.FILE_FOUND)
    def stop(event):
        event.stop_search = True

    event = FoundEvent("/tree/a.txt", EntryKind.FILE)
    dispatcher.fire(Notification.FILE_FOUND, event)

    assert callable(stop)
    assert event.stop_search is True


def test_entry_notification_without_event_raises():
    dispatcher = NotificationDispatcher()
    with pytest.raises(InvalidArgument):
        dispatcher.fire(Notification.FILTERED_DIRECTORY_FOUND)


def test_attach_rejects_non_callable():
    dispatcher = NotificationDispatcher()
    with pytest.raises(TypeError):
        dispatcher.attach(Notification.START, "not callable")


@pytest.mark.parametrize("kind, found, filtered", [
    (EntryKind.FILE, Notification.FILE_FOUND, Notification.FILTERED_FILE_FOUND),
    (EntryKind.DIRECTORY, Notification.DIRECTORY_FOUND, Notification.FILTERED_DIRECTORY_FOUND),
])
def test_kind_to_notification(kind, found, filtered):
    assert NotificationDispatcher.found(kind) is found
    assert NotificationDispatcher.filtered(kind) is filtered


def test_event_flags_default_false():
    found = FoundEvent("/tree/a", EntryKind.FILE)
    filtered = FilteredEvent("/tree/a", EntryKind.FILE)
    assert found.stop_search is False
    assert filtered.stop_search is False
    assert filtered.remove_item is False

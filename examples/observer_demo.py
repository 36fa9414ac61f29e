#!/usr/bin/env python3
"""
Observer example showing how handlers steer a traversal.

This example demonstrates:
- Start/finish and found notifications
- Hiding every filtered directory while still listing its contents
- A counter that hides filtered files after 4 and stops after 8
- Catching access-denied errors around the loop
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from fsvisitor import FileSystemVisitor, Notification


def main():
    root = sys.argv[1] if len(sys.argv) > 1 else str(Path.cwd())

    visitor = FileSystemVisitor(
        root,
        folder_filter=lambda p: Path(p).name.startswith("."),
        file_filter=lambda p: p.endswith(".txt"),
    )
    events = visitor.events

    events.attach(Notification.START, lambda: print("Started"))
    events.attach(Notification.FINISH, lambda: print("Finished"))
    events.attach(Notification.FILE_FOUND, lambda e: print("File found"))
    events.attach(Notification.DIRECTORY_FOUND, lambda e: print("Dir found"))

    @events.on(Notification.FILTERED_DIRECTORY_FOUND)
    def hide_directory(event):
        print("Filtered dir found")
        event.remove_item = True

    counter = 0

    @events.on(Notification.FILTERED_FILE_FOUND)
    def throttle(event):
        nonlocal counter
        counter += 1
        if counter > 4:
            event.remove_item = True
        if counter > 8:
            event.stop_search = True

    try:
        for path in visitor:
            print(path)
            print("-" * 25)
    except PermissionError as e:
        print(f"Stopped: {e}")


if __name__ == "__main__":
    main()

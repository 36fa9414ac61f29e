"""Command line interface for fsvisitor.

Walks a directory, prints every yielded path and optionally removes or
stops on filtered entries:

    fsvisitor /data --file-pattern '*.log' --remove-after 4 --stop-after 8
"""

import argparse
import fnmatch
import logging
import os
import sys
from typing import List, Optional

from .core.events import FilteredEvent, Notification
from .core.visitor import FileSystemVisitor
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ACCESS_DENIED = 1
EXIT_USAGE = 2


def _pattern_filter(pattern: Optional[str]):
    """Build a predicate matching the entry's base name against a glob."""
    if pattern is None:
        return None

    def matches(path: str) -> bool:
        return fnmatch.fnmatch(os.path.basename(path), pattern)

    return matches


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fsvisitor",
        description="Walk a directory tree depth-first and print each entry.",
    )
    parser.add_argument("root", help="Directory to traverse")
    parser.add_argument(
        "--folder-pattern",
        help="Glob on directory names; matches raise filtered-directory events",
    )
    parser.add_argument(
        "--file-pattern",
        help="Glob on file names; matches raise filtered-file events",
    )
    parser.add_argument(
        "--remove-dirs",
        action="store_true",
        help="Hide every filtered directory from the output (its contents are still listed)",
    )
    parser.add_argument(
        "--remove-after",
        type=int,
        metavar="N",
        help="Hide filtered files once more than N have been found",
    )
    parser.add_argument(
        "--stop-after",
        type=int,
        metavar="N",
        help="Stop the walk once more than N filtered files have been found",
    )
    parser.add_argument(
        "--reset-removal",
        action="store_true",
        help="Clear the remove decision before every entry",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print a line for every event",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_visitor(args: argparse.Namespace) -> FileSystemVisitor:
    """Create a visitor and attach the handlers selected on the command line."""
    visitor = FileSystemVisitor(
        args.root,
        folder_filter=_pattern_filter(args.folder_pattern),
        file_filter=_pattern_filter(args.file_pattern),
        reset_removal_per_entry=args.reset_removal,
    )
    events = visitor.events

    if args.verbose:
        events.attach(Notification.START, lambda: print("Started"))
        events.attach(Notification.FINISH, lambda: print("Finished"))
        events.attach(Notification.FILE_FOUND, lambda e: print(f"File found: {e.path}"))
        events.attach(Notification.DIRECTORY_FOUND, lambda e: print(f"Directory found: {e.path}"))
        events.attach(Notification.FILTERED_FILE_FOUND,
                      lambda e: print(f"Filtered file found: {e.path}"))
        events.attach(Notification.FILTERED_DIRECTORY_FOUND,
                      lambda e: print(f"Filtered directory found: {e.path}"))

    if args.remove_dirs:
        @events.on(Notification.FILTERED_DIRECTORY_FOUND)
        def remove_directory(event: FilteredEvent) -> None:
            event.remove_item = True

    if args.remove_after is not None or args.stop_after is not None:
        counter = {'filtered_files': 0}

        @events.on(Notification.FILTERED_FILE_FOUND)
        def apply_thresholds(event: FilteredEvent) -> None:
            counter['filtered_files'] += 1
            count = counter['filtered_files']
            if args.remove_after is not None and count > args.remove_after:
                event.remove_item = True
            if args.stop_after is not None and count > args.stop_after:
                event.stop_search = True

    return visitor


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the CLI.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    elif args.verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    try:
        visitor = build_visitor(args)
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    yielded = 0
    try:
        for path in visitor:
            print(path)
            yielded += 1
    except PermissionError as e:
        logger.warning("Traversal aborted: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ACCESS_DENIED

    logger.info("%d entries yielded%s", yielded,
                " (search stopped)" if visitor.search_stopped else "")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

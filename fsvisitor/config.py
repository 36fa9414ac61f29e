"""Configuration for a FileSystemVisitor.

A TraversalConfig records what the caller asked for: the root directory and
the folder/file predicates. Predicates the caller did not supply are replaced
by ALWAYS_ACCEPT and flagged as defaults, so the visitor knows not to raise
filtered notifications for them.
"""

import os
from dataclasses import dataclass
from typing import Callable, List, Optional, Union


PathPredicate = Callable[[str], bool]
PathLike = Union[str, os.PathLike]


def ALWAYS_ACCEPT(path: str) -> bool:
    """Default predicate: every entry belongs to the filtered set."""
    return True


@dataclass(frozen=True)
class TraversalConfig:
    """Immutable traversal settings, created once per visitor."""

    root: str
    folder_filter: PathPredicate = ALWAYS_ACCEPT
    file_filter: PathPredicate = ALWAYS_ACCEPT

    # True when the matching predicate was not supplied by the caller
    default_folder_filter: bool = True
    default_file_filter: bool = True

    # Clear the removal flag before every entry instead of carrying the
    # last filtered decision over to unfiltered entries
    reset_removal_per_entry: bool = False

    @classmethod
    def create(cls,
               root: PathLike,
               folder_filter: Optional[PathPredicate] = None,
               file_filter: Optional[PathPredicate] = None,
               reset_removal_per_entry: bool = False) -> 'TraversalConfig':
        """Build a config, substituting ALWAYS_ACCEPT for missing predicates.

        Args:
            root: Directory the traversal starts from (str or os.PathLike,
                stored as str)
            folder_filter: Predicate applied to directory paths
            file_filter: Predicate applied to file paths
            reset_removal_per_entry: Use the per-entry removal reset mode

        Returns:
            TraversalConfig with default flags set accordingly
        """
        if isinstance(root, os.PathLike):
            root = os.fspath(root)
        return cls(
            root=root,
            folder_filter=folder_filter if folder_filter is not None else ALWAYS_ACCEPT,
            file_filter=file_filter if file_filter is not None else ALWAYS_ACCEPT,
            default_folder_filter=folder_filter is None,
            default_file_filter=file_filter is None,
            reset_removal_per_entry=reset_removal_per_entry,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Root existence is not checked here; that needs a directory adapter
        and happens when the visitor is constructed.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.root, str) or not self.root:
            errors.append("root must be a non-empty path")

        if not callable(self.folder_filter):
            errors.append("folder_filter must be callable")

        if not callable(self.file_filter):
            errors.append("file_filter must be callable")

        return errors

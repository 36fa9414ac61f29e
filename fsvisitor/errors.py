"""Exceptions raised by fsvisitor.

Filesystem errors (PermissionError and other OSError subclasses) are never
wrapped; they propagate out of the enumeration exactly as the directory
adapter raised them.
"""


class VisitorError(Exception):
    """Base class for errors raised by fsvisitor itself."""
    pass


class InvalidArgument(VisitorError, ValueError):
    """Raised for a missing root directory or a None event argument."""
    pass

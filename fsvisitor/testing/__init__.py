"""Testing utilities for fsvisitor consumers."""

from .fixtures import InMemoryDirectoryAccess

__all__ = ['InMemoryDirectoryAccess']

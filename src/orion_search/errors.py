"""Exception hierarchy for the search layer.

Failures are structural: they abort the operation in progress and leave
user-facing messaging to the caller. Storage adapter exceptions are never
wrapped and propagate unchanged.
"""

from __future__ import annotations


class OrionSearchError(Exception):
    """Base class for errors raised by orion_search."""


class SchemaMismatchError(OrionSearchError, TypeError):
    """Raised when a field holds a value of a different kind than expected."""

    def __init__(self, field: str, expected: str, actual: object) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"Field '{field}' expected {expected}, got {type(actual).__name__}")


class UnsupportedSearchTypeError(OrionSearchError, NotImplementedError):
    """Raised when a search type exists but has no implementation yet."""


class UnknownSearchTypeError(OrionSearchError, ValueError):
    """Raised when a search type name cannot be resolved."""


class RecordNotFoundError(OrionSearchError, LookupError):
    """Raised when a storage adapter cannot locate the record it is asked to update."""


class StorageError(OrionSearchError, ValueError):
    """Raised when a bundled storage adapter is given records it cannot store."""

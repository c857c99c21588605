"""Record model shared by storage adapters and search strategies."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping
from enum import Enum
from typing import Any

from orion_search.errors import SchemaMismatchError


class FieldKind(str, Enum):
    """Kinds of values a record field may hold."""

    TEXT = "text"
    TEXT_SET = "text_set"
    SCALAR = "scalar"


def field_kind(value: Any) -> FieldKind:
    """Classify a field value."""
    if isinstance(value, str):
        return FieldKind.TEXT
    if isinstance(value, (set, frozenset)):
        return FieldKind.TEXT_SET
    return FieldKind.SCALAR


def _bag_item(value: Any) -> Hashable:
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    if isinstance(value, list):
        return tuple(value)
    return value


class Record:
    """A row of the caller's store.

    Two records compare equal when their values form the same multiset,
    regardless of the keys those values are stored under.
    """

    __slots__ = ("data", "score", "main", "secondary")

    def __init__(self, data: Mapping[str, Any] | None = None, **fields: Any) -> None:
        self.data: dict[str, Any] = dict(data or {})
        self.data.update(fields)
        self.score: float = 0.0
        self.main: str | None = None
        self.secondary: str | None = None

    @property
    def keys(self) -> list[str]:
        return list(self.data.keys())

    @property
    def values(self) -> list[Any]:
        return list(self.data.values())

    def get(self, field: str, default: Any = None) -> Any:
        return self.data.get(field, default)

    def __contains__(self, field: object) -> bool:
        return field in self.data

    def __getitem__(self, field: str) -> Any:
        return self.data[field]

    def set_main(self, key: str) -> None:
        """Designate ``key`` as the main field when the record carries it."""
        if key in self.data:
            self.main = key

    def set_secondary(self, key: str) -> None:
        """Designate ``key`` as the secondary field when the record carries it."""
        if key in self.data:
            self.secondary = key

    def text(self, field: str) -> str:
        """Return the text stored at ``field`` or raise ``SchemaMismatchError``."""
        value = self.data.get(field)
        if not isinstance(value, str):
            raise SchemaMismatchError(field, FieldKind.TEXT.value, value)
        return value

    def _bag(self) -> Counter:
        return Counter(_bag_item(value) for value in self.data.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._bag() == other._bag()

    def __hash__(self) -> int:
        return hash(frozenset(self._bag().items()))

    def __repr__(self) -> str:
        return f"Record({self.data!r}, score={self.score!r})"


def as_records(rows: Iterable[Record | Mapping[str, Any]]) -> list[Record]:
    """Wrap plain mappings into records, leaving records untouched."""
    return [row if isinstance(row, Record) else Record(row) for row in rows]

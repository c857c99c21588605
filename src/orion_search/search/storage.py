"""Storage adapter contract and the default in-memory implementation.

A storage adapter is the only bridge between the search layer and the
caller's records. It answers three calls:

* ``select(field, match_value, row_range)`` - records whose ``field`` matches
  ``match_value``; ``None`` for either argument means "all rows" / "every row
  in range".
* ``add(records)`` - persist new records.
* ``write_keywords(tokens, record)`` - persist the keyword set computed for
  ``record``.

Exceptions raised by adapters propagate unchanged and abort the operation
that triggered them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
import logging
from typing import Any

from orion_search.errors import RecordNotFoundError, SchemaMismatchError
from orion_search.search.records import FieldKind, Record, as_records


logger = logging.getLogger(__name__)

KEYWORDS_FIELD = "keywords"

RowRange = tuple[int, int]
SelectFn = Callable[[str, Any, RowRange | None], Sequence[Record]]
AddFn = Callable[[list[Record]], None]
WriteKeywordsFn = Callable[[set[str], Record], None]


class StorageAdapter(ABC):
    """Abstract record store the search layer reads from and writes to."""

    @abstractmethod
    def select(self, field: str, match_value: Any = None, row_range: RowRange | None = None) -> list[Record]:
        """Return records matching ``match_value`` at ``field`` in adapter order.

        Args:
            field: Field to test. ``"keywords"`` holds the per-record keyword set.
            match_value: Token to look for, or ``None`` for every row.
            row_range: Half-open ``(start, stop)`` row window, or ``None`` for all rows.
        """
        raise NotImplementedError

    @abstractmethod
    def add(self, records: list[Record]) -> None:
        """Persist new records."""
        raise NotImplementedError

    @abstractmethod
    def write_keywords(self, tokens: set[str], record: Record) -> None:
        """Store ``tokens`` as the keyword set of ``record``."""
        raise NotImplementedError

    def count(self) -> int:
        """Total number of rows; used to plan paged configuration passes."""
        return len(self.select(KEYWORDS_FIELD))


def matches(record: Record, field: str, match_value: Any) -> bool:
    """Default match semantics shared by the bundled adapters.

    ``keywords`` is a set-membership test; any other field is lowercased,
    split on whitespace and compared token by token. Records without the
    field never match.
    """
    if field not in record:
        return False
    value = record[field]
    if field == KEYWORDS_FIELD:
        if not isinstance(value, (set, frozenset)):
            raise SchemaMismatchError(field, FieldKind.TEXT_SET.value, value)
        return match_value in value
    if not isinstance(value, str):
        raise SchemaMismatchError(field, FieldKind.TEXT.value, value)
    return match_value in value.lower().split()


class InMemoryStorage(StorageAdapter):
    """Linear-scan adapter over a Python list."""

    def __init__(self, records: Iterable[Record | dict[str, Any]] | None = None) -> None:
        self.records: list[Record] = as_records(records or [])

    def select(self, field: str, match_value: Any = None, row_range: RowRange | None = None) -> list[Record]:
        rows = self.records if row_range is None else self.records[row_range[0] : row_range[1]]
        if match_value is None:
            return list(rows)
        return [record for record in rows if matches(record, field, match_value)]

    def add(self, records: list[Record]) -> None:
        self.records.extend(records)

    def write_keywords(self, tokens: set[str], record: Record) -> None:
        stored = self._locate(record)
        stored.data[KEYWORDS_FIELD] = set(tokens)

    def count(self) -> int:
        return len(self.records)

    def _locate(self, record: Record) -> Record:
        for stored in self.records:
            if stored is record:
                return stored
        for stored in self.records:
            if stored == record:
                return stored
        raise RecordNotFoundError(f"No stored record matches {record!r}")


class CallbackStorage(StorageAdapter):
    """Adapter assembled from three caller-supplied callables.

    Example:
        >>> storage = CallbackStorage(
        ...     select=lambda field, value, rows: [],
        ...     add=lambda records: None,
        ...     write_keywords=lambda tokens, record: None,
        ... )
    """

    def __init__(
        self,
        select: SelectFn,
        add: AddFn,
        write_keywords: WriteKeywordsFn,
        count: Callable[[], int] | None = None,
    ) -> None:
        self._select = select
        self._add = add
        self._write_keywords = write_keywords
        self._count = count

    def select(self, field: str, match_value: Any = None, row_range: RowRange | None = None) -> list[Record]:
        return as_records(self._select(field, match_value, row_range))

    def add(self, records: list[Record]) -> None:
        self._add(records)

    def write_keywords(self, tokens: set[str], record: Record) -> None:
        self._write_keywords(tokens, record)

    def count(self) -> int:
        if self._count is not None:
            return self._count()
        return super().count()

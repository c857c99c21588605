"""Database facade: a storage adapter plus the keyword cache built over it.

``configure`` walks every record once in windows of ``CONFIGURE_PAGE_SIZE``
rows, tokenizes the main (and optional secondary) field, grows the keyword
cache and hands each record's keyword set back to the adapter. ``add`` does
the same for newly inserted records only, so the cache never needs a full
rebuild.

Callers must serialize ``configure``, ``add`` and searches against one
database; nothing here takes a lock.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
import logging
from typing import Any

from orion_search.config import get_settings
from orion_search.errors import SchemaMismatchError
from orion_search.observability import RECORDS_INDEXED, create_span
from orion_search.search.analyzers import tokenize
from orion_search.search.cache import KeywordCache
from orion_search.search.records import FieldKind, Record, as_records, field_kind
from orion_search.search.storage import KEYWORDS_FIELD, InMemoryStorage, RowRange, StorageAdapter


logger = logging.getLogger(__name__)

CONFIGURE_PAGE_SIZE = 1000

ProgressCallback = Callable[[int, int], None]


class Database:
    """Owns a storage adapter and the keyword vocabulary of its records.

    Example:
        >>> db = Database(records=[{"title": "Hello World", "author": "Me"}])
        >>> db.configure("title")
        >>> sorted(db.keyword_cache)
        ['hello', 'world']
        >>> restored = Database(cache=db.snapshot())
    """

    def __init__(
        self,
        adapter: StorageAdapter | None = None,
        cache: Iterable[str] | None = None,
        *,
        records: Iterable[Record | Mapping[str, Any]] | None = None,
    ) -> None:
        if adapter is not None and records is not None:
            raise ValueError("Pass either an adapter or seed records, not both")
        self.adapter = adapter if adapter is not None else InMemoryStorage(records)
        self.keyword_cache = KeywordCache(cache or ())
        self.schema: dict[str, FieldKind] = {KEYWORDS_FIELD: FieldKind.TEXT_SET}
        self.main_field: str | None = None
        self.secondary_field: str | None = None

    def declare(self, field: str, kind: FieldKind) -> None:
        """Declare the value kind ``field`` must hold on every indexed record."""
        self.schema[field] = FieldKind(kind)

    def snapshot(self) -> set[str]:
        """Copy of the keyword cache, suitable for restoring a later ``Database``."""
        return self.keyword_cache.snapshot()

    def select(
        self,
        match_value: Any = None,
        field: str = KEYWORDS_FIELD,
        row_range: RowRange | None = None,
    ) -> list[Record]:
        return self.adapter.select(field, match_value, row_range)

    def write_keywords(self, tokens: set[str], record: Record) -> None:
        self.adapter.write_keywords(tokens, record)

    def configure(
        self,
        main: str,
        secondary: str | None = None,
        language: str | None = None,
        progress: ProgressCallback | None = None,
        *,
        field_kinds: Mapping[str, FieldKind] | None = None,
    ) -> None:
        """Build the keyword cache and per-record keyword sets from every stored record.

        Args:
            main: Field whose text seeds the vocabulary; must hold text on every record.
            secondary: Optional supplementary text field.
            language: Language used for tokenization and stopword removal.
            progress: Called with ``(rows processed, total rows)`` after each window.
            field_kinds: Extra field kinds to enforce while indexing.

        Raises:
            SchemaMismatchError: A record violates a declared field kind.
        """
        self._declare_text_fields(main, secondary, field_kinds)
        language = language or get_settings().default_language
        total = self.adapter.count()
        with create_span(
            "orion.configure",
            attributes={"orion.main_field": main, "orion.language": language, "orion.total_rows": total},
        ):
            for start in range(0, total, CONFIGURE_PAGE_SIZE):
                stop = min(start + CONFIGURE_PAGE_SIZE, total)
                window = self.select(None, KEYWORDS_FIELD, (start, stop))
                for record in window:
                    self._index(record, language)
                RECORDS_INDEXED.labels(operation="configure").inc(len(window))
                if progress is not None:
                    progress(stop, total)
        logger.info(
            "Configured keyword cache from %d records (%d terms)",
            total,
            len(self.keyword_cache),
            extra={"main_field": main, "secondary_field": secondary},
        )

    def add(
        self,
        records: Iterable[Record | Mapping[str, Any]],
        main: str,
        secondary: str | None = None,
        language: str | None = None,
    ) -> list[Record]:
        """Persist ``records`` and index exactly those records.

        Returns the stored ``Record`` objects (plain mappings are wrapped).

        Raises:
            SchemaMismatchError: A record violates a declared field kind; nothing
                from the batch is persisted or indexed.
        """
        new_records = as_records(records)
        self._declare_text_fields(main, secondary, None)
        language = language or get_settings().default_language
        for record in new_records:
            self._validate(record)
        with create_span("orion.add", attributes={"orion.records": len(new_records)}):
            self.adapter.add(new_records)
            for record in new_records:
                self._index(record, language)
        RECORDS_INDEXED.labels(operation="add").inc(len(new_records))
        logger.debug("Indexed %d added records", len(new_records))
        return new_records

    def _declare_text_fields(
        self,
        main: str,
        secondary: str | None,
        field_kinds: Mapping[str, FieldKind] | None,
    ) -> None:
        self.main_field = main
        self.secondary_field = secondary
        self.declare(main, FieldKind.TEXT)
        if secondary is not None:
            self.declare(secondary, FieldKind.TEXT)
        for field, kind in (field_kinds or {}).items():
            self.declare(field, kind)

    def _check_schema(self, record: Record) -> None:
        for field, kind in self.schema.items():
            if field in record and field_kind(record[field]) is not kind:
                raise SchemaMismatchError(field, kind.value, record[field])

    def _validate(self, record: Record) -> None:
        self._check_schema(record)
        record.text(self.main_field)
        if self.secondary_field is not None:
            record.text(self.secondary_field)

    def _index(self, record: Record, language: str) -> None:
        self._check_schema(record)
        record.set_main(self.main_field)
        keys: set[str] = set()
        sources = [self.main_field]
        if self.secondary_field is not None:
            record.set_secondary(self.secondary_field)
            sources.append(self.secondary_field)
        for field in sources:
            tokens = tokenize(record.text(field), language)
            self.keyword_cache.update(tokens)
            keys.update(tokens)
        self.write_keywords(keys, record)

"""SQLite binding for the storage adapter contract.

Records live in a single table whose columns are declared up front, plus a
``keywords`` column holding the space-joined keyword set. Row windows are
expressed as ``LIMIT``/``OFFSET`` over rowid order so they stay contiguous
even after deletions.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path
import re
import sqlite3
from typing import Any

from orion_search.errors import RecordNotFoundError, StorageError
from orion_search.search.records import Record
from orion_search.search.storage import KEYWORDS_FIELD, RowRange, StorageAdapter, matches


logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _identifier(name: str) -> str:
    if not _IDENTIFIER_RE.match(name):
        raise StorageError(f"Invalid SQLite identifier '{name}'")
    return name


def _like_escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqliteStorage(StorageAdapter):
    """Storage adapter backed by one SQLite table."""

    def __init__(
        self,
        database: str | Path | sqlite3.Connection = ":memory:",
        *,
        columns: Sequence[str],
        table: str = "records",
    ) -> None:
        self.table = _identifier(table)
        self.columns = [_identifier(column) for column in columns if column != KEYWORDS_FIELD]
        if isinstance(database, sqlite3.Connection):
            self.conn = database
        else:
            self.conn = sqlite3.connect(str(database))
            if str(database) != ":memory:":
                self.conn.execute("PRAGMA journal_mode = WAL")
                self.conn.execute("PRAGMA synchronous = NORMAL")
        self.conn.row_factory = sqlite3.Row
        column_sql = ", ".join(self.columns)
        self.conn.execute(
            f"CREATE TABLE IF NOT EXISTS {self.table} ({column_sql}, {KEYWORDS_FIELD} TEXT NOT NULL DEFAULT '')"
        )
        self.conn.commit()

    def close(self) -> None:
        self.conn.close()

    def select(self, field: str, match_value: Any = None, row_range: RowRange | None = None) -> list[Record]:
        columns = ", ".join([*self.columns, KEYWORDS_FIELD])
        sql = f"SELECT rowid AS row_id, {columns} FROM {self.table} ORDER BY rowid"
        params: list[Any] = []
        if row_range is not None:
            start, stop = row_range
            sql += " LIMIT ? OFFSET ?"
            params.extend([max(stop - start, 0), start])

        if match_value is not None:
            column = _identifier(field)
            if column != KEYWORDS_FIELD and column not in self.columns:
                return []
            pattern = f"%{_like_escape(str(match_value).lower())}%"
            sql = f"SELECT * FROM ({sql}) WHERE lower({column}) LIKE ? ESCAPE '\\' ORDER BY row_id"
            params.append(pattern)

        records = [self._to_record(row) for row in self.conn.execute(sql, params)]
        if match_value is None:
            return records
        # LIKE only prefilters; exact token semantics are checked in Python
        return [record for record in records if matches(record, field, match_value)]

    def add(self, records: list[Record]) -> None:
        for record in records:
            unknown = [key for key in record.keys if key not in self.columns and key != KEYWORDS_FIELD]
            if unknown:
                raise StorageError(f"Columns {unknown} are not part of table '{self.table}'")
            names = [key for key in record.keys if key in self.columns]
            placeholders = ", ".join("?" for _ in names)
            self.conn.execute(
                f"INSERT INTO {self.table} ({', '.join(names)}) VALUES ({placeholders})",
                [record[name] for name in names],
            )
        self.conn.commit()
        logger.debug("Inserted %d records into %s", len(records), self.table)

    def write_keywords(self, tokens: set[str], record: Record) -> None:
        names = [key for key in record.keys if key in self.columns]
        where = " AND ".join(f"{name} IS ?" for name in names) or "1"
        cursor = self.conn.execute(
            f"UPDATE {self.table} SET {KEYWORDS_FIELD} = ? "
            f"WHERE rowid = (SELECT rowid FROM {self.table} WHERE {where} ORDER BY rowid LIMIT 1)",
            [" ".join(sorted(tokens)), *(record[name] for name in names)],
        )
        if cursor.rowcount == 0:
            raise RecordNotFoundError(f"No row in '{self.table}' matches {record!r}")
        self.conn.commit()
        record.data[KEYWORDS_FIELD] = set(tokens)

    def count(self) -> int:
        (total,) = self.conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()
        return int(total)

    def _to_record(self, row: sqlite3.Row) -> Record:
        data = {column: row[column] for column in self.columns if row[column] is not None}
        data[KEYWORDS_FIELD] = set(row[KEYWORDS_FIELD].split())
        return Record(data)

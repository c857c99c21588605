"""Embeddable full-text search over caller-supplied record stores."""

from orion_search.errors import (
    OrionSearchError,
    RecordNotFoundError,
    SchemaMismatchError,
    StorageError,
    UnknownSearchTypeError,
    UnsupportedSearchTypeError,
)
from orion_search.observability import configure_logging, setup_observability
from orion_search.orchestrator import OrionSearch, SearchType
from orion_search.search.analyzers import tokenize
from orion_search.search.cache import KeywordCache
from orion_search.search.database import CONFIGURE_PAGE_SIZE, Database
from orion_search.search.query import Query
from orion_search.search.records import FieldKind, Record
from orion_search.search.sqlite_storage import SqliteStorage
from orion_search.search.stopwords import register_stopwords
from orion_search.search.storage import CallbackStorage, InMemoryStorage, StorageAdapter


__version__ = "0.1.0"

__all__ = [
    "CONFIGURE_PAGE_SIZE",
    "CallbackStorage",
    "Database",
    "FieldKind",
    "InMemoryStorage",
    "KeywordCache",
    "OrionSearch",
    "OrionSearchError",
    "Query",
    "Record",
    "RecordNotFoundError",
    "SchemaMismatchError",
    "SearchType",
    "SqliteStorage",
    "StorageAdapter",
    "StorageError",
    "UnknownSearchTypeError",
    "UnsupportedSearchTypeError",
    "configure_logging",
    "register_stopwords",
    "setup_observability",
    "tokenize",
]

"""Entry point binding a database, accepted filters and result plugins.

Example:
    >>> from orion_search import Database, OrionSearch, Query
    >>> db = Database(records=[{"title": "Rose are red", "type": "poem"}])
    >>> db.configure("title")
    >>> engine = OrionSearch(db, filters=["type"])
    >>> found = []
    >>> engine.perform(Query("roses type:poem"), "normal", found.append)
    1
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
import logging

from orion_search.config import get_settings
from orion_search.errors import UnknownSearchTypeError, UnsupportedSearchTypeError
from orion_search.observability import SEARCH_RESULTS, create_span, track_latency
from orion_search.search.database import Database
from orion_search.search.engine import NormalSearch, QuickSearch, RecordCallback, ResultPlugin
from orion_search.search.query import Query


logger = logging.getLogger(__name__)


class SearchType(str, Enum):
    """How ``OrionSearch.perform`` executes a query."""

    QUICK = "quick"
    NORMAL = "normal"
    ADVANCED = "advanced"

    @classmethod
    def parse(cls, value: SearchType | str) -> SearchType:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise UnknownSearchTypeError(
                f"Unknown search type '{value}'. Available: {[member.value for member in cls]}"
            ) from None


class OrionSearch:
    """Coordinates searches against one ``Database``.

    ``filters`` names the fields users may filter on with ``field:value``
    clauses; clauses on any other field are ignored by normal search.
    """

    def __init__(self, db: Database, filters: Iterable[str] = ()) -> None:
        self.db = db
        self._filters: dict[str, None] = dict.fromkeys(filters)
        self.plugins: list[ResultPlugin] = []

    @property
    def filters(self) -> list[str]:
        return list(self._filters)

    def add_filters(self, fields: Iterable[str]) -> None:
        for field in fields:
            self._filters.setdefault(field, None)

    def register(self, plugin: ResultPlugin) -> None:
        """Append a transform applied to ranked normal-search results."""
        self.plugins.append(plugin)

    def perform(self, query: Query, search_type: SearchType | str, callback: RecordCallback) -> int:
        """Run ``query`` and call ``callback`` once per delivered record.

        Returns the number of deliveries. Blocks until every callback has run.

        Raises:
            UnsupportedSearchTypeError: ``search_type`` is ``advanced``.
            UnknownSearchTypeError: ``search_type`` names no search type.
        """
        kind = SearchType.parse(search_type)
        if kind is SearchType.ADVANCED:
            raise UnsupportedSearchTypeError("Advanced search is not supported yet")

        default_field = get_settings().default_search_field
        if kind is SearchType.QUICK:
            strategy: QuickSearch | NormalSearch = QuickSearch(query, self.db, callback, default_field=default_field)
        else:
            strategy = NormalSearch(
                query,
                self.db,
                callback,
                accepted_filters=self._filters,
                plugins=self.plugins,
                default_field=default_field,
            )

        attributes = {
            "orion.search_type": kind.value,
            "orion.keywords": len(query.keywords),
            "orion.filters": len(query.filters),
        }
        with create_span("orion.perform", attributes=attributes) as span, track_latency(kind.value):
            delivered = strategy.search()
            span.set_attribute("orion.delivered", delivered)
        SEARCH_RESULTS.labels(search_type=kind.value).inc(delivered)
        logger.debug("%s search delivered %d records", kind.value, delivered)
        return delivered

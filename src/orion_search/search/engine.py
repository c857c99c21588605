"""Search strategies.

``QuickSearch`` streams raw adapter matches as they are found: no scoring,
no deduplication, one delivery per matching ``(field, keyword)`` pair.

``NormalSearch`` snaps query keywords to the keyword cache, drops filters on
fields that are not accepted, scores and filters candidates, deduplicates
them, sorts by score, runs the plugin pipeline and only then delivers.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import logging

from orion_search.errors import SchemaMismatchError
from orion_search.search.database import Database
from orion_search.search.fuzzy import nearest_term
from orion_search.search.query import Query
from orion_search.search.records import FieldKind, Record
from orion_search.search.storage import KEYWORDS_FIELD


logger = logging.getLogger(__name__)

RecordCallback = Callable[[Record], None]
ResultPlugin = Callable[[list[Record]], list[Record]]


class QuickSearch:
    """Unranked exact-match search for as-you-type use."""

    def __init__(
        self,
        query: Query,
        db: Database,
        callback: RecordCallback,
        *,
        default_field: str = KEYWORDS_FIELD,
    ) -> None:
        self.query = query
        self.db = db
        self.callback = callback
        self.default_field = default_field

    def search(self) -> int:
        """Deliver every match; returns the number of deliveries."""
        delivered = 0
        for field in self.query.search_fields(self.default_field):
            for keyword in self.query.keywords:
                for record in self.db.select(keyword, field):
                    self.callback(record)
                    delivered += 1
        return delivered


def field_tokens(record: Record, field: str) -> list[str] | None:
    """Whitespace tokens of ``field`` for scoring, ``None`` when the field is absent."""
    if field not in record:
        return None
    value = record[field]
    if isinstance(value, str):
        return value.lower().split()
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise SchemaMismatchError(field, FieldKind.TEXT.value, value)


def filter_text(value: object) -> str:
    if isinstance(value, (set, frozenset)):
        return " ".join(sorted(str(item) for item in value))
    return str(value)


class NormalSearch:
    """Ranked, filtered, typo-tolerant search."""

    def __init__(
        self,
        query: Query,
        db: Database,
        callback: RecordCallback,
        *,
        accepted_filters: Iterable[str] = (),
        plugins: Sequence[ResultPlugin] = (),
        default_field: str = KEYWORDS_FIELD,
    ) -> None:
        self.query = query
        self.db = db
        self.callback = callback
        self.plugins = list(plugins)
        self.default_field = default_field
        accepted = set(accepted_filters)
        self.filters = [(name, value) for name, value in query.filters if name in accepted]

    def corrected_keywords(self) -> dict[str, float]:
        """Map each query keyword to its nearest cached term, carrying its weight.

        Keywords that collapse onto the same term add their weights. With an
        empty cache keywords are kept as typed.
        """
        corrected: dict[str, float] = {}
        for keyword, weight in self.query.keywords.items():
            term = nearest_term(keyword, self.db.keyword_cache) or keyword
            if term != keyword:
                logger.debug("Corrected keyword %r to %r", keyword, term)
            corrected[term] = corrected.get(term, 0.0) + weight
        return corrected

    def accepts(self, record: Record) -> bool:
        """Every admissible filter value must appear (case-insensitively) in its field."""
        for name, value in self.filters:
            if name not in record:
                return False
            if value.lower() not in filter_text(record[name]).lower():
                return False
        return True

    @staticmethod
    def score(tokens: list[str], weights: dict[str, float]) -> float:
        return sum(weights[token] for token in tokens if token in weights)

    def rank(self) -> list[Record]:
        """Gather, score, filter, deduplicate, sort and post-process candidates."""
        weights = self.corrected_keywords()
        members: dict[Record, Record] = {}
        for field in self.query.search_fields(self.default_field):
            for keyword in weights:
                for record in self.db.select(keyword, field):
                    tokens = field_tokens(record, field)
                    if tokens is None or not self.accepts(record):
                        continue
                    # Later visits overwrite the score, they do not accumulate
                    member = members.setdefault(record, record)
                    member.score = self.score(tokens, weights)

        results = sorted(members.values(), key=lambda record: record.score, reverse=True)
        for plugin in self.plugins:
            results = list(plugin(results))
        return results

    def search(self) -> int:
        """Rank, then deliver every result in final order; returns the number delivered."""
        results = self.rank()
        for record in results:
            self.callback(record)
        return len(results)

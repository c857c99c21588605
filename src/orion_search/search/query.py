"""Query parsing: filter clauses, keyword extraction and intra-query weights."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from orion_search.config import get_settings
from orion_search.search.analyzers import tokenize


_FILTER_RE = re.compile(r"\S+:\S+")


def extract_filters(text: str) -> tuple[list[tuple[str, str]], str]:
    """Split ``field:value`` clauses out of ``text``.

    Returns the filter pairs in order of appearance (duplicates kept) and
    the text with every clause removed.

    Examples:
        >>> extract_filters("Hello World author:someone")
        ([('author', 'someone')], 'Hello World ')
    """
    filters: list[tuple[str, str]] = []
    for match in _FILTER_RE.finditer(text):
        name, _, value = match.group(0).partition(":")
        filters.append((name, value))
    return filters, _FILTER_RE.sub("", text)


def score_keywords(tokens: Sequence[str]) -> dict[str, float]:
    """Weight each distinct token by its share of the token stream.

    Weights are plain term frequency and sum to 1.0 for a non-empty stream.
    """
    total = len(tokens)
    if total == 0:
        return {}
    return {token: count / total for token, count in Counter(tokens).items()}


class Query(BaseModel):
    """A parsed search query.

    ``filters`` and ``keywords`` are derived from ``text`` at construction.
    ``restrict_fields`` limits which record fields the search looks into.

    Example:
        >>> q = Query("Rose are red type:poem")
        >>> q.filters
        [('type', 'poem')]
        >>> sorted(q.keywords)
        ['red', 'rose']
    """

    model_config = ConfigDict(frozen=True)

    text: str
    language: str = "en"
    restrict_fields: list[str] | None = None
    filters: list[tuple[str, str]] = Field(default_factory=list)
    keywords: dict[str, float] = Field(default_factory=dict)

    def __init__(
        self,
        text: str,
        language: str | None = None,
        restrict_fields: Sequence[str] | None = None,
        **data: Any,
    ) -> None:
        super().__init__(
            text=text,
            language=language or get_settings().default_language,
            restrict_fields=list(restrict_fields) if restrict_fields is not None else None,
            **data,
        )

    @model_validator(mode="before")
    @classmethod
    def _parse(cls, values: Any) -> Any:
        if not isinstance(values, dict) or "text" not in values:
            return values
        filters, remainder = extract_filters(values["text"])
        tokens = tokenize(remainder, values.get("language") or get_settings().default_language)
        return {**values, "filters": filters, "keywords": score_keywords(tokens)}

    def search_fields(self, default: str = "keywords") -> list[str]:
        """Distinct restricted fields in given order, or ``[default]``."""
        if not self.restrict_fields:
            return [default]
        return list(dict.fromkeys(self.restrict_fields))

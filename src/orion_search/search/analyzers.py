"""Tokenization for queries and record fields.

Text flows through a small composable pipeline: a normalizer (lowercase,
diacritic folding, punctuation stripping), a whitespace tokenizer and a
language-aware stop filter. The stop filter never empties a non-empty
token stream; when every token is a stopword the unfiltered stream is kept.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import logging
import re
import unicodedata

from orion_search.search.stopwords import get_stopwords


logger = logging.getLogger(__name__)

_NON_WORD_RE = re.compile(r"[^\w\d\s]", re.UNICODE)
_WHITESPACE_RUN_RE = re.compile(r"\s+", re.UNICODE)

TokenFilter = Callable[[list[str]], list[str]]


def fold_diacritics(text: str) -> str:
    """Strip combining marks so ``"é"`` and ``"e"`` compare equal."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def normalize(text: str) -> str:
    """Lowercase, fold diacritics, drop punctuation and collapse whitespace runs."""
    folded = fold_diacritics(text.lower())
    stripped = _NON_WORD_RE.sub("", folded)
    return _WHITESPACE_RUN_RE.sub(" ", stripped)


def split_tokens(text: str) -> list[str]:
    return text.split()


class StopFilter:
    """Removes stopwords for one language, falling back to the input when nothing survives."""

    def __init__(self, language: str = "en", stopwords: Iterable[str] | None = None) -> None:
        self.language = language
        self._stopwords = frozenset(stopwords) if stopwords is not None else None

    @property
    def stopwords(self) -> frozenset[str]:
        if self._stopwords is not None:
            return self._stopwords
        return get_stopwords(self.language)

    def __call__(self, tokens: list[str]) -> list[str]:
        stopwords = self.stopwords
        kept = [token for token in tokens if token not in stopwords]
        if kept or not tokens:
            return kept
        logger.debug("All %d tokens are %s stopwords, keeping them", len(tokens), self.language)
        return tokens


class AnalyzerPipeline:
    """Normalizer + tokenizer followed by token filters."""

    def __init__(self, filters: Sequence[TokenFilter] | None = None) -> None:
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[str]:
        tokens = split_tokens(normalize(text))
        for token_filter in self.filters:
            tokens = token_filter(tokens)
        return tokens


_ANALYZERS: dict[str, AnalyzerPipeline] = {}


def get_analyzer(language: str = "en") -> AnalyzerPipeline:
    """Return the (cached) analyzer for ``language``."""
    code = language.lower()
    analyzer = _ANALYZERS.get(code)
    if analyzer is None:
        analyzer = AnalyzerPipeline([StopFilter(code)])
        _ANALYZERS[code] = analyzer
    return analyzer


def tokenize(text: str, language: str = "en") -> list[str]:
    """Turn ``text`` into an ordered list of normalized tokens.

    Examples:
        >>> tokenize("Hello, World!")
        ['hello', 'world']
        >>> tokenize("Café au lait", "fr")
        ['cafe', 'lait']
    """
    return get_analyzer(language)(text)

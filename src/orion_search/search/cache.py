"""Global keyword vocabulary of a store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class KeywordCache:
    """Insertion-ordered, grow-only set of tokens.

    Iteration follows insertion order so nearest-term lookups break ties
    deterministically. ``snapshot()`` hands the vocabulary back to the caller
    for persistence; passing it to a new cache restores it. The snapshot is a
    plain ``set`` and does not carry insertion order: a restored cache iterates
    in whatever order its seed yields, so seed it from an ordered sequence
    (``list(cache)``) when tie-breaks must survive a restore.
    """

    __slots__ = ("_terms",)

    def __init__(self, snapshot: Iterable[str] = ()) -> None:
        self._terms: dict[str, None] = dict.fromkeys(snapshot)

    def add(self, term: str) -> None:
        self._terms.setdefault(term, None)

    def update(self, terms: Iterable[str]) -> None:
        for term in terms:
            self._terms.setdefault(term, None)

    def snapshot(self) -> set[str]:
        return set(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"KeywordCache({len(self._terms)} terms)"

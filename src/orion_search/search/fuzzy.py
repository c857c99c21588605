"""Edit-distance helpers for typo-tolerant keyword correction.

Correction snaps each query keyword to the closest term of the keyword
cache. The scan is linear in the vocabulary size for every keyword, which
is fine for small and medium vocabularies but is the scalability ceiling of
normal search on large corpora.
"""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(s1: str, s2: str, max_distance: int | None = None) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Args:
        s1: First string.
        s2: Second string.
        max_distance: If provided, return max_distance+1 early when
            distance is guaranteed to exceed this threshold.

    Returns:
        The minimum number of single-character insertions, deletions or
        substitutions needed to change s1 into s2.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("tpyo", "typo")
        2
        >>> levenshtein_distance("", "abc")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Use shorter string as columns
    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)

    if max_distance is not None and n - m > max_distance:
        return max_distance + 1

    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        row_min = curr_row[0]
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            curr_row[i] = min(
                prev_row[i] + 1,  # deletion
                curr_row[i - 1] + 1,  # insertion
                prev_row[i - 1] + cost,  # substitution
            )
            row_min = min(row_min, curr_row[i])

        if max_distance is not None and row_min > max_distance:
            return max_distance + 1

        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def nearest_term(term: str, vocabulary: Iterable[str]) -> str | None:
    """Return the vocabulary entry closest to ``term``.

    Ties go to the entry seen first. Returns ``None`` for an empty
    vocabulary.

    Examples:
        >>> nearest_term("tpyo", ["tape", "typo", "type"])
        'typo'
    """
    best: str | None = None
    best_distance = 0
    for candidate in vocabulary:
        if candidate == term:
            return candidate
        # Anything at or beyond the current best cannot replace it
        bound = best_distance - 1 if best is not None else None
        distance = levenshtein_distance(term, candidate, bound)
        if best is None or distance < best_distance:
            best = candidate
            best_distance = distance
    return best

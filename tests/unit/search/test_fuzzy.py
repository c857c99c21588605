"""Unit tests for edit distance and nearest-term lookup."""

import pytest

from orion_search.search.fuzzy import levenshtein_distance, nearest_term


@pytest.mark.unit
class TestLevenshteinDistance:
    def test_identical_strings(self):
        assert levenshtein_distance("hello", "hello") == 0

    def test_empty_strings(self):
        assert levenshtein_distance("", "") == 0
        assert levenshtein_distance("abc", "") == 3
        assert levenshtein_distance("", "abc") == 3

    def test_single_edits(self):
        assert levenshtein_distance("cat", "cats") == 1
        assert levenshtein_distance("cats", "cat") == 1
        assert levenshtein_distance("cat", "bat") == 1

    def test_multiple_edits(self):
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("tpyo", "typo") == 2

    def test_max_distance_short_circuits(self):
        assert levenshtein_distance("a", "abcdef", max_distance=2) == 3
        assert levenshtein_distance("abc", "xyz", max_distance=1) == 2
        assert levenshtein_distance("abc", "abd", max_distance=1) == 1


@pytest.mark.unit
class TestNearestTerm:
    def test_typo_snaps_to_known_term(self):
        assert nearest_term("tpyo", ["tape", "typo", "types"]) == "typo"

    def test_exact_match_wins(self):
        assert nearest_term("world", ["word", "world"]) == "world"

    def test_first_occurrence_wins_ties(self):
        assert nearest_term("bat", ["cat", "hat"]) == "cat"
        assert nearest_term("bat", ["hat", "cat"]) == "hat"

    def test_empty_vocabulary(self):
        assert nearest_term("anything", []) is None

    def test_accepts_any_iterable(self):
        assert nearest_term("helo", iter(["hello", "help"])) == "hello"

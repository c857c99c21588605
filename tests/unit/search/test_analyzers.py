"""Unit tests for tokenization and stopword handling."""

import pytest

from orion_search.search.analyzers import (
    AnalyzerPipeline,
    StopFilter,
    fold_diacritics,
    get_analyzer,
    normalize,
    tokenize,
)
from orion_search.search.stopwords import available_languages, get_stopwords, register_stopwords


@pytest.mark.unit
class TestNormalize:
    def test_lowercases_and_strips_punctuation(self):
        assert normalize("Hello, World!") == "hello world"

    def test_collapses_whitespace_runs(self):
        assert normalize("a   b    c") == "a b c"

    def test_single_newline_or_tab_is_a_separator(self):
        assert normalize("Hello\nWorld\tagain") == "hello world again"
        assert tokenize("Hello\nWorld") == ["hello", "world"]

    def test_folds_diacritics(self):
        assert fold_diacritics("Crème brûlée") == "Creme brulee"
        assert normalize("ÉLÈVE") == "eleve"


@pytest.mark.unit
class TestTokenize:
    def test_basic_tokens(self):
        assert tokenize("Hello World") == ["hello", "world"]

    def test_removes_english_stopwords(self):
        assert tokenize("OrionSearch is awesome") == ["orionsearch", "awesome"]

    def test_keeps_order_and_duplicates(self):
        assert tokenize("red rose red") == ["red", "rose", "red"]

    def test_all_stopwords_fall_back_to_unfiltered(self):
        assert tokenize("How are you") == ["how", "are", "you"]

    def test_empty_text_yields_no_tokens(self):
        assert tokenize("") == []
        assert tokenize("   ?! ") == []

    def test_language_specific_stopwords(self):
        assert tokenize("Le chat et la souris", "fr") == ["chat", "souris"]
        # French stopwords are not English stopwords
        assert tokenize("Le chat et la souris", "en") == ["le", "chat", "et", "la", "souris"]

    def test_unknown_language_removes_nothing(self):
        assert tokenize("the cat", "xx") == ["the", "cat"]

    def test_digits_survive(self):
        assert tokenize("Python 3 release") == ["python", "3", "release"]


@pytest.mark.unit
class TestStopFilter:
    def test_explicit_stopwords(self):
        stop = StopFilter(stopwords={"foo"})
        assert stop(["foo", "bar"]) == ["bar"]

    def test_never_empties_non_empty_stream(self):
        stop = StopFilter(stopwords={"foo"})
        assert stop(["foo", "foo"]) == ["foo", "foo"]

    def test_pipeline_applies_filters_in_order(self):
        pipeline = AnalyzerPipeline([StopFilter(stopwords={"b"}), lambda tokens: [t.upper() for t in tokens]])
        assert pipeline("a b c") == ["A", "C"]

    def test_analyzers_are_cached_per_language(self):
        assert get_analyzer("EN") is get_analyzer("en")


@pytest.mark.unit
class TestStopwordTables:
    def test_bundled_languages(self):
        assert {"en", "fr", "de", "es", "it", "pt", "nl"} <= set(available_languages())

    def test_unknown_language_is_empty(self):
        assert get_stopwords("zz") == frozenset()

    def test_register_extends_and_is_seen_by_cached_analyzers(self):
        tokenize("alpha beta", "qq")
        register_stopwords("qq", ["Alpha"], replace=True)
        assert tokenize("alpha beta", "qq") == ["beta"]
        register_stopwords("qq", ["gamma"])
        assert get_stopwords("qq") == frozenset({"alpha", "gamma"})

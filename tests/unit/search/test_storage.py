"""Unit tests for the keyword cache and the bundled storage adapters."""

import pytest

from orion_search.errors import RecordNotFoundError, SchemaMismatchError
from orion_search.search.cache import KeywordCache
from orion_search.search.fuzzy import nearest_term
from orion_search.search.records import Record
from orion_search.search.storage import CallbackStorage, InMemoryStorage, matches


@pytest.mark.unit
class TestKeywordCache:
    def test_restores_from_snapshot(self):
        cache = KeywordCache({"hello", "world"})
        assert "hello" in cache
        assert len(cache) == 2

    def test_grows_and_keeps_insertion_order(self):
        cache = KeywordCache()
        cache.update(["b", "a", "b"])
        cache.add("c")
        assert list(cache) == ["b", "a", "c"]

    def test_restore_from_ordered_seed_keeps_tie_breaks(self):
        cache = KeywordCache()
        cache.update(["cat", "bat"])
        restored = KeywordCache(list(cache))
        assert list(restored) == ["cat", "bat"]
        assert nearest_term("hat", restored) == "cat"

    def test_snapshot_is_a_copy(self):
        cache = KeywordCache(["a"])
        snapshot = cache.snapshot()
        snapshot.add("b")
        assert "b" not in cache


@pytest.mark.unit
class TestMatches:
    def test_keywords_is_set_membership(self):
        record = Record({"keywords": {"hello", "world"}})
        assert matches(record, "keywords", "hello")
        assert not matches(record, "keywords", "hell")

    def test_text_fields_compare_whole_lowercased_tokens(self):
        record = Record({"title": "Random titles"})
        assert matches(record, "title", "random")
        assert not matches(record, "title", "title")

    def test_missing_field_never_matches(self):
        assert not matches(Record({"title": "x"}), "author", "x")

    def test_wrong_kinds_raise(self):
        with pytest.raises(SchemaMismatchError):
            matches(Record({"keywords": "hello"}), "keywords", "hello")
        with pytest.raises(SchemaMismatchError):
            matches(Record({"year": 2019}), "year", "2019")


@pytest.mark.unit
class TestInMemoryStorage:
    def test_select_all_and_ranges(self, sample_rows):
        storage = InMemoryStorage(sample_rows)
        assert len(storage.select("keywords")) == 4
        window = storage.select("keywords", None, (1, 3))
        assert [record["title"] for record in window] == ["How are you", "Random titles"]
        assert storage.count() == 4

    def test_select_by_token(self, sample_rows):
        storage = InMemoryStorage(sample_rows)
        found = storage.select("title", "test")
        assert [record["title"] for record in found] == ["Just for test"]

    def test_range_applies_before_match(self, sample_rows):
        storage = InMemoryStorage(sample_rows)
        assert storage.select("title", "test", (0, 2)) == []

    def test_write_keywords_by_identity(self, sample_records):
        storage = InMemoryStorage(sample_records)
        storage.write_keywords({"hello", "world"}, sample_records[0])
        assert sample_records[0]["keywords"] == {"hello", "world"}

    def test_write_keywords_by_bag_equality(self):
        stored = Record({"title": "Hello", "author": "Me"})
        storage = InMemoryStorage([stored])
        storage.write_keywords({"hello"}, Record({"heading": "Me", "name": "Hello"}))
        assert stored["keywords"] == {"hello"}

    def test_write_keywords_unknown_record(self):
        storage = InMemoryStorage([{"title": "a"}])
        with pytest.raises(RecordNotFoundError):
            storage.write_keywords({"b"}, Record({"title": "b"}))


@pytest.mark.unit
class TestCallbackStorage:
    def test_delegates_to_callables(self):
        rows = [{"title": "Hello"}]
        calls = []
        storage = CallbackStorage(
            select=lambda field, value, rows_range: rows,
            add=lambda records: calls.append(("add", len(records))),
            write_keywords=lambda tokens, record: calls.append(("kw", sorted(tokens))),
        )
        selected = storage.select("keywords")
        assert isinstance(selected[0], Record)
        assert storage.count() == 1
        storage.add([Record({"title": "x"})])
        storage.write_keywords({"x"}, selected[0])
        assert calls == [("add", 1), ("kw", ["x"])]

    def test_explicit_count(self):
        storage = CallbackStorage(
            select=lambda *args: [],
            add=lambda records: None,
            write_keywords=lambda tokens, record: None,
            count=lambda: 12,
        )
        assert storage.count() == 12

    def test_adapter_errors_propagate(self):
        def broken_select(field, value, rows_range):
            raise ConnectionError("database down")

        storage = CallbackStorage(select=broken_select, add=lambda r: None, write_keywords=lambda t, r: None)
        with pytest.raises(ConnectionError):
            storage.select("keywords", "x")

"""Unit tests for the record model."""

import pytest

from orion_search.errors import SchemaMismatchError
from orion_search.search.records import FieldKind, Record, as_records, field_kind


@pytest.mark.unit
class TestRecord:
    def test_keys_and_values(self):
        record = Record({"title": "Hello World", "author": "Arthur", "type": "book"})
        assert "title" in record.keys
        assert len(record.keys) == 3
        assert sorted(record.values) == ["Arthur", "Hello World", "book"]
        assert record.score == 0.0

    def test_keyword_arguments(self):
        assert Record(title="a", year=2019).data == {"title": "a", "year": 2019}

    def test_main_and_secondary_require_existing_field(self):
        record = Record({"title": "Hello", "body": "text"})
        record.set_main("title")
        record.set_secondary("missing")
        assert record.main == "title"
        assert record.secondary is None
        record.set_secondary("body")
        assert record.secondary == "body"

    def test_text_accessor(self):
        record = Record({"title": "Hello", "year": 2019})
        assert record.text("title") == "Hello"
        with pytest.raises(SchemaMismatchError):
            record.text("year")
        with pytest.raises(SchemaMismatchError):
            record.text("missing")


@pytest.mark.unit
class TestBagEquality:
    def test_equal_when_values_match_under_different_keys(self):
        left = Record({"title": "Hello", "author": "Me"})
        right = Record({"name": "Me", "heading": "Hello"})
        assert left == right
        assert hash(left) == hash(right)

    def test_multiplicity_matters(self):
        assert Record({"a": "x", "b": "x"}) != Record({"a": "x", "b": "y"})
        assert Record({"a": "x"}) != Record({"a": "x", "b": "x"})

    def test_score_is_not_part_of_identity(self):
        left = Record({"a": "x"})
        right = Record({"a": "x"})
        right.score = 3.0
        assert left == right

    def test_set_values_are_hashable(self):
        left = Record({"title": "x", "keywords": {"a", "b"}})
        right = Record({"title": "x", "keywords": frozenset({"b", "a"})})
        assert left == right
        assert len({left, right}) == 1

    def test_not_equal_to_plain_mapping(self):
        assert Record({"a": "x"}) != {"a": "x"}


@pytest.mark.unit
def test_field_kind():
    assert field_kind("text") is FieldKind.TEXT
    assert field_kind({"a"}) is FieldKind.TEXT_SET
    assert field_kind(frozenset()) is FieldKind.TEXT_SET
    assert field_kind(42) is FieldKind.SCALAR


@pytest.mark.unit
def test_as_records_wraps_mappings_only():
    existing = Record({"a": "x"})
    wrapped = as_records([existing, {"b": "y"}])
    assert wrapped[0] is existing
    assert isinstance(wrapped[1], Record)

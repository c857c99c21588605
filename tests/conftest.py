"""Shared test fixtures and configuration."""

import os

import pytest


TEST_ENV = {
    "ORION_DEFAULT_LANGUAGE": "en",
    "ORION_DEFAULT_SEARCH_FIELD": "keywords",
    "ORION_LOG_LEVEL": "info",
    "ORION_LOG_JSON": "true",
}

for key, value in TEST_ENV.items():
    os.environ[key] = value

from orion_search.config import get_settings
from orion_search.search.database import Database
from orion_search.search.records import Record


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset ORION_* variables and the cached settings around each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_rows():
    return [
        {"title": "Hello World", "author": "Me"},
        {"title": "How are you", "author": "you"},
        {"title": "Random titles", "author": "someone"},
        {"title": "Just for test", "author": "someone else"},
    ]


@pytest.fixture
def sample_records(sample_rows):
    return [Record(row) for row in sample_rows]


@pytest.fixture
def configured_db(sample_records):
    db = Database(records=sample_records)
    db.configure("title")
    return db

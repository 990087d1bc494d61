"""
Shared fixtures: a small SQLite word database and matching settings.
"""

import pytest

from fluent_codes import FluentCodesSettings, InMemoryLexicalStore
from fluent_codes.config import reset_settings

from helpers import WORDS, build_word_database


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def word_db(tmp_path):
    return build_word_database(tmp_path / "words_release.db")


@pytest.fixture
def settings(word_db):
    return FluentCodesSettings(store_path=word_db)


@pytest.fixture
def memory_factory():
    return lambda: InMemoryLexicalStore(WORDS)

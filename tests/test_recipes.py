"""Tests for preset recipes."""

import re

import pytest

from fluent_codes import (
    FluentCodesSettings,
    NoMatchingWord,
    WordCategory,
    four_words,
    generate,
    get_recipe,
    list_recipes,
    three_words_and_six_digits,
)


def test_four_words(settings):
    for seed in range(10):
        code = four_words(settings=settings, random_seed=seed)
        parts = code.split("-")
        assert len(parts) == 4
        assert all(len(p) == 6 and p.isalpha() for p in parts)


def test_three_words_and_six_digits(settings):
    for seed in range(10):
        parts = three_words_and_six_digits(settings=settings, random_seed=seed).split("-")
        assert len(parts) == 4
        assert re.fullmatch(r"\d{6}", parts[-1])


def test_presets_without_arguments(word_db, monkeypatch, tmp_path):
    monkeypatch.delenv("FLUENT_CODES_CONFIG", raising=False)
    monkeypatch.setenv("FLUENT_CODES_STORE", str(word_db))
    monkeypatch.chdir(tmp_path)

    assert len(four_words().split("-")) == 4
    assert len(three_words_and_six_digits().split("-")) == 4


def test_presets_with_in_memory_store(settings, memory_factory):
    code = four_words(store_factory=memory_factory, settings=settings, random_seed=3)
    assert len(code.split("-")) == 4


def test_seeded_recipe_is_reproducible(settings):
    assert generate("four_words", settings=settings, random_seed=99) == generate(
        "four_words", settings=settings, random_seed=99
    )


def test_builtin_recipe_steps():
    assert get_recipe("four_words") == (
        WordCategory.ADJECTIVE,
        WordCategory.VERB,
        WordCategory.NOUN,
        WordCategory.ADJECTIVE,
    )
    assert get_recipe("three_words_and_six_digits")[-1] == "six_digits"


def test_settings_recipes(word_db):
    settings = FluentCodesSettings(
        store_path=word_db,
        recipes={"ticket": ["proper-noun", "six_digits"]},
    )

    assert "ticket" in list_recipes(settings)
    assert get_recipe("ticket", settings) == (WordCategory.PROPER_NOUN, "six_digits")

    name, number = generate("ticket", settings=settings, random_seed=1).split("-")
    assert name in {"london", "jdlugosz", "mary", "nato"}
    assert re.fullmatch(r"\d{6}", number)


def test_settings_recipe_overrides_builtin(word_db):
    settings = FluentCodesSettings(store_path=word_db, recipes={"four_words": ["noun"]})
    assert get_recipe("four_words", settings) == (WordCategory.NOUN,)


def test_unknown_recipe(settings):
    with pytest.raises(ValueError, match="Unknown recipe: nope. Available: four_words"):
        generate("nope", settings=settings)


def test_recipe_failure_propagates(word_db):
    settings = FluentCodesSettings(store_path=word_db, min_length=40, max_length=50)
    with pytest.raises(NoMatchingWord):
        four_words(settings=settings)

"""
Fluent codes: human-readable identifiers built from part-of-speech words.

Usage:
    from fluent_codes import FluentCodes, four_words

    print(four_words())                 # fluffy-vacuum-misuse-deadly

    with FluentCodes() as codes:
        print(
            codes.with_min_length(3).with_max_length(8)
            .with_joiner("..{-_-}..")
            .adjective().adverb().noun().verb().six_digits()
            .to_string()
        )

Words are read from a SQLite database (db/words_release.db by default, or
$FLUENT_CODES_STORE). Pass store_factory to use another LexicalStore, such
as InMemoryLexicalStore.
"""

from .builder import FluentCodes
from .config import FluentCodesSettings, get_settings, load_settings, reset_settings
from .connection import StoreConnection
from .digits import random_digits
from .exceptions import (
    ConfigurationError,
    FluentCodesError,
    InvalidLengthRange,
    NoMatchingWord,
    StoreUnavailable,
)
from .formatter import render
from .models import LengthRange, WordCategory
from .recipes import (
    RECIPES,
    four_words,
    generate,
    get_recipe,
    list_recipes,
    three_words_and_six_digits,
)
from .store import InMemoryLexicalStore, LexicalStore, SQLiteLexicalStore

__all__ = [
    # Builder
    "FluentCodes",
    # Models
    "WordCategory",
    "LengthRange",
    # Stores
    "LexicalStore",
    "SQLiteLexicalStore",
    "InMemoryLexicalStore",
    "StoreConnection",
    # Formatting
    "render",
    "random_digits",
    # Recipes
    "RECIPES",
    "four_words",
    "three_words_and_six_digits",
    "generate",
    "get_recipe",
    "list_recipes",
    # Config
    "FluentCodesSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
    # Errors
    "FluentCodesError",
    "StoreUnavailable",
    "NoMatchingWord",
    "InvalidLengthRange",
    "ConfigurationError",
]

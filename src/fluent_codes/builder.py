"""
FluentCodes: chainable builder for human-readable codes.

Every call mutates the builder and returns it, so a code reads as a chain:

    with FluentCodes(random_seed=7) as codes:
        code = codes.with_joiner("_").adjective().noun().six_digits().to_string()

Word calls sample from the lexical store using the builder's current length
range. Changing the joiner or the range only affects calls made afterwards;
tokens already drawn are never touched.
"""

import functools
import logging
import random
from typing import List, Optional, Tuple, Union

from .config import FluentCodesSettings, get_settings
from .connection import StoreConnection, StoreFactory
from .digits import SIX_DIGITS, random_digits
from .exceptions import NoMatchingWord
from .formatter import render
from .models import LengthRange, WordCategory
from .store import SQLiteLexicalStore

logger = logging.getLogger(__name__)


class FluentCodes:
    """
    Accumulates words and digit groups, then renders them with a joiner.

    The store is opened lazily on the first word call and owned by this
    builder alone. Use the builder as a context manager, or call close(),
    to release it.
    """

    def __init__(
        self,
        store_factory: Optional[StoreFactory] = None,
        settings: Optional[FluentCodesSettings] = None,
        random_seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the builder.

        Args:
            store_factory: Callable returning a fresh LexicalStore. Defaults to
                opening the SQLite database at settings.store_path.
            settings: Defaults for joiner and length range (uses get_settings()
                if None)
            random_seed: Seed for reproducibility
            rng: Random source to use instead of seeding a new one
        """
        self.settings = settings if settings is not None else get_settings()
        self.rng = rng if rng is not None else random.Random(random_seed)

        self._tokens: List[str] = []
        self._joiner = self.settings.joiner
        self._length_range = self.settings.length_range

        if store_factory is None:
            store_path = self.settings.store_path
            store_factory = functools.partial(SQLiteLexicalStore.open, store_path)
            description = f"lexical store {store_path}"
        else:
            description = "lexical store"
        self._connection = StoreConnection(store_factory, description=description)

    @property
    def tokens(self) -> Tuple[str, ...]:
        return tuple(self._tokens)

    @property
    def joiner(self) -> str:
        return self._joiner

    @property
    def length_range(self) -> LengthRange:
        return self._length_range

    # Configuration

    def with_joiner(self, joiner: str) -> "FluentCodes":
        """Set the separator used when rendering."""
        if not isinstance(joiner, str):
            raise TypeError(f"joiner must be a string, got {type(joiner).__name__}")
        self._joiner = joiner
        return self

    def with_min_length(self, length: int) -> "FluentCodes":
        """
        Set the shortest word length for subsequent word calls.

        May leave the range empty (min > max) while a chain adjusts both
        bounds; word calls against an empty range raise NoMatchingWord.

        Raises:
            InvalidLengthRange: If length is negative or not an integer
        """
        self._length_range = self._length_range.with_min(length)
        return self

    def with_max_length(self, length: int) -> "FluentCodes":
        """Set the longest word length for subsequent word calls."""
        self._length_range = self._length_range.with_max(length)
        return self

    def with_length_range(self, min_length: int, max_length: int) -> "FluentCodes":
        self._length_range = LengthRange(min_length, max_length)
        return self

    # Words

    def word(self, category: Union[str, WordCategory]) -> "FluentCodes":
        """
        Append one word of a category drawn uniformly within the length range.

        Args:
            category: WordCategory, or a name accepted by WordCategory.parse

        Raises:
            NoMatchingWord: If no word qualifies (nothing is appended)
            StoreUnavailable: If the store cannot be opened or read
        """
        category = WordCategory.parse(category)
        length_range = self._length_range

        if length_range.is_empty:
            raise NoMatchingWord(
                category,
                length_range,
                f"Empty length range for {category.label}: min_length "
                f"{length_range.min_length} exceeds max_length {length_range.max_length}",
            )

        store = self._connection.ensure_connected()
        word = store.sample_word(category, length_range, self.rng)
        if word is None:
            raise NoMatchingWord(category, length_range)

        self._tokens.append(word)
        logger.debug("Appended %s %r", category.label, word)
        return self

    def adjective(self) -> "FluentCodes":
        return self.word(WordCategory.ADJECTIVE)

    def adposition(self) -> "FluentCodes":
        return self.word(WordCategory.ADPOSITION)

    def adverb(self) -> "FluentCodes":
        return self.word(WordCategory.ADVERB)

    def auxiliary(self) -> "FluentCodes":
        return self.word(WordCategory.AUXILIARY)

    def coordinating_conjunction(self) -> "FluentCodes":
        return self.word(WordCategory.COORDINATING_CONJUNCTION)

    def determiner(self) -> "FluentCodes":
        return self.word(WordCategory.DETERMINER)

    def interjection(self) -> "FluentCodes":
        return self.word(WordCategory.INTERJECTION)

    def noun(self) -> "FluentCodes":
        return self.word(WordCategory.NOUN)

    def particle(self) -> "FluentCodes":
        return self.word(WordCategory.PARTICLE)

    def pronoun(self) -> "FluentCodes":
        return self.word(WordCategory.PRONOUN)

    def proper_noun(self) -> "FluentCodes":
        return self.word(WordCategory.PROPER_NOUN)

    def punctuation(self) -> "FluentCodes":
        return self.word(WordCategory.PUNCTUATION)

    def subordinating_conjunction(self) -> "FluentCodes":
        return self.word(WordCategory.SUBORDINATING_CONJUNCTION)

    def symbol(self) -> "FluentCodes":
        return self.word(WordCategory.SYMBOL)

    def verb(self) -> "FluentCodes":
        return self.word(WordCategory.VERB)

    # Digits

    def digits(self, width: int) -> "FluentCodes":
        """Append a zero-padded random number of exactly `width` digits."""
        self._tokens.append(random_digits(self.rng, width))
        return self

    def six_digits(self) -> "FluentCodes":
        """Append a number from 000000 to 999999 inclusive."""
        return self.digits(SIX_DIGITS)

    # Output and lifecycle

    def to_string(self) -> str:
        """Render the tokens so far. Does not change the builder."""
        return render(self._tokens, self._joiner)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"FluentCodes(tokens={self._tokens!r}, joiner={self._joiner!r}, "
            f"length_range=({self._length_range.min_length}, {self._length_range.max_length}))"
        )

    def close(self) -> None:
        """Release the store connection, if one was opened."""
        self._connection.close()

    def __enter__(self) -> "FluentCodes":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

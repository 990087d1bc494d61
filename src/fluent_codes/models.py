"""
Data models for fluent code assembly.

Categories follow the Universal Dependencies part-of-speech tags
(https://universaldependencies.org/u/pos/).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import InvalidLengthRange


class WordCategory(Enum):
    """Part-of-speech category. The value is the store table holding its words."""
    ADJECTIVE = "adj"                    # big, old, green
    ADPOSITION = "adp"                   # in, to, during
    ADVERB = "adv"                       # very, tomorrow, down
    AUXILIARY = "aux"                    # has, will, should
    COORDINATING_CONJUNCTION = "cconj"   # and, or, but
    DETERMINER = "det"                   # a, the, this
    INTERJECTION = "intj"                # psst, ouch, bravo
    NOUN = "noun"                        # girl, cat, tree
    NUMERAL = "num"                      # one, seventy, iii
    PARTICLE = "part"                    # 's, not
    PRONOUN = "pron"                     # I, you, somebody
    PROPER_NOUN = "propn"                # Mary, London, NATO
    PUNCTUATION = "punct"                # ., (, ?
    SUBORDINATING_CONJUNCTION = "sconj"  # that, if, while
    SYMBOL = "sym"                       # $, %, :)
    VERB = "verb"                        # run, eat, sleep

    @property
    def table(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'proper noun'."""
        return self.name.lower().replace("_", " ")

    @classmethod
    def parse(cls, name: Union[str, "WordCategory"]) -> "WordCategory":
        """
        Resolve a category from its enum name, label or table name.

        Matching is case-insensitive and treats '-', '_' and ' ' alike, so
        'proper-noun', 'PROPER_NOUN' and 'propn' all resolve to PROPER_NOUN.

        Raises:
            ValueError: If no category matches
        """
        if isinstance(name, cls):
            return name

        key = str(name).strip().lower().replace("-", "_").replace(" ", "_")
        for category in cls:
            if key in (category.name.lower(), category.value):
                return category

        available = ", ".join(c.name.lower() for c in cls)
        raise ValueError(f"Unknown word category: {name}. Available: {available}")


@dataclass(frozen=True)
class LengthRange:
    """
    Inclusive bounds on candidate word length.

    A range with min_length > max_length is allowed but empty; sampling
    against it fails with NoMatchingWord.
    """
    min_length: int = 6
    max_length: int = 6

    def __post_init__(self):
        for bound in (self.min_length, self.max_length):
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise InvalidLengthRange(f"Length bounds must be integers, got {bound!r}")
            if bound < 0:
                raise InvalidLengthRange(f"Length bounds must be non-negative, got {bound}")

    @property
    def is_empty(self) -> bool:
        return self.min_length > self.max_length

    def contains(self, word: str) -> bool:
        return self.min_length <= len(word) <= self.max_length

    def with_min(self, min_length: int) -> "LengthRange":
        return LengthRange(min_length, self.max_length)

    def with_max(self, max_length: int) -> "LengthRange":
        return LengthRange(self.min_length, max_length)

"""
Word lists and stand-ins shared by the test modules.
"""

import sqlite3
from pathlib import Path

from fluent_codes import WordCategory


# Every category has words of length 3-8 so long chains succeed with [3, 8].
# Adjective, verb and noun also have several six-letter words for the defaults.
WORDS = {
    WordCategory.ADJECTIVE: ["Fluffy", "deadly", "calmer", "bright", "silent", "odd", "enormous"],
    WordCategory.ADPOSITION: ["into", "during", "onto", "across", "beside"],
    WordCategory.ADVERB: ["reliably", "softly", "seldom", "quite"],
    WordCategory.AUXILIARY: ["should", "would", "might", "has"],
    WordCategory.COORDINATING_CONJUNCTION: ["and", "nor", "but", "yet"],
    WordCategory.DETERMINER: ["the", "this", "those", "either"],
    WordCategory.INTERJECTION: ["lolcat", "bravo", "ouch", "hooray"],
    WordCategory.NOUN: ["vacuum", "fourty", "garden", "pencil", "rocket", "cat"],
    WordCategory.NUMERAL: ["seven", "eleven", "thirty"],
    WordCategory.PARTICLE: ["not", "to", "nicht"],
    WordCategory.PRONOUN: ["somebody", "they", "myself"],
    WordCategory.PROPER_NOUN: ["London", "Jdlugosz", "Mary", "Nato"],
    WordCategory.PUNCTUATION: ["...", "?!?", "--->"],
    WordCategory.SUBORDINATING_CONJUNCTION: ["while", "because", "unless"],
    WordCategory.SYMBOL: ["jpg", "%%%", ":-)"],
    WordCategory.VERB: ["misuse", "taints", "resarted", "wander", "splash", "eat"],
}


def build_word_database(path: Path, words=WORDS, skip=()) -> Path:
    conn = sqlite3.connect(path)
    try:
        for category, values in words.items():
            if category in skip:
                continue
            conn.execute(f"CREATE TABLE {category.table} (word TEXT)")
            conn.executemany(
                f"INSERT INTO {category.table} (word) VALUES (?)",
                [(w,) for w in values],
            )
        conn.commit()
    finally:
        conn.close()
    return path


class DeterministicRng:
    """Stand-in RNG returning scripted values."""

    def __init__(self, randint_values=(), randrange_values=()):
        self.randint_values = list(randint_values)
        self.randrange_values = list(randrange_values)

    def randint(self, a, b):
        return self.randint_values.pop(0)

    def randrange(self, n):
        if self.randrange_values:
            return self.randrange_values.pop(0)
        return 0

    def choice(self, seq):
        return seq[0]

"""
Lexical store access: sample one word of a category within a length range.

Two backends share the LexicalStore interface:
- SQLiteLexicalStore: one table per category, each with a `word` column,
  opened read-only.
- InMemoryLexicalStore: word lists held in memory, optionally loaded from a
  YAML file mapping category names to lists of words.
"""

import logging
import random
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Set, Tuple, Union

import yaml

from .exceptions import StoreUnavailable
from .models import LengthRange, WordCategory

logger = logging.getLogger(__name__)


class LexicalStore(ABC):
    """
    Read-only source of words grouped by category.

    Implementations return None when nothing qualifies; turning that into
    NoMatchingWord is the caller's job.
    """

    @abstractmethod
    def sample_word(
        self,
        category: WordCategory,
        length_range: LengthRange,
        rng: random.Random,
    ) -> Optional[str]:
        """
        Draw one lowercase word uniformly from the qualifying subset.

        Args:
            category: Category whose list is sampled
            length_range: Inclusive bounds on word length
            rng: Random source used for the draw

        Returns:
            The sampled word, or None if no word qualifies

        Raises:
            StoreUnavailable: If the store cannot be read
        """

    def close(self) -> None:
        """Release any resources held by the store."""


class SQLiteLexicalStore(LexicalStore):
    """Lexical store backed by a read-only SQLite database."""

    def __init__(self, connection: sqlite3.Connection, path: Optional[Path] = None):
        self._conn = connection
        self.path = path
        self._tables = self._list_tables()

    @classmethod
    def open(cls, path: Union[str, Path]) -> "SQLiteLexicalStore":
        """
        Open a word database read-only.

        Raises:
            StoreUnavailable: If the file is missing, unreadable or not a database
        """
        path = Path(path)
        if not path.is_file():
            raise StoreUnavailable(f"Lexical store not found: {path}")

        uri = f"{path.resolve().as_uri()}?mode=ro"
        try:
            conn = sqlite3.connect(uri, uri=True)
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Cannot open lexical store {path}: {e}") from e

        try:
            store = cls(conn, path=path)
        except StoreUnavailable:
            conn.close()
            raise

        logger.debug("Opened SQLite lexical store %s (%d tables)", path, len(store._tables))
        return store

    def _list_tables(self) -> Set[str]:
        try:
            rows = self._conn.execute(
                "SELECT name FROM sqlite_master WHERE type IN ('table', 'view')"
            ).fetchall()
        except sqlite3.DatabaseError as e:
            raise StoreUnavailable(f"Lexical store is unreadable: {e}") from e
        # SQLite resolves table names case-insensitively
        return {row[0].lower() for row in rows}

    def sample_word(
        self,
        category: WordCategory,
        length_range: LengthRange,
        rng: random.Random,
    ) -> Optional[str]:
        table = category.table
        if table not in self._tables:
            raise StoreUnavailable(f"Lexical store has no '{table}' table for {category.label}")

        # Table names come from WordCategory only, never from caller input
        where = "WHERE length(word) BETWEEN ? AND ?"
        bounds = (length_range.min_length, length_range.max_length)

        try:
            count = self._conn.execute(
                f"SELECT COUNT(*) FROM {table} {where}", bounds
            ).fetchone()[0]
            if count == 0:
                return None

            offset = rng.randrange(count)
            row = self._conn.execute(
                f"SELECT word FROM {table} {where} ORDER BY word LIMIT 1 OFFSET ?",
                bounds + (offset,),
            ).fetchone()
        except sqlite3.Error as e:
            raise StoreUnavailable(f"Query on '{table}' failed: {e}") from e

        logger.debug("Sampled row %d of %d from %s", offset, count, table)
        # SQLite LOWER() only folds ASCII
        return row[0].lower() if row else None

    def close(self) -> None:
        self._conn.close()


class InMemoryLexicalStore(LexicalStore):
    """
    Lexical store holding its word lists in memory.

    Categories missing from the mapping simply have no words.
    """

    def __init__(self, words: Mapping[Union[str, WordCategory], Iterable[str]]):
        self.words: Dict[WordCategory, Tuple[str, ...]] = {}

        for key, values in words.items():
            category = WordCategory.parse(key)
            if isinstance(values, str):
                values = [values]
            cleaned = tuple(
                str(w).strip().lower() for w in values if w is not None and str(w).strip()
            )
            self.words[category] = self.words.get(category, ()) + cleaned

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "InMemoryLexicalStore":
        """
        Load word lists from YAML.

        The file maps category names to lists, either at the top level or
        under a `words` key:

            words:
              adjective: [fluffy, deadly]
              noun: [vacuum]

        Raises:
            StoreUnavailable: If the file is missing or malformed
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise StoreUnavailable(f"Cannot read word lists {path}: {e}") from e
        except yaml.YAMLError as e:
            raise StoreUnavailable(f"Word lists {path} are not valid YAML: {e}") from e

        if isinstance(data, dict) and "words" in data:
            data = data["words"]
        if not isinstance(data, dict):
            raise StoreUnavailable(f"Word lists {path} must map categories to lists")

        try:
            store = cls(data)
        except (TypeError, ValueError) as e:
            raise StoreUnavailable(f"Word lists {path} are malformed: {e}") from e

        logger.debug("Loaded %d word lists from %s", len(store.words), path)
        return store

    def sample_word(
        self,
        category: WordCategory,
        length_range: LengthRange,
        rng: random.Random,
    ) -> Optional[str]:
        candidates = [w for w in self.words.get(category, ()) if length_range.contains(w)]
        if not candidates:
            return None
        return rng.choice(candidates)

"""
Lazy, per-builder connection to a lexical store.
"""

import logging
from typing import Callable, Optional

from .exceptions import StoreUnavailable
from .store import LexicalStore

logger = logging.getLogger(__name__)

StoreFactory = Callable[[], LexicalStore]


class StoreConnection:
    """
    Opens a lexical store on first use and keeps the handle until closed.

    Each builder owns one StoreConnection, and each connection calls its
    factory to get a fresh handle, so handles are never shared between
    builders.
    """

    def __init__(self, factory: StoreFactory, description: str = "lexical store"):
        self._factory = factory
        self.description = description
        self._store: Optional[LexicalStore] = None

    @property
    def is_connected(self) -> bool:
        return self._store is not None

    def ensure_connected(self) -> LexicalStore:
        """
        Return the open store, opening it if needed.

        Raises:
            StoreUnavailable: If the store cannot be opened. Nothing is
                cached, so a later call tries again.
        """
        if self._store is None:
            try:
                store = self._factory()
            except StoreUnavailable:
                logger.error("Could not open %s", self.description)
                raise
            except OSError as e:
                raise StoreUnavailable(f"Cannot open {self.description}: {e}") from e
            self._store = store
            logger.info("Connected to %s", self.description)
        return self._store

    def close(self) -> None:
        if self._store is None:
            return
        try:
            self._store.close()
        finally:
            self._store = None
            logger.info("Closed %s", self.description)

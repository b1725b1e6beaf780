"""Puzzle lookup service.

Reads the cached puzzles for a date key from the key-value store.
"""

import asyncio
import logging

from daily_puzzles.entities import DailyPuzzlesEntity, PuzzleKind
from daily_puzzles.protocols import KeyValueStore

from .codec import decode_sudoku

logger = logging.getLogger(__name__)


class PuzzleLookupService:
    """Serves cached puzzles by date key."""

    def __init__(self, key_value_store: KeyValueStore) -> None:
        self._kv = key_value_store

    @classmethod
    def create(cls, key_value_store: KeyValueStore) -> "PuzzleLookupService":
        return cls(key_value_store=key_value_store)

    async def get(self, date_key: str) -> DailyPuzzlesEntity | None:
        """Fetch both puzzle kinds cached under a date key.

        The key is used as given; it is not parsed as a date.

        Args:
            date_key: Date as YYYY-MM-DD

        Returns:
            DailyPuzzlesEntity if at least one kind is cached, None otherwise

        Raises:
            StoreReadError: If the key-value store cannot be read
            DecodeError: If the cached sudoku is malformed
        """
        sudoku_value = await asyncio.to_thread(self._kv.get, PuzzleKind.SUDOKU.cache_key(date_key))
        wordle_value = await asyncio.to_thread(self._kv.get, PuzzleKind.WORDLE.cache_key(date_key))

        if sudoku_value is None and wordle_value is None:
            logger.info("No puzzles found for key: %s", date_key)
            return None

        logger.info("Returning puzzles for key: %s", date_key)
        return DailyPuzzlesEntity(
            sudoku=decode_sudoku(sudoku_value) if sudoku_value else None,
            wordle=wordle_value or None,
        )

    @property
    def key_value_store(self) -> KeyValueStore:
        """Get the underlying key-value store (for testing)."""
        return self._kv

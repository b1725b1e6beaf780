"""Daily provisioner service.

Ensures today's sudoku and wordle exist, generating and writing only
the missing kinds. Each kind is written to the key-value store first,
then to the relational store.
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from daily_puzzles.entities import PuzzleKind
from daily_puzzles.errors import ProvisionError, PuzzleError
from daily_puzzles.protocols import KeyValueStore, PuzzleRecordStore, SudokuSource, WordSource

from .codec import encode_sudoku

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Puzzles stored successfully"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProvisionerService:
    """Check-then-act provisioning of the day's puzzles.

    The existence check and the writes are not atomic. Overlapping runs in
    the same process are serialised per date; runs in different processes
    can still both see a kind as missing and insert it twice.

    A failure on the sudoku kind aborts the run before wordle is attempted.
    A key-value write is not rolled back when the following relational
    insert fails.

    Example:
        ```python
        provisioner = ProvisionerService.create(
            key_value_store=RedisKeyValueRepository.create(),
            record_store=SupabasePuzzleRepository.create(),
            sudoku_source=PySudokuGenerator.create(),
            word_source=DatamuseWordProvider.create(),
        )
        result = await provisioner.provision()
        # {"message": "Puzzles stored successfully"}
        ```
    """

    def __init__(
        self,
        key_value_store: KeyValueStore,
        record_store: PuzzleRecordStore,
        sudoku_source: SudokuSource,
        word_source: WordSource,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the provisioner.

        Args:
            key_value_store: Cache the puzzles are served from (required).
            record_store: Durable relational record (required).
            sudoku_source: Sudoku generator (required).
            word_source: Wordle word lookup (required).
            clock: Returns the current time; defaults to UTC wall clock.
        """
        self._kv = key_value_store
        self._records = record_store
        self._sudoku_source = sudoku_source
        self._word_source = word_source
        self._clock = clock or utc_now
        self._locks: dict[str, asyncio.Lock] = {}

    @classmethod
    def create(
        cls,
        key_value_store: KeyValueStore,
        record_store: PuzzleRecordStore,
        sudoku_source: SudokuSource,
        word_source: WordSource,
        clock: Callable[[], datetime] | None = None,
    ) -> "ProvisionerService":
        """Factory method to create ProvisionerService."""
        return cls(
            key_value_store=key_value_store,
            record_store=record_store,
            sudoku_source=sudoku_source,
            word_source=word_source,
            clock=clock,
        )

    def today(self) -> str:
        """Current UTC date as YYYY-MM-DD."""
        return self._clock().astimezone(timezone.utc).date().isoformat()

    async def provision(self) -> dict[str, str]:
        """Ensure today's sudoku and wordle exist in both stores.

        Business logic:
        1. Compute today's date (UTC)
        2. Sudoku: skip if a relational row exists, else generate, cache, insert
        3. Wordle: same, only after sudoku succeeded
        4. Return a success summary

        Returns:
            {"message": "Puzzles stored successfully"}

        Raises:
            ProvisionError: If generation or any write fails; carries the
                underlying error's message
        """
        today = self.today()
        logger.info("Starting provisioning for %s", today)

        async with self._lock_for(today):
            try:
                await self._provision_sudoku(today)
                await self._provision_wordle(today)
            except PuzzleError as e:
                raise ProvisionError(str(e)) from e

        logger.info(SUCCESS_MESSAGE)
        return {"message": SUCCESS_MESSAGE}

    async def _provision_sudoku(self, today: str) -> bool:
        kind = PuzzleKind.SUDOKU
        logger.info("Checking if Sudoku puzzle for %s already exists", today)
        if await asyncio.to_thread(self._records.exists, kind, today):
            logger.info("Sudoku puzzle for %s already exists. Skipping insert.", today)
            return False

        logger.info("Generating Sudoku puzzle")
        sudoku = await asyncio.to_thread(self._sudoku_source.generate)

        try:
            await asyncio.to_thread(self._kv.put, kind.cache_key(today), encode_sudoku(sudoku))
            await asyncio.to_thread(self._records.insert_sudoku, today, sudoku)
        except PuzzleError:
            logger.exception("Error storing Sudoku puzzle")
            raise

        logger.info("Stored Sudoku puzzle for %s", today)
        return True

    async def _provision_wordle(self, today: str) -> bool:
        kind = PuzzleKind.WORDLE
        logger.info("Checking if Wordle puzzle for %s already exists", today)
        if await asyncio.to_thread(self._records.exists, kind, today):
            logger.info("Wordle puzzle for %s already exists. Skipping insert.", today)
            return False

        logger.info("Generating Wordle puzzle")
        word = await self._word_source.generate()

        try:
            await asyncio.to_thread(self._kv.put, kind.cache_key(today), word)
            await asyncio.to_thread(self._records.insert_wordle, today, word)
        except PuzzleError:
            logger.exception("Error storing Wordle puzzle")
            raise

        logger.info("Stored Wordle puzzle for %s", today)
        return True

    def health(self) -> dict[str, bool]:
        """Check both stores.

        Returns:
            {"cache": bool, "database": bool}
        """
        return {
            "cache": self._kv.health_check(),
            "database": self._records.health_check(),
        }

    def _lock_for(self, today: str) -> asyncio.Lock:
        # Drop locks for earlier dates that nobody holds
        for day in [d for d, lock in self._locks.items() if d != today and not lock.locked()]:
            del self._locks[day]
        return self._locks.setdefault(today, asyncio.Lock())

    @property
    def key_value_store(self) -> KeyValueStore:
        """Get the underlying key-value store (for testing)."""
        return self._kv

    @property
    def record_store(self) -> PuzzleRecordStore:
        """Get the underlying relational store (for testing)."""
        return self._records

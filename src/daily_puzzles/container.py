"""Construction of the full component graph.

Used by the FastAPI lifespan and by the cron entry point, so both run
against the same concrete stores and sources.
"""

from dataclasses import dataclass

from daily_puzzles.repositories import (
    DatamuseWordProvider,
    PySudokuGenerator,
    RedisKeyValueRepository,
    SupabasePuzzleRepository,
)
from daily_puzzles.services import ProvisionerService, PuzzleLookupService


@dataclass
class Container:
    """Holds the repositories and services for one application lifetime."""

    key_value_store: RedisKeyValueRepository
    record_store: SupabasePuzzleRepository
    word_source: DatamuseWordProvider
    provisioner: ProvisionerService
    lookup: PuzzleLookupService

    @classmethod
    def create(cls) -> "Container":
        """Build every layer from settings.

        Raises:
            RuntimeError: If the Supabase credentials are not configured
        """
        key_value_store = RedisKeyValueRepository.create()
        record_store = SupabasePuzzleRepository.create()
        word_source = DatamuseWordProvider.create()

        provisioner = ProvisionerService.create(
            key_value_store=key_value_store,
            record_store=record_store,
            sudoku_source=PySudokuGenerator.create(),
            word_source=word_source,
        )
        lookup = PuzzleLookupService.create(key_value_store=key_value_store)

        return cls(
            key_value_store=key_value_store,
            record_store=record_store,
            word_source=word_source,
            provisioner=provisioner,
            lookup=lookup,
        )

    async def close(self) -> None:
        """Release network clients."""
        try:
            await self.word_source.close()
        finally:
            self.key_value_store.close()

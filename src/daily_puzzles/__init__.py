"""Daily Puzzles - provisions one sudoku and one wordle per day.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (KeyValueStore, PuzzleRecordStore, sources)
    - repositories: Redis, Supabase, py-sudoku and Datamuse implementations
    - services: Provisioning and lookup logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)
    - scheduler: Background and cron runners

Usage:
    ```python
    from daily_puzzles.container import Container

    container = Container.create()
    await container.provisioner.provision()
    ```

For HTTP API:
    ```python
    from daily_puzzles.api.app import app
    ```
"""

from daily_puzzles.config import get_redis_client, get_supabase_client, settings
from daily_puzzles.entities import DailyPuzzlesEntity, PuzzleKind, SudokuPuzzleEntity
from daily_puzzles.errors import (
    DecodeError,
    GenerationError,
    ProvisionError,
    PuzzleError,
    StoreReadError,
    StoreWriteError,
)
from daily_puzzles.handlers import PuzzleHandler
from daily_puzzles.protocols import KeyValueStore, PuzzleRecordStore, SudokuSource, WordSource
from daily_puzzles.repositories import (
    DatamuseWordProvider,
    PySudokuGenerator,
    RedisKeyValueRepository,
    SupabasePuzzleRepository,
)
from daily_puzzles.services import ProvisionerService, PuzzleLookupService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    "get_supabase_client",
    # Errors
    "PuzzleError",
    "GenerationError",
    "StoreWriteError",
    "StoreReadError",
    "DecodeError",
    "ProvisionError",
    # Protocols (interfaces)
    "KeyValueStore",
    "PuzzleRecordStore",
    "SudokuSource",
    "WordSource",
    # Services (business logic)
    "ProvisionerService",
    "PuzzleLookupService",
    # Handlers (HTTP)
    "PuzzleHandler",
    # Repositories (data access)
    "RedisKeyValueRepository",
    "SupabasePuzzleRepository",
    "PySudokuGenerator",
    "DatamuseWordProvider",
    # Entities (domain models)
    "DailyPuzzlesEntity",
    "PuzzleKind",
    "SudokuPuzzleEntity",
]

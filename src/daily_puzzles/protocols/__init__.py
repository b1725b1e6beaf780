"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the stores (Redis → another key-value store, Supabase → plain PostgreSQL)
- Unit testing with in-memory fakes
- Clear separation of concerns

Usage:
    ```python
    from daily_puzzles.protocols import KeyValueStore, PuzzleRecordStore

    kv: KeyValueStore = RedisKeyValueRepository.create()
    records: PuzzleRecordStore = SupabasePuzzleRepository.create()
    ```
"""

from .key_value_store import KeyValueStore
from .puzzle_record_store import PuzzleRecordStore
from .puzzle_source import SudokuSource, WordSource

__all__ = [
    "KeyValueStore",
    "PuzzleRecordStore",
    "SudokuSource",
    "WordSource",
]

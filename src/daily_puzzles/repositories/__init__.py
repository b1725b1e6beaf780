"""Repository layer for data access.

This layer abstracts external dependencies (Redis, Supabase, the sudoku
library, the word API) behind protocol-based interfaces. This enables:
- Easy swapping of implementations
- Unit testing with in-memory fakes
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from daily_puzzles.protocols import KeyValueStore, PuzzleRecordStore, SudokuSource, WordSource

from .datamuse_word_provider import DatamuseWordProvider
from .redis_repository import RedisKeyValueRepository
from .sudoku_generator import PySudokuGenerator
from .supabase_repository import SupabasePuzzleRepository

__all__ = [
    "KeyValueStore",
    "PuzzleRecordStore",
    "SudokuSource",
    "WordSource",
    "DatamuseWordProvider",
    "PySudokuGenerator",
    "RedisKeyValueRepository",
    "SupabasePuzzleRepository",
]

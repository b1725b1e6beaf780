"""Relational puzzle store protocol.

Defines the durable record of provisioned puzzles: one table per
puzzle kind, one row per date.
"""

from typing import Protocol, runtime_checkable

from daily_puzzles.entities import PuzzleKind, SudokuPuzzleEntity


@runtime_checkable
class PuzzleRecordStore(Protocol):
    """Protocol for relational puzzle backends."""

    def exists(self, kind: PuzzleKind, puzzle_date: str) -> bool:
        """Check whether a record exists for a kind on a date.

        Args:
            kind: The puzzle kind (selects the table)
            puzzle_date: Date as YYYY-MM-DD

        Returns:
            True if a row with that date exists

        Raises:
            StoreReadError: If the query fails
        """
        ...

    def insert_sudoku(self, puzzle_date: str, sudoku: SudokuPuzzleEntity) -> None:
        """Insert a sudoku row for a date.

        Raises:
            StoreWriteError: If the insert fails
        """
        ...

    def insert_wordle(self, puzzle_date: str, word: str) -> None:
        """Insert a wordle row for a date.

        Raises:
            StoreWriteError: If the insert fails
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible."""
        ...

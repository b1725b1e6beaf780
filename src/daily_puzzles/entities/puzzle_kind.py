"""Puzzle kind enumeration."""

from datetime import date
from enum import Enum


class PuzzleKind(str, Enum):
    """The kinds of puzzle provisioned each day.

    Each kind owns one relational table and one key-value key prefix.
    """

    SUDOKU = "sudoku"
    WORDLE = "wordle"

    @property
    def table_name(self) -> str:
        """Relational table holding one row per date for this kind."""
        return f"{self.value}_puzzles"

    def cache_key(self, puzzle_date: date | str) -> str:
        """Build the key-value key for this kind on a date.

        Args:
            puzzle_date: A date or an already formatted YYYY-MM-DD string

        Returns:
            Key in the form "<kind>:<YYYY-MM-DD>"
        """
        if isinstance(puzzle_date, date):
            puzzle_date = puzzle_date.isoformat()
        return f"{self.value}:{puzzle_date}"

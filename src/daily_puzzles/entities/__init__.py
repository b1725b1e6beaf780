"""Domain entities for internal representation.

These are pure dataclasses (frozen) and enums used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .daily_puzzles import DailyPuzzlesEntity
from .puzzle_kind import PuzzleKind
from .sudoku_puzzle import SudokuPuzzleEntity

__all__ = ["DailyPuzzlesEntity", "PuzzleKind", "SudokuPuzzleEntity"]

"""Daily puzzles lookup result entity."""

from dataclasses import dataclass

from .sudoku_puzzle import SudokuPuzzleEntity


@dataclass(frozen=True)
class DailyPuzzlesEntity:
    """Puzzles cached for one date. Either kind may be missing.

    Attributes:
        sudoku: The decoded sudoku, or None if not cached
        wordle: The uppercase word, or None if not cached
    """

    sudoku: SudokuPuzzleEntity | None = None
    wordle: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.sudoku is None and self.wordle is None

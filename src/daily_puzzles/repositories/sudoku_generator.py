"""Sudoku generation backed by the py-sudoku library.

The generator is trusted: grids are serialised as returned, without
checking that the puzzle has a unique solution.
"""

import random
import sys

from sudoku import Sudoku

from daily_puzzles.config import settings
from daily_puzzles.entities import SudokuPuzzleEntity
from daily_puzzles.errors import GenerationError

BLANK = "-"


def _serialise(board: list[list[int | None]]) -> str:
    """Flatten a 9x9 board row by row, blanks as BLANK."""
    return "".join(BLANK if cell in (None, 0) else str(cell) for row in board for cell in row)


class PySudokuGenerator:
    """py-sudoku implementation of SudokuSource.

    Difficulty is the fraction of cells removed from the solved grid;
    the default (0.4) matches an "easy" puzzle.

    Example:
        ```python
        generator = PySudokuGenerator.create()
        sudoku = generator.generate()
        print(sudoku.puzzle[:9])    # "5-3--7---"
        print(sudoku.solution[:9])  # "534678912"
        ```
    """

    def __init__(self, difficulty: float | None = None, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            difficulty: Fraction of blanks (0-1). Defaults to settings.
            seed: Fixed seed for reproducible grids. Random per puzzle if None.
        """
        self._difficulty = difficulty or settings.sudoku_difficulty
        self._seed = seed

    @classmethod
    def create(cls, difficulty: float | None = None) -> "PySudokuGenerator":
        """Factory method to create PySudokuGenerator with defaults."""
        return cls(difficulty=difficulty)

    def generate(self) -> SudokuPuzzleEntity:
        """Generate one puzzle and its solution.

        Returns:
            SudokuPuzzleEntity with 81-character puzzle and solution

        Raises:
            GenerationError: If the library fails to build a grid
        """
        # py-sudoku evaluates its default seed once per process
        seed = self._seed if self._seed is not None else random.randrange(sys.maxsize)

        try:
            solved = Sudoku(3, seed=seed).solve()
            puzzle = solved.difficulty(self._difficulty)
        except Exception as e:
            raise GenerationError(f"Failed to generate Sudoku puzzle: {e}") from e

        solution = _serialise(solved.board)
        if BLANK in solution:
            raise GenerationError("Failed to generate Sudoku puzzle: generator returned an unsolved grid")

        return SudokuPuzzleEntity(puzzle=_serialise(puzzle.board), solution=solution)

    @property
    def difficulty(self) -> float:
        return self._difficulty

"""Sudoku puzzle domain entity."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SudokuPuzzleEntity:
    """A generated sudoku with its solution.

    Attributes:
        puzzle: 81-cell grid, row by row, blanks as "-"
        solution: 81-cell filled grid, row by row
    """

    puzzle: str
    solution: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

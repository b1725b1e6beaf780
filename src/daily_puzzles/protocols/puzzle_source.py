"""Puzzle source protocols.

Generation itself is delegated to external libraries and services;
these protocols only fix the shape of what comes back.
"""

from typing import Protocol, runtime_checkable

from daily_puzzles.entities import SudokuPuzzleEntity


@runtime_checkable
class SudokuSource(Protocol):
    """Produces one sudoku puzzle with its solution."""

    def generate(self) -> SudokuPuzzleEntity:
        """Generate a sudoku.

        Raises:
            GenerationError: If the generator fails
        """
        ...


@runtime_checkable
class WordSource(Protocol):
    """Produces one uppercase five-letter word."""

    async def generate(self) -> str:
        """Fetch a word.

        Raises:
            GenerationError: If the lookup fails or returns nothing
        """
        ...

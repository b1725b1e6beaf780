"""Key-value value encoding for sudoku puzzles.

Sudoku entries are stored as compact JSON objects
{"puzzle": "...", "solution": "..."}; wordle entries are stored as the
raw word and need no codec.
"""

import json

from daily_puzzles.entities import SudokuPuzzleEntity
from daily_puzzles.errors import DecodeError


def encode_sudoku(sudoku: SudokuPuzzleEntity) -> str:
    return json.dumps(sudoku.to_dict(), separators=(",", ":"))


def decode_sudoku(value: str) -> SudokuPuzzleEntity:
    """Decode a cached sudoku value.

    Raises:
        DecodeError: If the value is not a JSON object with string
            puzzle and solution fields
    """
    try:
        data = json.loads(value)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Malformed sudoku entry: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("Malformed sudoku entry: expected a JSON object")

    puzzle = data.get("puzzle")
    solution = data.get("solution")
    if not isinstance(puzzle, str) or not isinstance(solution, str):
        raise DecodeError("Malformed sudoku entry: missing puzzle or solution")

    return SudokuPuzzleEntity(puzzle=puzzle, solution=solution)

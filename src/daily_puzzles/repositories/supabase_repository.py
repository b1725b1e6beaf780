"""Supabase implementation of PuzzleRecordStore.

Tables:
    sudoku_puzzles(date, puzzle, solution)
    wordle_puzzles(date, word)

Uniqueness per date is NOT enforced by a constraint; callers check
exists() before inserting.
"""

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from daily_puzzles.config import get_supabase_client
from daily_puzzles.entities import PuzzleKind, SudokuPuzzleEntity
from daily_puzzles.errors import StoreReadError, StoreWriteError


class SupabasePuzzleRepository:
    """Supabase (PostgREST) implementation of the relational puzzle store.

    This class satisfies the PuzzleRecordStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, client: Client | None = None) -> None:
        """Initialize the Supabase repository.

        Args:
            client: Supabase client. If None, creates default from settings.
        """
        self._client = client or get_supabase_client()

    @classmethod
    def create(cls, client: Client | None = None) -> "SupabasePuzzleRepository":
        """Factory method to create SupabasePuzzleRepository with defaults."""
        return cls(client=client)

    def exists(self, kind: PuzzleKind, puzzle_date: str) -> bool:
        """Check whether a row exists for a kind on a date.

        Args:
            kind: Selects the table
            puzzle_date: Date as YYYY-MM-DD

        Returns:
            True if at least one row matches the date

        Raises:
            StoreReadError: If the query fails
        """
        try:
            response = (
                self._client.table(kind.table_name)
                .select("date")
                .eq("date", puzzle_date)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as e:
            raise StoreReadError(f"Failed to query {kind.table_name}: {e}") from e

        return bool(response.data)

    def insert_sudoku(self, puzzle_date: str, sudoku: SudokuPuzzleEntity) -> None:
        """Insert today's sudoku row.

        Raises:
            StoreWriteError: If the insert fails
        """
        self._insert(
            PuzzleKind.SUDOKU,
            {"date": puzzle_date, "puzzle": sudoku.puzzle, "solution": sudoku.solution},
        )

    def insert_wordle(self, puzzle_date: str, word: str) -> None:
        """Insert today's wordle row.

        Raises:
            StoreWriteError: If the insert fails
        """
        self._insert(PuzzleKind.WORDLE, {"date": puzzle_date, "word": word})

    def _insert(self, kind: PuzzleKind, row: dict[str, str]) -> None:
        try:
            self._client.table(kind.table_name).insert(row).execute()
        except (APIError, httpx.HTTPError) as e:
            raise StoreWriteError(f"Failed to insert into {kind.table_name}: {e}") from e

    def health_check(self) -> bool:
        """Check if the Supabase REST endpoint answers.

        Returns:
            True if healthy, False otherwise
        """
        try:
            self._client.table(PuzzleKind.SUDOKU.table_name).select("date").limit(1).execute()
            return True
        except Exception:
            return False

    @property
    def client(self) -> Client:
        """Get the Supabase client."""
        return self._client

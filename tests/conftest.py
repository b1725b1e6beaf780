"""
Shared fixtures: in-memory stores and sources satisfying the protocols.
"""

import time
from datetime import datetime, timezone

import pytest

from daily_puzzles.entities import PuzzleKind, SudokuPuzzleEntity
from daily_puzzles.errors import GenerationError, StoreReadError, StoreWriteError
from daily_puzzles.handlers import PuzzleHandler
from daily_puzzles.services import ProvisionerService, PuzzleLookupService

TODAY = "2024-05-01"

PUZZLE = "53--7----6--195----98----6-8---6---34--8-3--17---2---6-6----28----419--5----8--79"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


class FakeKeyValueStore:
    """Dict-backed KeyValueStore."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.puts: list[tuple[str, str]] = []
        self.fail_reads = False
        self.fail_writes = False
        self.healthy = True

    def get(self, key: str) -> str | None:
        if self.fail_reads:
            raise StoreReadError("Redis unreachable")
        return self.data.get(key)

    def put(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StoreWriteError(f"Failed to write {key}")
        self.puts.append((key, value))
        self.data[key] = value

    def health_check(self) -> bool:
        return self.healthy


class FakeRecordStore:
    """List-backed PuzzleRecordStore, one list of rows per kind."""

    def __init__(self) -> None:
        self.rows: dict[PuzzleKind, list[dict[str, str]]] = {kind: [] for kind in PuzzleKind}
        self.fail_inserts: set[PuzzleKind] = set()
        self.healthy = True
        self.delay = 0.0

    def exists(self, kind: PuzzleKind, puzzle_date: str) -> bool:
        if self.delay:
            time.sleep(self.delay)
        return any(row["date"] == puzzle_date for row in self.rows[kind])

    def insert_sudoku(self, puzzle_date: str, sudoku: SudokuPuzzleEntity) -> None:
        self._insert(
            PuzzleKind.SUDOKU,
            {"date": puzzle_date, "puzzle": sudoku.puzzle, "solution": sudoku.solution},
        )

    def insert_wordle(self, puzzle_date: str, word: str) -> None:
        self._insert(PuzzleKind.WORDLE, {"date": puzzle_date, "word": word})

    def _insert(self, kind: PuzzleKind, row: dict[str, str]) -> None:
        if kind in self.fail_inserts:
            raise StoreWriteError(f"Failed to insert into {kind.table_name}")
        self.rows[kind].append(row)

    def health_check(self) -> bool:
        return self.healthy


class FakeSudokuSource:
    def __init__(self) -> None:
        self.calls = 0
        self.error: Exception | None = None

    def generate(self) -> SudokuPuzzleEntity:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return SudokuPuzzleEntity(puzzle=PUZZLE, solution=SOLUTION)


class FakeWordSource:
    def __init__(self, word: str = "CRANE") -> None:
        self.word = word
        self.calls = 0
        self.error: Exception | None = None

    async def generate(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.word


class FakeContainer:
    """Stands in for Container: holds services, records close()."""

    def __init__(self, provisioner, lookup) -> None:
        self.provisioner = provisioner
        self.lookup = lookup
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def fixed_clock() -> datetime:
    return datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc)


@pytest.fixture
def kv():
    return FakeKeyValueStore()


@pytest.fixture
def records():
    return FakeRecordStore()


@pytest.fixture
def sudoku_source():
    return FakeSudokuSource()


@pytest.fixture
def word_source():
    return FakeWordSource()


@pytest.fixture
def provisioner(kv, records, sudoku_source, word_source):
    return ProvisionerService.create(
        key_value_store=kv,
        record_store=records,
        sudoku_source=sudoku_source,
        word_source=word_source,
        clock=fixed_clock,
    )


@pytest.fixture
def handler(provisioner, kv):
    return PuzzleHandler(provisioner=provisioner, lookup=PuzzleLookupService.create(kv))


@pytest.fixture
def failing_word_source(word_source):
    word_source.error = GenerationError("Failed to generate Wordle word")
    return word_source


@pytest.fixture
def fake_container(provisioner, kv):
    return FakeContainer(provisioner, PuzzleLookupService.create(kv))

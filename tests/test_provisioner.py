"""
Tests for the daily provisioner.
"""

import asyncio
import json

import pytest

from conftest import PUZZLE, SOLUTION, TODAY
from daily_puzzles.entities import PuzzleKind
from daily_puzzles.errors import GenerationError, ProvisionError
from daily_puzzles.services import SUCCESS_MESSAGE


def test_provision_writes_both_kinds_to_both_stores(provisioner, kv, records):
    """Test a fresh date gets one sudoku and one wordle in each store."""
    result = asyncio.run(provisioner.provision())

    assert result == {"message": SUCCESS_MESSAGE}
    assert [key for key, _ in kv.puts] == [f"sudoku:{TODAY}", f"wordle:{TODAY}"]
    assert json.loads(kv.data[f"sudoku:{TODAY}"]) == {"puzzle": PUZZLE, "solution": SOLUTION}
    assert kv.data[f"wordle:{TODAY}"] == "CRANE"
    assert records.rows[PuzzleKind.SUDOKU] == [{"date": TODAY, "puzzle": PUZZLE, "solution": SOLUTION}]
    assert records.rows[PuzzleKind.WORDLE] == [{"date": TODAY, "word": "CRANE"}]


def test_existing_sudoku_is_skipped(provisioner, kv, records, sudoku_source):
    """Test an existing sudoku row blocks regeneration but wordle is still handled."""
    records.rows[PuzzleKind.SUDOKU].append({"date": TODAY, "puzzle": "x", "solution": "y"})

    asyncio.run(provisioner.provision())

    assert sudoku_source.calls == 0
    assert f"sudoku:{TODAY}" not in kv.data
    assert len(records.rows[PuzzleKind.SUDOKU]) == 1
    assert kv.data[f"wordle:{TODAY}"] == "CRANE"
    assert records.rows[PuzzleKind.WORDLE] == [{"date": TODAY, "word": "CRANE"}]


def test_second_run_is_a_noop(provisioner, kv, records, sudoku_source, word_source):
    """Test repeated runs on the same date write nothing more."""
    asyncio.run(provisioner.provision())
    puts_after_first = list(kv.puts)

    result = asyncio.run(provisioner.provision())

    assert result == {"message": SUCCESS_MESSAGE}
    assert kv.puts == puts_after_first
    assert len(records.rows[PuzzleKind.SUDOKU]) == 1
    assert len(records.rows[PuzzleKind.WORDLE]) == 1
    assert sudoku_source.calls == 1
    assert word_source.calls == 1


def test_word_failure_raises_with_message(provisioner, kv, records, failing_word_source):
    """Test a word service failure aborts with its message and no wordle row."""
    with pytest.raises(ProvisionError, match="Failed to generate Wordle word"):
        asyncio.run(provisioner.provision())

    assert records.rows[PuzzleKind.WORDLE] == []
    assert f"wordle:{TODAY}" not in kv.data
    # Sudoku ran first and is kept
    assert len(records.rows[PuzzleKind.SUDOKU]) == 1


def test_sudoku_failure_prevents_wordle(provisioner, records, sudoku_source, word_source):
    """Test a sudoku failure aborts the run before wordle is attempted."""
    sudoku_source.error = GenerationError("Failed to generate Sudoku puzzle")

    with pytest.raises(ProvisionError, match="Sudoku"):
        asyncio.run(provisioner.provision())

    assert word_source.calls == 0
    assert records.rows[PuzzleKind.WORDLE] == []


def test_cache_write_failure_skips_relational_insert(provisioner, kv, records):
    """Test the relational row is not inserted when the cache write fails."""
    kv.fail_writes = True

    with pytest.raises(ProvisionError):
        asyncio.run(provisioner.provision())

    assert records.rows[PuzzleKind.SUDOKU] == []


def test_relational_failure_leaves_cache_entry(provisioner, kv, records):
    """Test a failed insert does not roll back the cache write."""
    records.fail_inserts.add(PuzzleKind.SUDOKU)

    with pytest.raises(ProvisionError, match="sudoku_puzzles"):
        asyncio.run(provisioner.provision())

    assert f"sudoku:{TODAY}" in kv.data
    assert records.rows[PuzzleKind.SUDOKU] == []


def test_today_uses_utc_date(provisioner):
    """Test the date key comes from the UTC calendar date."""
    assert provisioner.today() == TODAY


def test_concurrent_runs_in_one_process_write_once(provisioner, records, word_source):
    """Test overlapping runs for the same date are serialised."""

    async def overlapping():
        return await asyncio.gather(provisioner.provision(), provisioner.provision())

    results = asyncio.run(overlapping())

    assert all(r == {"message": SUCCESS_MESSAGE} for r in results)
    assert len(records.rows[PuzzleKind.SUDOKU]) == 1
    assert len(records.rows[PuzzleKind.WORDLE]) == 1
    assert word_source.calls == 1


def test_health_reports_each_store(provisioner, kv, records):
    """Test health reports the cache and database separately."""
    records.healthy = False

    assert provisioner.health() == {"cache": True, "database": False}


def test_blocking_store_calls_do_not_stall_the_event_loop(provisioner, records):
    """Test store I/O runs off the event loop so other requests keep being served."""
    records.delay = 0.1

    async def scenario():
        ticks = 0

        async def ticker():
            nonlocal ticks
            while True:
                ticks += 1
                await asyncio.sleep(0.01)

        task = asyncio.create_task(ticker())
        await provisioner.provision()
        task.cancel()
        return ticks

    assert asyncio.run(scenario()) > 5

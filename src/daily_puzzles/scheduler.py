"""Scheduled provisioning.

Three ways to run the daily job:

- trigger_scheduled(): fire-and-forget background task with its own
  error boundary; failures are logged, never raised to a caller.
- DailyScheduler: in-process loop started by the API lifespan when
  SCHEDULE_ENABLED=true.
- The cron entry point, for an external timer:

    daily-puzzles-cron
    python -m daily_puzzles.scheduler

  e.g. crontab: 5 0 * * * /path/to/venv/bin/daily-puzzles-cron
"""

import argparse
import asyncio
import contextlib
import logging
import sys

from daily_puzzles.config import configure_logging, settings
from daily_puzzles.container import Container
from daily_puzzles.errors import ProvisionError
from daily_puzzles.services import ProvisionerService

logger = logging.getLogger(__name__)

# Strong references so running tasks are not garbage collected
_background_tasks: set[asyncio.Task] = set()


async def _run_supervised(provisioner: ProvisionerService) -> None:
    try:
        result = await provisioner.provision()
        logger.info("Scheduled provisioning finished: %s", result["message"])
    except Exception:
        logger.exception("Scheduled provisioning failed")


def trigger_scheduled(provisioner: ProvisionerService) -> asyncio.Task:
    """Start provisioning as a detached background task.

    Must be called from within a running event loop. The returned task
    always completes without an exception (unless cancelled).

    Args:
        provisioner: The provisioner to run

    Returns:
        The background task
    """
    logger.info("Scheduled task started")
    task = asyncio.create_task(_run_supervised(provisioner), name="daily-puzzles-provision")
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)
    return task


class DailyScheduler:
    """Fires trigger_scheduled() on a fixed interval.

    Example:
        ```python
        scheduler = DailyScheduler(provisioner)
        scheduler.start()
        ...
        await scheduler.stop()
        ```
    """

    def __init__(
        self,
        provisioner: ProvisionerService,
        interval_seconds: float | None = None,
        run_on_start: bool = True,
    ) -> None:
        """Initialize the scheduler.

        Args:
            provisioner: The provisioner to run.
            interval_seconds: Seconds between runs. Defaults to settings.
            run_on_start: Fire immediately instead of after the first interval.
        """
        self._provisioner = provisioner
        self._interval = interval_seconds or settings.schedule_interval_seconds
        self._run_on_start = run_on_start
        self._task: asyncio.Task | None = None

    def start(self) -> None:
        """Start the loop on the running event loop."""
        if self._task is not None:
            return
        logger.info("Starting daily scheduler (every %ss)", self._interval)
        self._task = asyncio.create_task(self._loop(), name="daily-puzzles-scheduler")

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Daily scheduler stopped")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _loop(self) -> None:
        if not self._run_on_start:
            await asyncio.sleep(self._interval)
        while True:
            await trigger_scheduled(self._provisioner)
            await asyncio.sleep(self._interval)


async def run_once() -> bool:
    """Build the stores, provision today's puzzles once, and clean up.

    Returns:
        True on success, False if setup or provisioning failed
    """
    try:
        container = Container.create()
    except (RuntimeError, ValueError):
        # Missing Supabase credentials or a malformed REDIS_URL
        logger.exception("Failed to set up puzzle stores")
        return False

    try:
        result = await container.provisioner.provision()
        logger.info(result["message"])
        return True
    except ProvisionError:
        logger.exception("Provisioning failed")
        return False
    finally:
        await container.close()


def main(argv: list[str] | None = None) -> int:
    """Cron entry point."""
    parser = argparse.ArgumentParser(description="Provision today's sudoku and wordle puzzles.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper() if args.log_level else None)
    return 0 if asyncio.run(run_once()) else 1


if __name__ == "__main__":
    sys.exit(main())

"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Clients and services built once in lifespan, stored in app.state
    - Dependency functions retrieve from request.app.state
    - Clients closed on shutdown
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from daily_puzzles.config import settings
from daily_puzzles.container import Container
from daily_puzzles.handlers import PuzzleHandler
from daily_puzzles.scheduler import DailyScheduler

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> PuzzleHandler:
    """Dependency injection for PuzzleHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PuzzleHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "puzzle_handler", None)
    if handler is None:
        raise RuntimeError("PuzzleHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Container (repositories + services)
    2. Handler (HTTP endpoints) - stored in app.state.puzzle_handler
    3. DailyScheduler, when SCHEDULE_ENABLED=true

    Cleanup:
        Stops the scheduler, closes clients, removes state
    """
    container = Container.create()
    handler = PuzzleHandler(provisioner=container.provisioner, lookup=container.lookup)

    app.state.container = container
    app.state.puzzle_handler = handler

    scheduler: DailyScheduler | None = None
    if settings.schedule_enabled:
        scheduler = DailyScheduler(container.provisioner)
        scheduler.start()

    health = container.provisioner.health()
    logger.info("Puzzle services initialized (cache=%s, database=%s)", health["cache"], health["database"])

    yield

    if scheduler is not None:
        await scheduler.stop()
    await container.close()

    del app.state.puzzle_handler
    del app.state.container
    logger.info("Puzzle services shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[PuzzleHandler, Depends(get_handler)]

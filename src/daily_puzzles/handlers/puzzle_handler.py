"""HTTP handlers for puzzle operations.

A single endpoint is differentiated by query parameters:
    ?forceRun=true  run provisioning now
    ?key=<date>     return the puzzles cached for a date
Anything else is rejected with 400.
"""

import logging

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from daily_puzzles.dto import (
    DailyPuzzlesResponse,
    ErrorResponse,
    HealthCheckResponse,
    ProvisionResponse,
    SudokuItem,
)
from daily_puzzles.services import ProvisionerService, PuzzleLookupService

logger = logging.getLogger(__name__)


class PuzzleHandler:
    """HTTP handlers for provisioning and lookup.

    This handler delegates business logic to the services and handles
    HTTP-specific concerns like:
    - Choosing the operation from query parameters
    - Converting entities to DTOs
    - Mapping errors to status codes

    Example:
        ```python
        handler = PuzzleHandler(provisioner=provisioner, lookup=lookup)

        @app.get("/")
        async def puzzles(forceRun: str | None = None, key: str | None = None):
            return await handler.route(force_run=forceRun, key=key)
        ```
    """

    def __init__(
        self,
        provisioner: ProvisionerService,
        lookup: PuzzleLookupService,
    ) -> None:
        """Initialize the puzzle handler.

        Args:
            provisioner: Service that stores today's puzzles (required).
            lookup: Service that reads cached puzzles (required).
        """
        self._provisioner = provisioner
        self._lookup = lookup

    async def route(self, force_run: str | None, key: str | None) -> Response:
        """Dispatch GET / by query parameters.

        forceRun takes precedence over key; an empty key counts as missing.
        """
        if force_run == "true":
            return await self.force_run()

        if key:
            return await self.get_puzzles(key)

        return PlainTextResponse("Invalid request", status_code=status.HTTP_400_BAD_REQUEST)

    async def force_run(self) -> Response:
        """Handle GET /?forceRun=true.

        Returns:
            200 with the provisioning summary, or 500 with the error message
        """
        logger.info("Force run requested")
        try:
            result = await self._provisioner.provision()
        except Exception as e:
            logger.exception("Error in forceRun")
            return JSONResponse(
                ErrorResponse(error=str(e)).model_dump(),
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return JSONResponse(ProvisionResponse(**result).model_dump())

    async def get_puzzles(self, key: str) -> Response:
        """Handle GET /?key=<date>.

        Returns:
            200 with both fields, 404 if neither kind is cached, or
            500 if the store is unreachable or the cached sudoku is malformed
        """
        logger.info("Requested key: %s", key)
        try:
            puzzles = await self._lookup.get(key)
        except Exception:
            logger.exception("Error fetching puzzles")
            return PlainTextResponse(
                "Error fetching puzzles",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if puzzles is None:
            return PlainTextResponse("Not found", status_code=status.HTTP_404_NOT_FOUND)

        body = DailyPuzzlesResponse(
            sudoku=SudokuItem(**puzzles.sudoku.to_dict()) if puzzles.sudoku else None,
            wordle=puzzles.wordle,
        )
        return JSONResponse(body.model_dump())

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with per-store reachability
        """
        health = self._provisioner.health()
        cache_healthy = health["cache"]
        database_healthy = health["database"]
        is_healthy = cache_healthy and database_healthy

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cache_healthy=cache_healthy,
            database_healthy=database_healthy,
        )

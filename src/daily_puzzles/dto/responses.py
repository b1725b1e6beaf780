"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ProvisionResponse(BaseModel):
    """Response DTO for a forced provisioning run."""

    message: str = Field(..., description="Human-readable status message")


class ErrorResponse(BaseModel):
    """Response DTO for a failed provisioning run."""

    error: str = Field(..., description="Message of the error that aborted the run")


class SudokuItem(BaseModel):
    """Sudoku grid and solution as 81-character strings."""

    puzzle: str = Field(..., description="Grid row by row, blanks as '-'")
    solution: str = Field(..., description="Filled grid row by row")


class DailyPuzzlesResponse(BaseModel):
    """Response DTO for a puzzle lookup by date.

    Both fields are always present; a kind that is not cached is null.
    """

    sudoku: SudokuItem | None = Field(None, description="The day's sudoku, if cached")
    wordle: str | None = Field(None, description="The day's uppercase word, if cached")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the key-value store is reachable")
    database_healthy: bool = Field(..., description="Whether the relational store is reachable")

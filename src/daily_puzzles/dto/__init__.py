"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .responses import (
    DailyPuzzlesResponse,
    ErrorResponse,
    HealthCheckResponse,
    ProvisionResponse,
    SudokuItem,
)

__all__ = [
    "DailyPuzzlesResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "ProvisionResponse",
    "SudokuItem",
]

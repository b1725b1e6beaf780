"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable with in-memory fakes.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from daily_puzzles.services import ProvisionerService, PuzzleLookupService

    provisioner = ProvisionerService.create(
        key_value_store=kv,
        record_store=records,
        sudoku_source=sudoku,
        word_source=words,
    )
    await provisioner.provision()
    ```
"""

from .codec import decode_sudoku, encode_sudoku
from .lookup_service import PuzzleLookupService
from .provisioner_service import SUCCESS_MESSAGE, ProvisionerService

__all__ = [
    "SUCCESS_MESSAGE",
    "ProvisionerService",
    "PuzzleLookupService",
    "decode_sudoku",
    "encode_sudoku",
]

"""Error hierarchy for puzzle provisioning and retrieval.

Repositories translate library exceptions (Redis, PostgREST, httpx) into
these types so services and handlers never depend on a concrete backend.
"""


class PuzzleError(Exception):
    """Base class for all daily puzzle errors."""


class GenerationError(PuzzleError):
    """A puzzle source failed to produce a puzzle."""


class StoreWriteError(PuzzleError):
    """A key-value or relational write failed."""


class StoreReadError(PuzzleError):
    """A key-value lookup or relational query failed."""


class DecodeError(PuzzleError):
    """A cached value could not be decoded."""


class ProvisionError(PuzzleError):
    """Provisioning of today's puzzles was aborted."""

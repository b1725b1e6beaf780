"""Key-value store protocol.

Defines the fast cache the puzzles are served from. Keys look like
"sudoku:2024-05-01"; values are plain strings.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for key-value backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, key: str) -> str | None:
        """Read a value.

        Args:
            key: The key to read

        Returns:
            The stored string, or None if the key is absent

        Raises:
            StoreReadError: If the store cannot be reached
        """
        ...

    def put(self, key: str, value: str) -> None:
        """Write a value, overwriting any existing one.

        Args:
            key: The key to write
            value: The string value

        Raises:
            StoreWriteError: If the write fails
        """
        ...

    def health_check(self) -> bool:
        """Check if the store is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

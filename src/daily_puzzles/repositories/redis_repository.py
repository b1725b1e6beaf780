"""Redis implementation of KeyValueStore.

Plays the role of the puzzle cache: plain string values under
"<kind>:<date>" keys, no expiry.
"""

import redis

from daily_puzzles.config import get_redis_client
from daily_puzzles.errors import StoreReadError, StoreWriteError


class RedisKeyValueRepository:
    """Redis implementation of the key-value store.

    This class satisfies the KeyValueStore protocol through structural
    typing - no explicit inheritance needed.

    The client must be created with decode_responses=True so reads come
    back as str.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls, redis_client: redis.Redis | None = None) -> "RedisKeyValueRepository":
        """Factory method to create RedisKeyValueRepository with defaults.

        Args:
            redis_client: Redis client. If None, built from settings.

        Returns:
            Configured RedisKeyValueRepository
        """
        return cls(redis_client=redis_client)

    def get(self, key: str) -> str | None:
        """Read a value from Redis.

        Args:
            key: The key to read

        Returns:
            The stored string, or None if absent

        Raises:
            StoreReadError: If Redis cannot be reached
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise StoreReadError(f"Failed to read {key}: {e}") from e

        if isinstance(value, bytes):
            value = value.decode()
        return value  # type: ignore[return-value]

    def put(self, key: str, value: str) -> None:
        """Write a value to Redis.

        Args:
            key: The key to write
            value: The string value

        Raises:
            StoreWriteError: If the write fails
        """
        try:
            self._client.set(key, value)
        except redis.RedisError as e:
            raise StoreWriteError(f"Failed to write {key}: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except Exception:
            return False

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client

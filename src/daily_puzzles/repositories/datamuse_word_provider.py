"""Datamuse-based word provider.

Asks the Datamuse API for words matching a spelling pattern
("?????" = any five letters) and uses the first result as the
day's wordle answer.

API reference: https://www.datamuse.com/api/
"""

import logging

import httpx

from daily_puzzles.config import settings
from daily_puzzles.errors import GenerationError

logger = logging.getLogger(__name__)


class DatamuseWordProvider:
    """Datamuse implementation of the WordSource protocol.

    Example:
        ```python
        provider = DatamuseWordProvider.create()
        word = await provider.generate()
        print(word)  # "ABOUT"
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        pattern: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the word provider.

        Args:
            base_url: Words endpoint. Defaults to settings.word_api_url.
            pattern: Spelling pattern. Defaults to settings.word_pattern.
            timeout: Request timeout in seconds. Defaults to settings.
            client: Pre-built async client (tests inject a mock transport).
        """
        self._base_url = base_url or settings.word_api_url
        self._pattern = pattern or settings.word_pattern
        self._timeout = timeout or settings.word_api_timeout
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @classmethod
    def create(
        cls,
        base_url: str | None = None,
        pattern: str | None = None,
    ) -> "DatamuseWordProvider":
        """Factory method to create DatamuseWordProvider with defaults."""
        return cls(base_url=base_url, pattern=pattern)

    async def generate(self) -> str:
        """Fetch one word and uppercase it.

        Returns:
            The uppercase word

        Raises:
            GenerationError: On network errors, non-2xx responses,
                malformed bodies, or an empty result list
        """
        params = {"sp": self._pattern, "max": 1}

        try:
            response = await self.client.get(self._base_url, params=params)
            response.raise_for_status()
            words = response.json()
            if not words:
                raise GenerationError("No word found")
            return words[0]["word"].upper()

        except (httpx.HTTPError, GenerationError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error("Error fetching word from Datamuse API: %s", e)
            raise GenerationError("Failed to generate Wordle word") from e

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Relational store (Supabase)
    supabase_url: str = os.getenv("SUPABASE_URL", "")
    supabase_key: str = os.getenv("SUPABASE_KEY", "")

    # Key-value store (Redis)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Word service
    word_api_url: str = os.getenv("WORD_API_URL", "https://api.datamuse.com/words")
    word_pattern: str = os.getenv("WORD_PATTERN", "?????")
    word_api_timeout: float = float(os.getenv("WORD_API_TIMEOUT", "30"))

    # Sudoku generation: fraction of cells removed from the solved grid
    sudoku_difficulty: float = float(os.getenv("SUDOKU_DIFFICULTY", "0.4"))

    # In-process schedule
    schedule_enabled: bool = os.getenv("SCHEDULE_ENABLED", "false").lower() == "true"
    schedule_interval_seconds: int = int(os.getenv("SCHEDULE_INTERVAL_SECONDS", "86400"))

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 < self.sudoku_difficulty < 1:
            raise ValueError(
                f"SUDOKU_DIFFICULTY must be between 0 and 1 (exclusive), got {self.sudoku_difficulty}"
            )

        if self.schedule_interval_seconds <= 0:
            raise ValueError(
                f"SCHEDULE_INTERVAL_SECONDS must be positive, got {self.schedule_interval_seconds}"
            )

        if self.word_api_timeout <= 0:
            raise ValueError(f"WORD_API_TIMEOUT must be positive, got {self.word_api_timeout}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance for the puzzle key-value store."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )


def get_supabase_client() -> Client:
    """Create a Supabase client for the relational puzzle tables."""
    if not settings.supabase_url or not settings.supabase_key:
        raise RuntimeError("SUPABASE_URL and SUPABASE_KEY must be set")
    return create_client(settings.supabase_url, settings.supabase_key)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the app and the cron entry point."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
    )

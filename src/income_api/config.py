import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv
from redis import asyncio as aioredis

load_dotenv()


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Income store
    income_key_prefix: str = os.getenv("INCOME_KEY_PREFIX", "income")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    cors_allow_origins: tuple[str, ...] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
    )

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.income_key_prefix:
            raise ValueError("INCOME_KEY_PREFIX must not be empty")

        if not 1 <= self.api_port <= 65535:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> aioredis.Redis:
    """Create an asyncio Redis client instance.

    No connection is opened until the first command is sent.
    """
    return aioredis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )

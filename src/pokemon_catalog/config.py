import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Upstream PokeAPI
    pokeapi_base_url: str = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2")
    pokemon_total_count: int = int(os.getenv("POKEMON_TOTAL_COUNT", "1302"))
    # 0 fetches the whole reference list in one call
    list_page_size: int = int(os.getenv("POKEMON_LIST_PAGE_SIZE", "0"))
    http_timeout: float = float(os.getenv("HTTP_TIMEOUT", "30"))

    # Fetcher
    batch_size: int = int(os.getenv("FETCH_BATCH_SIZE", "20"))
    batch_delay: float = float(os.getenv("FETCH_BATCH_DELAY", "0.2"))

    # In-memory cache
    cache_ttl: int = int(os.getenv("CACHE_TTL", "3600"))  # 1 hour default

    # Persistent cache (Redis)
    persistent_cache_enabled: bool = os.getenv("PERSISTENT_CACHE_ENABLED", "true").lower() == "true"
    persistent_cache_ttl: int = int(os.getenv("PERSISTENT_CACHE_TTL", "86400"))  # 24 hours default
    persistent_cache_key: str = os.getenv("PERSISTENT_CACHE_KEY", "pokemon-data")
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 1 <= self.batch_size <= 100:
            raise ValueError(f"FETCH_BATCH_SIZE must be between 1 and 100, got {self.batch_size}")

        if self.batch_delay < 0:
            raise ValueError("FETCH_BATCH_DELAY must not be negative")

        if self.list_page_size < 0:
            raise ValueError("POKEMON_LIST_PAGE_SIZE must be 0 (single call) or a positive page size")

        if self.cache_ttl <= 0 or self.persistent_cache_ttl <= 0:
            raise ValueError("CACHE_TTL and PERSISTENT_CACHE_TTL must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )

import logging
import sys
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bowling_scores.schemas.game import MAX_PLAYERS as DEFAULT_MAX_PLAYERS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App config
    DEBUG: bool = False

    # Roster rules
    MAX_PLAYERS: int = DEFAULT_MAX_PLAYERS
    PLAYER_NAME_MIN_LENGTH: int = 2
    PLAYER_NAME_MAX_LENGTH: int = 20

    # Storage
    STORAGE_KEY_PREFIX: str = "BowlingApp"

    # Upstash Redis (optional, in-memory storage is used when unset)
    UPSTASH_REDIS_REST_URL: str | None = None
    UPSTASH_REDIS_REST_TOKEN: str | None = None

    @field_validator("MAX_PLAYERS")
    @classmethod
    def validate_max_players(cls, v: int) -> int:
        if not 1 <= v <= DEFAULT_MAX_PLAYERS:
            raise ValueError(f"MAX_PLAYERS must be between 1 and {DEFAULT_MAX_PLAYERS}")
        return v

    @field_validator("UPSTASH_REDIS_REST_URL")
    @classmethod
    def validate_redis_url(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith("https://"):
            raise ValueError("UPSTASH_REDIS_REST_URL must be a valid HTTPS URL")
        return v

    @field_validator("UPSTASH_REDIS_REST_TOKEN")
    @classmethod
    def validate_redis_token(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("UPSTASH_REDIS_REST_TOKEN cannot be empty")
        return v

    @property
    def redis_configured(self) -> bool:
        return bool(self.UPSTASH_REDIS_REST_URL and self.UPSTASH_REDIS_REST_TOKEN)


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the application."""
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Reduce noise from the Redis REST client
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.DEBUG)
    logger.info("Settings loaded successfully")
    logger.debug("Storage key prefix: %s", settings.STORAGE_KEY_PREFIX)
    logger.debug("Redis configured: %s", settings.redis_configured)
    return settings

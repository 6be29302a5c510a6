import secrets
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# URL schemes hosted Postgres providers hand out, mapped to the asyncpg driver
ASYNC_DRIVER_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Mod Queue"
    api_prefix: str = "/api"
    secret_key: str = Field(default_factory=lambda: secrets.token_urlsafe(32))
    access_token_expire_minutes: int = 60 * 24 * 7
    database_url: str = "sqlite+aiosqlite:///./modqueue.db"
    # CORS_ORIGINS='["https://queue.example"]'
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    db_init_max_retries: int = 5
    db_init_retry_interval_seconds: float = 2.0

    osu_api_key: str = ""
    osu_api_url: str = "https://osu.ppy.sh/api"
    osu_request_timeout_seconds: float = 10.0

    # Applied when an owner saves settings for the first time
    default_modes: List[str] = Field(default_factory=lambda: ["Standard"])
    default_cooldown_days: float = 7.0
    default_max_pending: int = 10

    @field_validator("database_url")
    @classmethod
    def ensure_async_driver(cls, value: str) -> str:
        for scheme, async_scheme in ASYNC_DRIVER_SCHEMES.items():
            if value.startswith(scheme):
                return async_scheme + value[len(scheme) :]
        return value


@lru_cache
def get_settings() -> Settings:
    return Settings()

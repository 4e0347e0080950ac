"""Connection defaults loaded from libpq-style PG* environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectSettings(BaseSettings):
    """Fallbacks for whatever a connection URL leaves out."""

    host: str = "localhost"
    port: int = Field(default=5432, ge=0, le=0xFFFF)
    user: str | None = None
    password: str | None = None
    dbname: str | None = Field(default=None, validation_alias="PGDATABASE")

    model_config = SettingsConfigDict(
        env_prefix="PG",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> ConnectSettings:
    """Return cached settings so env parsing only happens once."""

    return ConnectSettings()

"""
detective_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the store connection and HTTP listener.
- Hide credentials from repr/logging.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    All values come from `DETECTIVE_*` environment variables.

    The store can be given either as a full `database_url` or as discrete
    host/port/user/password/name fields; the discrete form wins once
    `db_host` is set.
    """

    model_config = SettingsConfigDict(env_prefix="DETECTIVE_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "detective-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Persistence
    database_url: str = Field(default="sqlite+aiosqlite:///./detective.db", repr=False)
    db_driver: str = "mysql+aiomysql"
    db_host: str | None = None
    db_port: int = 3306
    db_user: str = "admin"
    db_password: str = Field(default="", repr=False)
    db_name: str = "detective"
    # Create missing tables at startup. Off for databases managed by Alembic.
    db_synchronize: bool = False
    db_echo: bool = False

    # New cases are assigned to this detective.
    bootstrap_detective_id: str = "first"
    seed_bootstrap_detective: bool = False
    bootstrap_detective_name: str = "First Detective"

    def sqlalchemy_url(self) -> str | URL:
        if not self.db_host:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The MySQL driver (`aiomysql`) ships as the `mysql` extra; SQLite via aiosqlite is
# the zero-setup default for local runs and tests.

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Ledger Core API"
    database_url: str = "sqlite:///ledger_core.db"
    log_level: str = "INFO"
    sql_echo: bool = False
    sqlite_busy_timeout: float = 5.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="LEDGER_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ───────── Database ─────────
    DB_URL: str
    # Postgres 스키마 (SQLite는 None)
    DB_SCHEMA: str | None = None
    DB_ECHO: bool = False

    # ───────── Security ─────────
    BCRYPT_ROUNDS: int = 10

    # ───────── Logging ─────────
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()

"""
IdeaBoard – Application configuration.
Reads environment variables (and an optional .env file) via pydantic-settings.
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ──
    APP_NAME: str = "IdeaBoard"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = []

    # ── Database ──
    PGHOST: str = "localhost"
    PGPORT: int = 5432
    PGUSER: str = "postgres"
    PGPASSWORD: str = "postgres"
    PGDATABASE: str = "ideasdb"
    # Full SQLAlchemy URL; takes precedence over the PG* parts when set.
    DATABASE_URL: Optional[str] = None

    # ── JWT ──
    JWT_SECRET: str = "please_change_me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # ── Passwords ──
    PASSWORD_HASH_ROUNDS: int = 10

    # ── Behaviour switches ──
    ENFORCE_IDEA_OWNERSHIP: bool = False
    ENABLE_SCHEMA_ROUTES: bool = False
    CREATE_SCHEMA_ON_STARTUP: bool = False

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+asyncpg",
            username=self.PGUSER,
            password=self.PGPASSWORD,
            host=self.PGHOST,
            port=self.PGPORT,
            database=self.PGDATABASE,
        )
        return url.render_as_string(hide_password=False)


settings = Settings()

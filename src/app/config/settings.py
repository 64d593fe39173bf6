from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import normalize_choice, normalize_url_prefix


class Settings(BaseSettings):
    """
    Application settings loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"
    APP_NAME: str = "warehouse-api"
    API_PREFIX: str = "/api/v1"

    # Database configuration
    DB_DIALECT: str = "postgresql"
    DB_DRIVER: str = "asyncpg"
    DB_USERNAME: str = "postgres"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "warehouse"

    # Test database configuration
    TEST_DB_NAME: str | None = None
    TESTING: bool = False

    # SQLAlchemy
    SQLALCHEMY_ECHO: bool = False

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/warehouse-api")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5
    ENABLE_SQL_LOGGING: bool = False

    # Queue-backed logging
    LOG_USE_QUEUE: bool = False
    LOG_QUEUE_MAX_SIZE: int = 0
    LOG_QUEUE_BLOCKING: bool = False
    LOG_QUEUE_DROP_WARNING_THRESHOLD: int = 100

    # --- Derived settings ---
    def _build_url(self, database: str) -> str:
        return (
            f"{self.DB_DIALECT}+{self.DB_DRIVER}://"
            f"{self.DB_USERNAME}:{self.DB_PASSWORD}@"
            f"{self.DB_HOST}:{self.DB_PORT}/"
            f"{database}"
        )

    @property
    def DATABASE_URL(self) -> str:
        """
        Return the database URL for the current environment.

        When `TESTING=True` and `TEST_DB_NAME` is provided the URL points at the
        test database so a test run never touches the regular one.
        """
        if self.TESTING and self.TEST_DB_NAME:
            return self._build_url(self.TEST_DB_NAME)
        return self._build_url(self.DB_NAME)

    # --- Validators ---
    @field_validator("ENV", mode="before")
    def normalize_env(cls, v: str | None) -> str | None:
        return normalize_choice(v)

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before Literal validation runs,
        so `LOG_LEVEL=debug` in the environment is accepted.
        """
        return normalize_choice(v, upper=True)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_FORMAT environment variable value to lowercase.
        """
        return normalize_choice(v)

    @field_validator("API_PREFIX")
    def normalize_api_prefix(cls, v: str) -> str:
        return normalize_url_prefix(v)

    model_config = SettingsConfigDict(
        # .env next to the `app` package (src/.env)
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Settings come from the process environment only, so one cached instance is enough.
@lru_cache()
def get_settings() -> Settings:
    return Settings()

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Content tree (None = current working directory)
    ROOT_DIR: Path | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None
    SLACK_WEBHOOK_URL: str | None = None

    # Build behaviour
    EVENT_DATE_FROM_FILENAME: bool = False  # builder falls back to "YYYY-MM-DD-" filename prefix

    # Validation report
    REPORT_LIMIT: int = 200
    MAX_TAG_LENGTH: int = 64

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "dev"

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def root_dir(self) -> Path:
        """Content root the pipeline reads from and writes to."""
        return (self.ROOT_DIR or Path.cwd()).resolve()


settings = Settings()

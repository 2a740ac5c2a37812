"""
Application configuration settings.
"""

import logging
import os
from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with environment variable loading.
    """

    # Project info
    PROJECT_NAME: str = "skillkit"
    VERSION: str = "0.1.0"

    # Environment settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "warning"

    # Sentry settings
    SENTRY_DSN: str = ""

    # Skill settings
    SKILL_MANIFEST_NAME: str = "SKILL.md"
    ARCHIVE_COMMAND: str = "zip"

    # Hook settings
    LINT_COMMAND: list[str] = ["bun", "lint"]
    CLAUDE_HOME: Path = Path.home() / ".claude"
    TTS_SCRIPT_NAME: str = "hooks/play-tts.sh"
    TTS_MUTE_FLAG: str = "agentvibes-muted"
    TTS_MESSAGE_MAX_LENGTH: int = 120

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, value: str) -> str:
        """Validate environment setting."""
        allowed_environments = ["development", "testing", "production"]
        if value.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return value.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate and normalize log level.

        Accepts case-insensitive log level but returns uppercase for consistency.
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

        if value.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return value.upper()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        """Initialize settings and configure logging on stderr."""
        super().__init__(**kwargs)

        logging.basicConfig(
            format="%(asctime)s %(levelname)-8s %(name)s %(message)s",
            level=self.LOG_LEVEL,
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        env_vars = {k: v for k, v in os.environ.items() if k in self.__dict__}

        logger.info(f"Running in {self.ENVIRONMENT} mode | Log level: {self.LOG_LEVEL}")
        logger.debug("Environment variables:")
        for key, value in env_vars.items():
            logger.debug(f"{key}={value}")

    @property
    def tts_script_path(self) -> Path:
        return self.CLAUDE_HOME / self.TTS_SCRIPT_NAME


# Create settings instance
settings = Settings()

"""
Configuration for the Text Metrics Engine
=========================================

Service-level defaults loaded from the environment (and an optional .env
file). The analysis engine itself never reads configuration: the router,
the CLI and the report builder pass these values in explicitly.
"""

import logging
import os
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

TRUTHY_ENV_VALUES = {"1", "true", "yes", "on"}


def _int_from_env(name: str, current: int, minimum: int = 1) -> int:
    """Read an integer override of at least ``minimum``; invalid values keep ``current``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return current
    try:
        parsed = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r; keeping %d", name, raw, current)
        return current
    if parsed < minimum:
        logger.warning("Ignoring %s=%d below %d; keeping %d", name, parsed, minimum, current)
        return current
    return parsed


def _bool_from_env(name: str, current: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return current
    return raw.strip().lower() in TRUTHY_ENV_VALUES


class Config(BaseModel):
    """Configuration settings for the Text Metrics Engine."""

    # FastAPI Configuration
    APP_HOST: str = Field(default="0.0.0.0", description="FastAPI host")
    APP_PORT: int = Field(default=8000, description="FastAPI port")
    APP_RELOAD: bool = Field(default=False, description="FastAPI reload mode")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    # Analysis defaults
    DEFAULT_WORDS_PER_MINUTE: int = Field(default=250, gt=0, description="Reading speed for reading-time estimates")
    DEFAULT_TOP_WORDS: int = Field(default=10, ge=0, description="Number of top words returned by statistics")
    MAX_TEXT_LENGTH: int = Field(default=200_000, gt=0, description="Largest text accepted by the HTTP API")

    def __init__(self, load_environment: bool = True, **data):
        super().__init__(**data)
        if load_environment:
            self.load_from_environment()

    def load_from_environment(self) -> None:
        """Apply environment overrides on top of the current values."""
        self.APP_HOST = os.getenv("APP_HOST", self.APP_HOST)
        self.APP_PORT = _int_from_env("APP_PORT", self.APP_PORT)
        self.APP_RELOAD = _bool_from_env("APP_RELOAD", self.APP_RELOAD)

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", self.LOG_LEVEL).upper()

        self.DEFAULT_WORDS_PER_MINUTE = _int_from_env(
            "DEFAULT_WORDS_PER_MINUTE", self.DEFAULT_WORDS_PER_MINUTE
        )
        self.DEFAULT_TOP_WORDS = _int_from_env("DEFAULT_TOP_WORDS", self.DEFAULT_TOP_WORDS, minimum=0)
        self.MAX_TEXT_LENGTH = _int_from_env("MAX_TEXT_LENGTH", self.MAX_TEXT_LENGTH)


# Global configuration instance
config = Config()


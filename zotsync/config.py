"""Runtime configuration for zotsync tooling."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseModel):
    """Main application configuration."""

    store_path: str = Field(default="data/settings.json", description="JSON settings store used by the CLI")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> str:
        """Normalize and check the log level name."""
        level = str(v or "WARNING").strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> "AppConfig":
        """
        Load configuration from environment variables.

        Environment variable mapping:
        - ZOTSYNC_STORE_PATH: path of the JSON settings store
        - ZOTSYNC_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
        - ZOTSYNC_DEBUG: true or false (forces DEBUG logging)
        """
        debug = os.getenv("ZOTSYNC_DEBUG", "false").lower() == "true"
        return cls(
            store_path=os.getenv("ZOTSYNC_STORE_PATH", "data/settings.json"),
            debug=debug,
            log_level="DEBUG" if debug else os.getenv("ZOTSYNC_LOG_LEVEL", "WARNING"),
        )


def configure_logging(config: AppConfig) -> None:
    """Configure root logging from the application config."""
    logging.basicConfig(level=getattr(logging, config.log_level), format=LOG_FORMAT)

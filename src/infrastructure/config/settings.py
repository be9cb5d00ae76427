"""Centralized configuration management using environment variables

Provides a single source of truth for application configuration with
validation and type safety.
"""

import logging
import os

from dotenv import load_dotenv

from src.application.exceptions import (
    ConfigurationError,
    InvalidConfigException,
    MissingConfigException,
)


logger = logging.getLogger(__name__)

DEFAULT_KOKKAI_API_BASE_URL = "https://kokkai.ndl.go.jp/api"
DEFAULT_SERVER_NAME = "kokkai-giji-mcp"
SERVER_VERSION = "1.0.0"

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    def __init__(self) -> None:
        """Initialize settings from environment variables

        Raises:
            InvalidConfigException: If configuration values are invalid
        """
        # Kokkai API configuration
        self.kokkai_api_base_url: str = os.getenv(
            "KOKKAI_API_BASE_URL", DEFAULT_KOKKAI_API_BASE_URL
        ).rstrip("/")

        try:
            self.kokkai_api_timeout: float = float(
                os.getenv("KOKKAI_API_TIMEOUT", "30")
            )
            if self.kokkai_api_timeout <= 0:
                raise ValueError("Timeout must be greater than 0")
        except ValueError as e:
            logger.error(f"Invalid KOKKAI_API_TIMEOUT value: {e}")
            raise InvalidConfigException(
                "KOKKAI_API_TIMEOUT",
                os.getenv("KOKKAI_API_TIMEOUT") or "",
                f"Invalid timeout value: {str(e)}",
            ) from e

        # MCP server identity
        self.server_name: str = os.getenv("MCP_SERVER_NAME", DEFAULT_SERVER_NAME)
        self.server_version: str = SERVER_VERSION

    def validate(self) -> None:
        """Validate required settings

        Raises:
            MissingConfigException: If required configuration is missing
            InvalidConfigException: If configuration is invalid
        """
        if not self.kokkai_api_base_url:
            raise MissingConfigException(
                "KOKKAI_API_BASE_URL", "KOKKAI_API_BASE_URL is required"
            )

        if not self.kokkai_api_base_url.startswith(("http://", "https://")):
            raise InvalidConfigException(
                "KOKKAI_API_BASE_URL",
                self.kokkai_api_base_url,
                "must be an http(s) URL",
            )

    @property
    def debug(self) -> bool:
        """Check if debug mode is enabled"""
        return os.getenv("DEBUG", "false").lower() == "true"

    @property
    def log_level(self) -> str:
        """Get the logging level"""
        if self.debug:
            return "DEBUG"
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance
try:
    settings: Settings | None = Settings()
except ConfigurationError as e:
    logger.error(f"Failed to load settings: {e}")
    settings = None


def get_settings() -> Settings:
    """Get the global settings instance

    Returns:
        Global Settings instance

    Raises:
        ConfigurationError: If settings failed to load
    """
    if settings is None:
        raise ConfigurationError(
            "Settings failed to initialize. Check your environment configuration."
        )
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment

    Returns:
        New Settings instance

    Raises:
        ConfigurationError: If settings fail to load
    """
    global settings
    settings = Settings()
    logger.info("Settings reloaded successfully")
    return settings

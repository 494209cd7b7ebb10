"""
Configuration management for the Travel Recommender.

This module handles loading configuration for the recommendation gateway
and the client composer from environment variables (and an optional
.env file), providing typed defaults for every setting.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_GATEWAY_URL = "http://localhost:8080/api/getRecommendations"
MAX_IMAGES = 5
MAX_IMAGE_BYTES = 10 * 1024 * 1024


class LogLevel(str, Enum):
    """Log levels supported by the system."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class GatewayConfig(BaseModel):
    """Configuration injected into the recommendation gateway."""

    gemini_api_key: str | None = Field(default=None, description="Gemini API key")
    model: str = Field(default=DEFAULT_MODEL, description="Gemini model name")

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Create a GatewayConfig from environment variables."""
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.gemini_api_key)


class ComposerConfig(BaseModel):
    """Configuration for the client composer."""

    gateway_url: str = Field(
        default=DEFAULT_GATEWAY_URL, description="Recommendation endpoint URL"
    )
    max_images: int = Field(
        default=MAX_IMAGES, le=MAX_IMAGES, description="Max attachments"
    )
    max_image_bytes: int = Field(
        default=MAX_IMAGE_BYTES, description="Max size of a single image in bytes"
    )
    default_city: str = Field(default="Riga", description="Initial city value")
    request_timeout: float | None = Field(
        default=None, gt=0, description="Seconds allowed per gateway request"
    )

    @field_validator("max_images", "max_image_bytes")
    @classmethod
    def validate_positive(cls, value: int) -> int:
        """Validate limits are positive."""
        if value <= 0:
            raise ValueError(f"Limit must be positive, got {value}")
        return value

    @classmethod
    def from_env(cls) -> "ComposerConfig":
        """Create a ComposerConfig from environment variables."""
        return cls(
            gateway_url=os.getenv("GATEWAY_URL", DEFAULT_GATEWAY_URL),
            max_images=int(os.getenv("MAX_IMAGES", str(MAX_IMAGES))),
            max_image_bytes=int(os.getenv("MAX_IMAGE_BYTES", str(MAX_IMAGE_BYTES))),
            default_city=os.getenv("DEFAULT_CITY", "Riga"),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT") or 0) or None,
        )


class SystemConfig(BaseModel):
    """System-wide configuration."""

    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    environment: str = Field(
        default="development",
        description="Environment (development, staging, production)",
    )
    host: str = Field(default="127.0.0.1", description="Dev server host")
    port: int = Field(default=8080, description="Dev server port")
    log_file: str | None = Field(default=None, description="Optional log file")
    log_rotation: str = Field(default="10 MB", description="Log file rotation")

    @classmethod
    def from_env(cls) -> "SystemConfig":
        """Create a SystemConfig from environment variables."""
        return cls(
            log_level=LogLevel(os.getenv("LOG_LEVEL", "INFO").upper()),
            environment=os.getenv("ENVIRONMENT", "development"),
            log_file=os.getenv("LOG_FILE") or None,
            log_rotation=os.getenv("LOG_ROTATION", "10 MB"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8080")),
        )


@dataclass
class RecommenderConfig:
    """Main configuration class for the Travel Recommender."""

    gateway: GatewayConfig = field(default_factory=GatewayConfig.from_env)
    composer: ComposerConfig = field(default_factory=ComposerConfig.from_env)
    system: SystemConfig = field(default_factory=SystemConfig.from_env)

    def validate(self) -> bool:
        """
        Check that the gateway can reach Gemini.

        A missing key is not fatal at startup: the gateway reports it
        on every request instead.

        Returns:
            True if the Gemini API key is present, False otherwise
        """
        if not self.gateway.is_configured:
            logger.warning(
                "GEMINI_API_KEY is not set. Every recommendation request will "
                "fail with a configuration error."
            )
            return False
        return True


def load_config(custom_config_path: str | None = None) -> RecommenderConfig:
    """
    Load the configuration, optionally from a custom .env file.

    Args:
        custom_config_path: Path to a custom .env file to load

    Returns:
        Loaded configuration object

    Raises:
        FileNotFoundError: If custom_config_path is provided but does not exist
    """
    if custom_config_path:
        if not os.path.exists(custom_config_path):
            error_msg = f"Custom configuration file not found: {custom_config_path}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)

        logger.info(f"Loading custom configuration from {custom_config_path}")
        load_dotenv(custom_config_path, override=True)

    return RecommenderConfig()

"""Configuration management for the Fitting Room proxy."""

import logging

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class GatewayConfig(BaseModel):
    """AI gateway connection settings."""
    url: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    model: str = "google/gemini-3-pro-image-preview"
    timeout: float = 300.0  # image generation can take minutes


class ProxyConfig(BaseSettings):
    """Main proxy configuration."""

    # Gateway credential (loaded from .env); absence is a deployment fault
    gateway_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LOVABLE_API_KEY", "GATEWAY_API_KEY"),
    )

    gateway: GatewayConfig = Field(default_factory=GatewayConfig)

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = ""
        env_nested_delimiter = "__"
        extra = "ignore"
        populate_by_name = True


def load_config() -> ProxyConfig:
    """Load configuration from environment and defaults."""
    return ProxyConfig()


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger.

    Safe to call more than once; handlers are only added the first time.
    """
    logger = logging.getLogger("fitting_room")
    logger.setLevel(level.upper())

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger


class ConfigurationError(RuntimeError):
    """A required deployment setting is missing."""

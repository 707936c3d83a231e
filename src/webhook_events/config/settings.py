"""
Settings for the webhook event consumer and publisher.
Values come from keyword arguments, EVENTS_* environment variables and .env.
"""

from functools import lru_cache

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.exceptions import ConfigurationError

DEFAULT_AUTH_HEADER = "X-Event-Auth-Token"


class EventSettings(BaseSettings):
    """
    Immutable configuration shared by the consumer and the publisher.

    Construction fails with ConfigurationError when no shared secret is set.
    """

    # === Shared secret ===
    event_auth_token: str = Field(
        default="", description="Shared secret expected on every event request"
    )
    auth_header: str = Field(
        default=DEFAULT_AUTH_HEADER, description="Header carrying the shared secret"
    )

    # === Publisher ===
    event_endpoint_url: str | None = Field(
        default=None, description="Remote endpoint receiving published events"
    )
    publish_timeout: float = Field(
        default=10.0, gt=0, description="Publish request timeout in seconds"
    )

    # === Standalone server ===
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Emit JSON structured logs")

    model_config = SettingsConfigDict(
        env_prefix="EVENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("auth_header")
    @classmethod
    def validate_auth_header(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Auth header name cannot be empty")
        return v.strip()

    @model_validator(mode="after")
    def require_auth_token(self) -> "EventSettings":
        if not self.event_auth_token.strip():
            raise ConfigurationError(
                message="event_auth_token is required",
                error_code="MISSING_AUTH_TOKEN",
                details={"env_var": "EVENTS_EVENT_AUTH_TOKEN"},
            )
        return self

    def log_configuration(self):
        """Log configuration (without sensitive data)."""
        logger.info("=== WEBHOOK EVENTS CONFIGURATION ===")
        logger.info(f"Server: {self.host}:{self.port}")
        logger.info(f"Log Level: {self.log_level}")
        logger.info(f"Auth Header: {self.auth_header}")
        logger.info(f"Event Endpoint: {self.event_endpoint_url or 'Not configured'}")
        logger.info("====================================")


@lru_cache
def get_settings() -> EventSettings:
    """Get settings loaded from the environment, cached per process."""
    return EventSettings()

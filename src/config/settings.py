"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def parse_comma_separated_list(value: str | list[str] | None) -> list[str]:
    """Parse comma-separated string or return as-is if already a list.

    Args:
        value: Comma-separated string or list

    Returns:
        List of stripped, non-empty strings

    """
    if value is None:
        return []
    if isinstance(value, list):
        return [item.strip() for item in value if item.strip()]
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Identity Contracts"
    app_version: str = "0.1.0"

    # Environment-specific settings
    environment: str = "development"  # development, staging, production

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Credential validation
    generic_validation_error: str = "Invalid registration details"
    default_identifiers: str = "email"
    require_password_confirmation: bool = True
    enforce_password_strength: bool = False
    password_min_length: int = 8

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        valid_formats = {"json", "console"}
        fmt = str(v).lower()
        if fmt not in valid_formats:
            raise ValueError(f"Log format must be one of {valid_formats}, got {fmt}")
        return fmt

    @field_validator("password_min_length")
    @classmethod
    def validate_password_min_length(cls, v: int) -> int:
        """Validate that the minimum password length is positive."""
        if v < 1:
            raise ValueError("Password minimum length must be at least 1")
        return v

    def get_default_identifiers(self) -> list[str]:
        """Get the identifier kinds used when a caller does not choose any.

        Values are returned as configured. Membership in the identifier
        enumeration is checked by the schema builder.
        """
        identifiers = parse_comma_separated_list(self.default_identifiers)
        logger.debug(f"Default identifiers: {identifiers}")
        return identifiers


settings = Settings()

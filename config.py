"""
Configuration management using Pydantic Settings.
Validates all environment variables at startup for fail-fast behavior.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings with validation."""

    # Scoring settings
    HOUSEHOLD_SIZE_POLICY: str = Field(
        default="reject",
        description="What to do with a household of 0 people: 'reject' (422) or 'clamp' (treat as 1)"
    )
    EXPIRY_WARNING_DAYS: int = Field(
        default=30,
        ge=0,
        le=365,
        description="Flag items expiring within this many days (0-365, default: 30)"
    )

    # Frontend settings
    FRONTEND_ORIGIN: str = Field(
        default="http://localhost:3000",
        description="Frontend origin for CORS (no wildcard allowed)"
    )

    # Logging
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v_upper

    @field_validator("HOUSEHOLD_SIZE_POLICY")
    @classmethod
    def validate_household_size_policy(cls, v: str) -> str:
        v_lower = v.strip().lower()
        if v_lower not in {"reject", "clamp"}:
            raise ValueError("HOUSEHOLD_SIZE_POLICY must be 'reject' or 'clamp'")
        return v_lower

    @field_validator("FRONTEND_ORIGIN")
    @classmethod
    def validate_no_wildcard_origin(cls, v: str) -> str:
        """Prevent wildcard CORS origin."""
        if v == "*":
            raise ValueError(
                "FRONTEND_ORIGIN cannot be '*' (wildcard). "
                "Set explicit origin or leave unset for localhost:3000 default."
            )
        return v


# Global settings instance
settings = Settings()

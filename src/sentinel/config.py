"""
SecurePay Sentinel configuration management using pydantic-settings.
"""

import warnings

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    # Application Settings
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Security - CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow credentials in CORS"
    )

    # Security - Rate Limiting
    rate_limit_requests: int = Field(
        default=100, description="Rate limit requests per window"
    )
    rate_limit_window_seconds: int = Field(
        default=60, description="Rate limit window in seconds"
    )

    # Risk policy
    risk_amount_threshold: float = Field(
        default=1000,
        description="Amounts strictly above this are flagged as unusually high",
    )
    risk_high_risk_locations: list[str] = Field(
        default=["North Korea", "Syria", "Iran"],
        description="Location fragments matched case-insensitively",
    )
    risk_velocity_probability: float = Field(
        default=0.1,
        description="Chance that the simulated velocity rule fires",
    )
    risk_medium_threshold: int = Field(
        default=40, description="Lowest score banded as Medium"
    )
    risk_high_threshold: int = Field(
        default=80, description="Lowest score banded as High"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level to an upper-case logging name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("risk_velocity_probability")
    @classmethod
    def validate_velocity_probability(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("RISK_VELOCITY_PROBABILITY must be between 0 and 1")
        return v

    @model_validator(mode="after")
    def validate_risk_bands(self) -> "Settings":
        """Band floors must be ordered inside the 0-100 score range."""
        if not 0 < self.risk_medium_threshold < self.risk_high_threshold <= 100:
            raise ValueError(
                "Risk thresholds must satisfy 0 < MEDIUM < HIGH <= 100"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Ensure critical settings are configured in production."""
        if self.environment == "production":
            if self.debug:
                raise ValueError("DEBUG must be False in production")
            if any("localhost" in origin for origin in self.cors_origins):
                warnings.warn(
                    "CORS_ORIGINS contains 'localhost' in production",
                    UserWarning,
                    stacklevel=2,
                )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Global settings instance
settings = Settings()

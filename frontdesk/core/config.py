"""Configuration settings for the front-desk core."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with Pydantic validation."""

    # Environment settings
    environment: str = Field(
        default="development",
        description="Application environment"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Application log level"
    )

    hotel_name: str = Field(
        default="Horizon Hotel",
        description="Hotel name used in log context"
    )

    # List screen settings
    default_page_size: int = Field(
        default=10,
        ge=1,
        description="Page size for booking, report, TM.30 and user screens"
    )

    directory_page_size: int = Field(
        default=20,
        ge=1,
        description="Page size for room and customer screens"
    )

    page_button_window: int = Field(
        default=5,
        ge=1,
        description="Maximum number of page buttons shown at once"
    )

    # Timer settings
    highlight_window_seconds: float = Field(
        default=3.0,
        gt=0,
        description="How long a navigated-to row stays highlighted"
    )

    notification_seconds: float = Field(
        default=5.0,
        gt=0,
        description="How long a success/error notification stays visible"
    )

    dashboard_recent_limit: int = Field(
        default=5,
        ge=1,
        description="Number of recent check-ins listed on the dashboard"
    )

    seed_demo_data: bool = Field(
        default=True,
        description="Seed the in-memory store with the demo dataset on startup"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_environments = ["development", "staging", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @property
    def debug(self) -> bool:
        """Return True if in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Return True if in production mode."""
        return self.environment == "production"

    model_config = {
        "env_prefix": "FRONTDESK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global settings instance
settings = Settings()

"""Configuration settings loaded from environment variables."""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pricing
    premium_discount_rate: Decimal = Field(default=Decimal("0.15"), ge=0, lt=1)
    currency_symbol: str = "$"

    # Logging
    log_level: str = "INFO"

    # Application
    app_name: str = "hotel-reservations"
    environment: str = "development"


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    return Settings()

"""Configuration management for the fleet console."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application
    # ==========================================================================
    APP_NAME: str = "Fleet Console"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    # ==========================================================================
    # Backend
    # ==========================================================================
    API_BASE_URL: str = Field(
        default="http://localhost:3001",
        description="Base URL of the fleet REST backend",
    )

    # ==========================================================================
    # Business Rules
    # ==========================================================================
    # Revenue uses a flat price, not the product's own price
    DEFAULT_PRICE_PER_UNIT: float = 50.0

    # Assumed average vehicle speed for ETAs
    DEFAULT_SPEED_KMH: float = 40.0

    # Stock bands: <= 0 empty, < critical, < low, otherwise normal
    CRITICAL_STOCK_THRESHOLD: int = 100
    LOW_STOCK_THRESHOLD: int = 500

    DEFAULT_CURRENCY: str = "INR"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience alias
settings = get_settings()


# ==========================================================================
# Display tables
# ==========================================================================
DELIVERY_STATUS_COLORS: dict[str, str] = {
    "Completed": "#48BB78",
    "In Progress": "#4299E1",
    "Pending": "#F6AD55",
    "Failed": "#F56565",
}

MONTH_NAMES: list[str] = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Sunday first, matching the console's week charts
DAY_NAMES: list[str] = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

CURRENCY_SYMBOLS: dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

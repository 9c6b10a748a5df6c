"""
Configuration management for QuickCalc.

Settings are read from environment variables (QUICKCALC_ prefix) and an
optional .env file, with defaults suited to local use.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="QUICKCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "QuickCalc"
    debug: bool = False
    log_level: LogLevel = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )


class DisplayConfig(BaseSettings):
    """How results are rendered for people."""

    model_config = SettingsConfigDict(
        env_prefix="QUICKCALC_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Magnitudes outside [small_threshold, large_threshold) use exponent notation
    small_threshold: float = 1e-6
    large_threshold: float = 1e9
    exponent_digits: int = Field(8, ge=0, le=20)

    # Fixed notation
    max_fraction_digits: int = Field(10, ge=0, le=15)
    group_thousands: bool = True


# Global settings instances
settings = Settings()
display_config = DisplayConfig()

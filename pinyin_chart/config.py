"""
Configuration management using Pydantic BaseSettings.

Values come from PINYIN_CHART_* environment variables or a .env file:
- PINYIN_CHART_SCRIPT / PINYIN_CHART_DISPLAY_MODE: API defaults
- PINYIN_CHART_DATABASE_URL: review-choice store
- PINYIN_CHART_BASELINE_FILE: baseline JSON for the review diff
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Phonetic defaults
    script: str = "urdu"
    display_mode: str = "joined"

    # Database Configuration (None = SQLite file under data/)
    database_url: Optional[str] = None

    # Review diff baseline (None = data/baseline_pinyin_data.json)
    baseline_file: Optional[str] = None

    # Optional JSON rule table replacing the built-in Urdu table
    rule_table_file: Optional[str] = None

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = "*"

    # Logging Configuration
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PINYIN_CHART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields in .env file
    )


# Global settings instance
settings = Settings()

"""
Configuration management for the Toyota part number backend.
Uses pydantic-settings for environment variable handling.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # API Configuration
    api_title: str = "Toyota Part Number API"
    api_version: str = "1.0.0"
    debug: bool = False

    # Parsing Configuration
    remove_non_alphanumeric_characters: bool = False  # API default when the request doesn't say
    bulk_validate_noise_stripping: bool = True  # validate_part_numbers.py default; --strict turns it off
    max_bulk_items: int = 1000


# Global settings instance
settings = Settings()

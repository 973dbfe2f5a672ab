# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to source URLs, browser options, output paths and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="ROCKET_LINEUPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Source pages
    host_url: str = Field(default="https://pokemongohub.net", description="Base URL of the guide site")
    grunt_guide_path: str = Field(
        default="/post/guide/team-go-rocket-battle-guide/", description="Path of the grunt battle guide page"
    )
    portrait_base_url: str = Field(
        default="https://raw.githubusercontent.com/pmgo-professor-willow/data-pokemongohub/main/assets/",
        description="Base URL for adversary portrait images",
    )

    # Species reference data
    species_data: str | None = Field(
        default=None, description="Path or http(s) URL of the species JSON used for fuzzy name lookup"
    )

    # Output
    output_dir: Path = Field(default=Path("./artifacts"), description="Directory the dataset files are written to")

    # Browser
    headless: bool = Field(default=True, description="Run the browser without a visible window")
    page_timeout_ms: int = Field(default=60000, description="Page load timeout in milliseconds")
    scroll_delay: float = Field(
        default=0.3, description="Seconds to pause between scroll steps so lazy images can load"
    )
    fetch_attempts: int = Field(
        default=1, ge=1, description="Attempts per guide page before the run is aborted (1 means no retry)"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance

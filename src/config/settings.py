"""
Centralized settings management using pydantic-settings.

All environment variables and configuration values are defined here.
Use get_settings() to access the singleton settings instance.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.constants import (
    BASE_CPANEL_URL,
    BASE_PREVIEW_URL,
    BASE_RENDER_URL,
)


# Repository root (src/config/settings.py -> repo)
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Optional environment variables:
        - ENVIRONMENT: Environment name (development, staging, production)
        - LOG_LEVEL: Minimum log level (default: INFO)
        - JSON_LOGS: Emit JSON logs instead of console output
        - CATALOG_DIR: Directory holding assets.json and templates.json.
          No catalog ships with the package, so set this before calling
          get_catalog() (the default data/catalog only exists if you add it)
        - PREVIEW_BASE_URL / CPANEL_BASE_URL / RENDER_BASE_URL: Image hosts
        - RANDOM_SEED: Seed for reproducible random avatars
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    # ==========================================================================
    # Logging
    # ==========================================================================
    log_level: str = Field(default="INFO", description="Minimum log level")
    json_logs: bool = Field(default=False, description="Emit JSON logs (production)")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # ==========================================================================
    # Catalog Configuration
    # ==========================================================================
    catalog_dir: Path = Field(
        default=PROJECT_ROOT / "data" / "catalog",
        description="Directory holding the static avatar catalog (not shipped; set CATALOG_DIR)"
    )
    assets_file: str = Field(
        default="assets.json",
        description="Traits and outfits document inside catalog_dir"
    )
    templates_file: str = Field(
        default="templates.json",
        description="Comic templates document inside catalog_dir"
    )

    @field_validator("catalog_dir", mode="before")
    @classmethod
    def parse_catalog_dir(cls, v):
        if isinstance(v, str):
            return Path(v)
        return v

    @property
    def assets_path(self) -> Path:
        return self.catalog_dir / self.assets_file

    @property
    def templates_path(self) -> Path:
        return self.catalog_dir / self.templates_file

    # ==========================================================================
    # Image Hosts
    # ==========================================================================
    preview_base_url: str = Field(
        default=BASE_PREVIEW_URL,
        description="Avatar builder preview host (trailing slash included)"
    )
    cpanel_base_url: str = Field(
        default=BASE_CPANEL_URL,
        description="Comic panel render host (trailing slash included)"
    )
    render_base_url: str = Field(
        default=BASE_RENDER_URL,
        description="Comic render host (trailing slash included)"
    )

    @field_validator("preview_base_url", "cpanel_base_url", "render_base_url")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else f"{v}/"

    # ==========================================================================
    # Randomness
    # ==========================================================================
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the shared random generator (None = unseeded)"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Uses lru_cache to ensure only one instance is created.
    Settings are loaded from environment variables and .env file.

    Returns:
        Settings: The application settings instance
    """
    env_file = PROJECT_ROOT / ".env"
    return Settings(_env_file=env_file if env_file.exists() else None)


def get_settings_for_testing(**overrides) -> Settings:
    """
    Create a settings instance for testing with optional overrides.

    This bypasses the cache to allow different settings in tests.

    Args:
        **overrides: Setting values to override

    Returns:
        Settings: A new settings instance with overrides applied
    """
    test_defaults = {
        "environment": "testing",
        "debug": True,
        "log_level": "DEBUG",
    }
    test_defaults.update(overrides)

    return Settings(_env_file=None, **test_defaults)

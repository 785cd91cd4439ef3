"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

This module implements the Singleton pattern to ensure a single global
configuration instance throughout the application lifecycle.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

Catalog Source Settings:
-----------------------
    GOOGLE_SERVICE_ACCOUNT_EMAIL        service account client email
    GOOGLE_SERVICE_ACCOUNT_PRIVATE_KEY  PEM key; literal "\\n" is accepted
    GOOGLE_SHEETS_SPREADSHEET_ID        spreadsheet holding the catalog
    GOOGLE_SHEETS_TAB_NAME              tab name (default "data")
    GOOGLE_SHEETS_RANGE                 A1 range within the tab (default "A1:K")
    SHEETS_CACHE_SECONDS                catalog cache TTL (default 30)

Security Considerations:
-----------------------
- Never commit .env files to version control
- The service account only needs read access to the spreadsheet

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Module logger
logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name for the application
        app_env: Environment mode (development/staging/production)
        debug: Enable debug mode for verbose logging
        host: Server bind address
        port: Server port number
        google_service_account_email: Service account client email
        google_service_account_private_key: Service account private key
        google_sheets_spreadsheet_id: Catalog spreadsheet identifier
        google_sheets_tab_name: Catalog tab name
        google_sheets_range: A1 range read from the tab
        sheets_cache_seconds: Catalog cache TTL in seconds
        cors_origins: Allowed CORS origins (JSON array string)

    Example:
        >>> settings = Settings()
        >>> settings.google_sheets_tab_name
        'data'
        >>> settings.sheets_cache_seconds
        30.0
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        # Load from .env file if present
        env_file=".env",
        env_file_encoding="utf-8",
        # Environment variables are case-insensitive
        case_sensitive=False,
        # Ignore extra environment variables
        extra="ignore",
        # Validate default values
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Liquidation Price Check",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode for verbose logging"
    )

    # =========================================================================
    # SERVER SETTINGS
    # =========================================================================
    host: str = Field(
        default="0.0.0.0",
        description="Server bind address"
    )

    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    # =========================================================================
    # GOOGLE SHEETS SETTINGS
    # =========================================================================
    google_service_account_email: Optional[str] = Field(
        default=None,
        description="Service account client email"
    )

    google_service_account_private_key: Optional[str] = Field(
        default=None,
        description="Service account private key (PEM)"
    )

    google_sheets_spreadsheet_id: Optional[str] = Field(
        default=None,
        description="Spreadsheet holding the catalog"
    )

    google_sheets_tab_name: str = Field(
        default="data",
        min_length=1,
        description="Tab holding the catalog"
    )

    google_sheets_range: str = Field(
        default="A1:K",
        min_length=1,
        description="A1 range read from the catalog tab"
    )

    # =========================================================================
    # CACHE SETTINGS
    # =========================================================================
    sheets_cache_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Catalog cache TTL in seconds"
    )

    # =========================================================================
    # CORS SETTINGS
    # =========================================================================
    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Unknown environments fall back to 'development'.
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("google_service_account_private_key")
    @classmethod
    def unescape_private_key(cls, value: Optional[str]) -> Optional[str]:
        """
        Restore newlines in a private key stored on one line.

        Keys copied into .env files usually carry literal ``\\n`` sequences.
        """
        if value is None:
            return None
        value = value.strip().strip('"').replace("\\n", "\n")
        return value or None

    @field_validator(
        "google_service_account_email",
        "google_sheets_spreadsheet_id",
    )
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def sheets_configured(self) -> bool:
        """Check whether every Google Sheets credential is present."""
        return all((
            self.google_service_account_email,
            self.google_service_account_private_key,
            self.google_sheets_spreadsheet_id,
        ))

    @property
    def cors_origins_list(self) -> List[str]:
        """
        Parse CORS origins from JSON string to list.

        Returns:
            List of allowed origin strings
        """
        try:
            origins = json.loads(self.cors_origins)
            if isinstance(origins, list):
                return origins
            return ["*"]
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid CORS origins JSON: {self.cors_origins}, "
                "defaulting to ['*']"
            )
            return ["*"]

    def __repr__(self) -> str:
        """String representation for debugging (never includes secrets)."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"tab={self.google_sheets_tab_name!r}, "
            f"cache_seconds={self.sheets_cache_seconds}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance (singleton pattern).

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings

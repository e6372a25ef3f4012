"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management using Pydantic Settings.

Features:
---------
- Environment variable loading with type validation
- .env file support for local development
- Computed properties for derived values
- Cached singleton access through get_settings()

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.catalog.discounts import DEFAULT_DISCOUNT_CODES


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
        api_prefix: Path prefix for REST routes
        products_file: Path to the external seed product list (JSON array)
        static_directory: Directory holding assets/ and client/ for static serving
        discount_codes: Discount codes as a JSON object string
        cors_origins: Allowed CORS origins (JSON array string)
        cors_max_age: Preflight cache lifetime in seconds

    Example:
        >>> settings = Settings()
        >>> settings.port
        3000
        >>> settings.discount_codes_map
        {'DUPA': 0.8}
    """

    # =========================================================================
    # PYDANTIC SETTINGS CONFIGURATION
    # =========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Catalog API",
        description="Display name for the application"
    )

    app_env: str = Field(
        default="development",
        description="Environment mode: development, staging, production"
    )

    debug: bool = Field(
        default=True,
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
        default=3000,
        ge=1,
        le=65535,
        description="Server port number"
    )

    api_prefix: str = Field(
        default="/api",
        description="Path prefix for REST routes"
    )

    # =========================================================================
    # CATALOG SETTINGS
    # =========================================================================
    products_file: str = Field(
        default="data/products.json",
        description="Path to the external seed product list"
    )

    discount_codes: str = Field(
        default=json.dumps(DEFAULT_DISCOUNT_CODES),
        description="Discount code to price ratio, as a JSON object string"
    )

    # =========================================================================
    # STATIC FILES / CORS SETTINGS
    # =========================================================================
    static_directory: str = Field(
        default="public",
        description="Directory with assets/ and client/ subdirectories"
    )

    cors_origins: str = Field(
        default='["*"]',
        description="Allowed CORS origins as JSON array string"
    )

    cors_max_age: int = Field(
        default=2_592_000,
        ge=0,
        description="Preflight cache lifetime in seconds"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """
        Validate and normalize application environment.

        Args:
            value: Raw environment value

        Returns:
            Lowercase normalized environment name
        """
        valid_envs = {"development", "staging", "production"}
        normalized = value.lower().strip()

        if normalized not in valid_envs:
            logger.warning(
                f"Unknown environment '{value}', defaulting to 'development'"
            )
            return "development"

        return normalized

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        """Normalize the prefix to a leading slash and no trailing slash."""
        value = value.strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "production"

    @property
    def products_path(self) -> Path:
        """Get products file as Path object."""
        return Path(self.products_file)

    @property
    def static_path(self) -> Path:
        """Get static directory as Path object."""
        return Path(self.static_directory)

    @property
    def discount_codes_map(self) -> Dict[str, float]:
        """
        Parse discount codes from JSON string to dict.

        Returns:
            Mapping of code to ratio; the built-in codes if the JSON is
            invalid or not an object
        """
        try:
            codes = json.loads(self.discount_codes)
        except json.JSONDecodeError:
            logger.warning(
                f"Invalid discount codes JSON: {self.discount_codes}, "
                "using built-in codes"
            )
            return dict(DEFAULT_DISCOUNT_CODES)

        if not isinstance(codes, dict):
            return dict(DEFAULT_DISCOUNT_CODES)
        return codes

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
        """String representation for debugging."""
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"app_env={self.app_env!r}, "
            f"debug={self.debug})"
        )


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the global Settings instance.

    Returns:
        Global Settings instance
    """
    settings = Settings()

    if settings.debug:
        logger.info(f"Configuration loaded: {settings}")

    return settings

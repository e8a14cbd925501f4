"""Configuration for the space explorer dashboard.

Settings come from environment variables; ``Config.to_dict()`` gives a
plain snapshot of them for logging.
"""

import os as _os
from typing import Dict, Any

from catalog.constants import DEFAULT_CATALOG_URL


class Config:
    """Base configuration class for organizing application settings."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary.

        Returns:
            Dictionary of all public config attributes
        """
        return {k: v for k, v in self.__dict__.items() if not k.startswith("_")}


class AppConfig(Config):
    """Application-level configuration loaded from environment variables.

    All env vars have sensible defaults so the application works out of the
    box without any configuration.

    Environment variables:
        APP_HOST: API server bind address (default: 127.0.0.1)
        APP_PORT: API server port (default: 8000)
        APP_LOG_FORMAT: Logging format, "text" or "json" (default: text)
        APP_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        CATALOG_URL: Solar-system catalogue endpoint
            (default: https://api.le-systeme-solaire.net/rest/bodies/)
        CATALOG_TIMEOUT: Catalogue request timeout in seconds (default: 30)
    """

    def __init__(self) -> None:
        super().__init__()
        self.api_host = _os.getenv("APP_HOST", "127.0.0.1")
        self.api_port = int(_os.getenv("APP_PORT", "8000"))
        self.log_format = _os.getenv("APP_LOG_FORMAT", "text")
        raw_origins = _os.getenv("APP_CORS_ORIGINS", "*")
        self.cors_origins: list[str] = (
            ["*"] if raw_origins == "*"
            else [o.strip() for o in raw_origins.split(",") if o.strip()]
        )
        self.catalog_url = _os.getenv("CATALOG_URL", DEFAULT_CATALOG_URL)
        self.catalog_timeout = float(_os.getenv("CATALOG_TIMEOUT", "30"))

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create an AppConfig instance populated from environment variables."""
        return cls()

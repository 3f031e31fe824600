"""
Asset Versioning Configuration Settings

All values are read from the environment once, at import time.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Versioning configuration settings."""

    # Version settings
    STATIC_VERSION: str = os.environ.get("VERSIONING_STATIC_VERSION", "")  # "" means unset
    QUERY_PARAM: str = os.environ.get("VERSIONING_QUERY_PARAM", "v")

    # Logging settings
    DEBUG: bool = os.environ.get("VERSIONING_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("VERSIONING_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()

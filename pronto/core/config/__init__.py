"""Configuration module for the Pronto client.

Usage:
    from pronto.core.config import settings, Environment

    if settings.ENVIRONMENT == Environment.PRD:
        ...
"""

from pronto.core.config.enums import Environment
from pronto.core.config.settings import Settings

__all__ = [
    "Settings",
    "Environment",
    "settings",
]

# Singleton settings instance
settings = Settings()
